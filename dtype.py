# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Sapling — Tensor Optimizer Engine                                   ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Fixed-width floating point element types."""
from __future__ import annotations

import enum
import numpy as np


class dtype(enum.Enum):
    """Sapling element types."""
    float16 = "float16"
    float32 = "float32"
    float64 = "float64"

    def to_numpy(self) -> np.dtype:
        """Convert to numpy dtype."""
        return np.dtype(self.value)

    @staticmethod
    def from_numpy(np_dtype) -> 'dtype':
        """Convert a numpy float dtype to a sapling dtype."""
        try:
            return dtype(np.dtype(np_dtype).name)
        except ValueError:
            raise TypeError(
                f"Unsupported element type {np.dtype(np_dtype)}; "
                f"expected one of {[d.value for d in dtype]}") from None

    @property
    def itemsize(self) -> int:
        return self.to_numpy().itemsize

    def __repr__(self) -> str:
        return f"sapling.{self.name}"


float16 = dtype.float16
float32 = dtype.float32
float64 = dtype.float64
half = dtype.float16
double = dtype.float64
