# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Sapling — Tensor Optimizer Engine                                   ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""
Sapling — device-transparent tensors and per-parameter optimizers.

NumPy is the host backend; CuPy backs ``cuda`` tensors when a GPU is
present.  Optimizers are written once against :class:`Tensor` and run
unchanged on either.

Usage::

    import sapling
    from sapling.optim import RMSProp, OptimizerConfig

    value = sapling.zeros(4, device='cuda')
    value.copy_from_host([0.1, 0.2, 0.3, 0.4])
    grad = sapling.tensor([0.01, 0.02, 0.03, 0.04], device='cuda')

    opt = RMSProp(OptimizerConfig(rho=0.9, delta=1e-8))
    opt.apply(0, 0.1, 'w', grad, value)
    print(value.to_host().numpy())
"""
from __future__ import annotations

__version__ = "0.1.0"
__author__ = "Pictofeed, LLC"

# ── Core tensor class & factory functions ──
from .tensor import (
    Tensor,
    tensor,
    zeros, zeros_like,
    empty, full,
)

# ── Dtype constants ──
from .dtype import (
    dtype,
    float16, float32, float64,
    half, double,
)

# ── Device ──
from .device import device

# ── Errors ──
from .errors import (
    SaplingError,
    ConfigurationError,
    ShapeMismatch,
    DeviceMismatch,
    NotHostResident,
)

# ── Sub-packages ──
from . import cuda
from . import optim

__all__ = [
    "__version__",
    "__author__",

    # Tensor
    'Tensor', 'tensor', 'zeros', 'zeros_like', 'empty', 'full',
    # Dtypes
    'dtype', 'float16', 'float32', 'float64', 'half', 'double',
    # Device
    'device',
    # Errors
    'SaplingError', 'ConfigurationError', 'ShapeMismatch',
    'DeviceMismatch', 'NotHostResident',
    # Sub-packages
    'cuda', 'optim',
]
