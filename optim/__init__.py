# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Sapling — Tensor Optimizer Engine                                   ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""sapling.optim — Optimizers."""
from __future__ import annotations

from .optimizer import Optimizer, OptimizerConfig, RMSProp

__all__ = ['Optimizer', 'OptimizerConfig', 'RMSProp']
