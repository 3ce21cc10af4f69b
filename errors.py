# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Sapling — Tensor Optimizer Engine                                   ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Exceptions raised by tensors and optimizers.

All of these are programmer errors: they are raised at the call that
detects them and are never retried or coerced internally.
"""
from __future__ import annotations


class SaplingError(RuntimeError):
    """Base class for all Sapling errors."""


class ConfigurationError(SaplingError):
    """An optimizer was used before ``setup()``."""


class ShapeMismatch(SaplingError, ValueError):
    """Operand shapes disagree."""


class DeviceMismatch(SaplingError):
    """Operands live on different devices."""


class NotHostResident(SaplingError):
    """Raw values of a device-resident tensor were requested."""


__all__ = [
    'SaplingError', 'ConfigurationError', 'ShapeMismatch',
    'DeviceMismatch', 'NotHostResident',
]
