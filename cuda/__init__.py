# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Sapling — Tensor Optimizer Engine                                   ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""
sapling.cuda — CUDA runtime queries and host/device buffer transfer.

When CUDA is available (NVIDIA GPU + driver + CuPy), tensors placed on
``cuda:N`` hold real GPU buffers and elementwise math runs through
CuPy.  Otherwise ``cuda`` tensors keep a host buffer under the CUDA
placement tag, so device-transparent code still runs (and placement
rules are still enforced) on CPU-only machines.

Set ``SAPLING_NO_CUDA=1`` to ignore an installed CuPy.
"""
from __future__ import annotations

import logging
import os
from contextlib import contextmanager, nullcontext

import numpy as np

logger = logging.getLogger(__name__)

_NO_CUDA = os.environ.get('SAPLING_NO_CUDA', '0') == '1'

# ── Try importing CuPy ──
_cp = None
_CUPY_AVAILABLE = False
if _NO_CUDA:
    logger.debug('CuPy backend disabled by SAPLING_NO_CUDA')
else:
    try:
        import cupy as _cp
        _CUPY_AVAILABLE = True
    except ImportError as exc:
        logger.debug('CuPy backend unavailable: %s', exc)


def _get_device_count_safe() -> int:
    if not _CUPY_AVAILABLE:
        return 0
    try:
        return _cp.cuda.runtime.getDeviceCount()
    except Exception as exc:
        # No driver / no GPU: CuPy imports fine but the runtime refuses.
        logger.debug('CUDA runtime probe failed: %s', exc)
        return 0


_device_count_cache: int | None = None


# ================================================================
#  PUBLIC API — Device queries
# ================================================================

def is_available() -> bool:
    """Return True if CUDA is available (GPU + driver + CuPy)."""
    if not _CUPY_AVAILABLE:
        return False
    return device_count() > 0


def device_count() -> int:
    """Return the number of CUDA devices."""
    global _device_count_cache
    if _device_count_cache is None:
        _device_count_cache = _get_device_count_safe()
        logger.debug('Detected %d CUDA device(s)', _device_count_cache)
    return _device_count_cache


def get_device_name(index: int = 0) -> str:
    """Return the name of the given CUDA device."""
    if not is_available():
        return "Sapling-CPU"
    name = _cp.cuda.runtime.getDeviceProperties(index)['name']
    return name.decode() if isinstance(name, bytes) else str(name)


def current_device() -> int:
    """Return the index of the current CUDA device."""
    if not is_available():
        return 0
    return _cp.cuda.runtime.getDevice()


def synchronize(device=None) -> None:
    """Block until queued work on the device (default: current) finishes."""
    if not is_available():
        return
    index = current_device() if device is None else _index_of(device)
    _cp.cuda.Device(index).synchronize()


def is_resident(device) -> bool:
    """True when tensors placed on *device* hold real GPU buffers."""
    if device is None or device.type != 'cuda':
        return False
    return is_available() and device.index < device_count()


# ================================================================
#  Buffer dispatch / transfer
# ================================================================

def _index_of(device) -> int:
    if isinstance(device, int):
        return device
    return device.index or 0


def array_module(device):
    """Return the array namespace (``cupy`` or ``numpy``) for *device*."""
    if is_resident(device):
        return _cp
    return np


def device_scope(device):
    """Make *device* current for allocations made inside the block."""
    if is_resident(device):
        return _cp.cuda.Device(device.index)
    return nullcontext()


def upload(array: np.ndarray, device):
    """Copy a host array into a buffer owned by *device*."""
    if not is_resident(device):
        return np.array(array, copy=True)
    with _cp.cuda.Device(device.index):
        return _cp.array(array, copy=True)


def download(array) -> np.ndarray:
    """Copy any buffer (host or GPU) into a new host array."""
    if _CUPY_AVAILABLE and isinstance(array, _cp.ndarray):
        return _cp.asnumpy(array)
    return np.array(array, copy=True)


def copy_into(dst, src: np.ndarray) -> None:
    """Overwrite buffer *dst* (host or GPU) with host array *src*."""
    if _CUPY_AVAILABLE and isinstance(dst, _cp.ndarray):
        dst.set(np.ascontiguousarray(src, dtype=dst.dtype))
    else:
        np.copyto(dst, src)


@contextmanager
def device_ctx(device: int):
    """Context manager to temporarily switch CUDA device."""
    if not is_available():
        yield
        return
    with _cp.cuda.Device(device):
        yield


# ================================================================
#  EXPORTS
# ================================================================

__all__ = [
    # Availability
    'is_available', 'device_count', 'is_resident',
    # Device info / control
    'get_device_name', 'current_device', 'synchronize', 'device_ctx',
    # Buffers
    'array_module', 'device_scope', 'upload', 'download', 'copy_into',
]
