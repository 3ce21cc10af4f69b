# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Sapling — Tensor Optimizer Engine                                   ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Core Tensor class backed by NumPy (host) or CuPy (CUDA)."""
from __future__ import annotations

import operator
import numpy as np
from typing import Any, Callable, Sequence

from . import cuda as _cuda
from .device import device as Device, CPU as _CPU_DEVICE
from .dtype import dtype as Dtype
from .errors import DeviceMismatch, NotHostResident, ShapeMismatch

_SCALAR_TYPES = (int, float, np.integer, np.floating)


def _is_scalar(x) -> bool:
    return isinstance(x, _SCALAR_TYPES) and not isinstance(x, bool)


def _rev(fn: Callable) -> Callable:
    return lambda a, b: fn(b, a)


class Tensor:
    """N-dimensional float array with a device placement.

    Elementwise operations require operands of identical shape on the
    same device; nothing is broadcast or moved implicitly.  Python
    scalars may be mixed in freely.
    """

    __slots__ = ('_data', '_device', '_version')

    # ------------------------------------------------------------------ #
    #  Construction                                                      #
    # ------------------------------------------------------------------ #

    def __init__(
        self,
        data: Any,
        dtype: Dtype | np.dtype | None = None,
        device: Device | str | None = None,
    ):
        keep_dtype = isinstance(data, (Tensor, np.ndarray))
        if isinstance(data, Tensor):
            arr = _cuda.download(data._data)
        else:
            arr = np.asarray(data)

        dev = _resolve_device(device)
        np_dtype = _resolve_dtype(dtype)
        if np_dtype is None:
            # Python sequences and non-float arrays default to float32.
            if keep_dtype and arr.dtype.kind == 'f':
                np_dtype = Dtype.from_numpy(arr.dtype).to_numpy()
            else:
                np_dtype = np.dtype(np.float32)

        self._data = _cuda.upload(arr.astype(np_dtype, copy=False), dev)
        self._device: Device = dev
        self._version: int = 0

    @staticmethod
    def _wrap(data, device: Device) -> 'Tensor':
        t = Tensor.__new__(Tensor)
        t._data = data
        t._device = device
        t._version = 0
        return t

    # ------------------------------------------------------------------ #
    #  Properties                                                        #
    # ------------------------------------------------------------------ #

    @property
    def shape(self) -> tuple:
        return tuple(self._data.shape)

    @property
    def ndim(self) -> int:
        return self._data.ndim

    @property
    def dtype(self) -> Dtype:
        return Dtype.from_numpy(self._data.dtype)

    @property
    def device(self) -> Device:
        return self._device

    @property
    def is_host(self) -> bool:
        return self._device.is_host

    def size(self, dim: int | None = None):
        s = self.shape
        if dim is not None:
            return s[dim]
        return s

    def dim(self) -> int:
        return self.ndim

    def numel(self) -> int:
        return int(self._data.size)

    def __len__(self) -> int:
        if self.ndim == 0:
            raise TypeError("len() of a 0-d tensor")
        return self.shape[0]

    def __repr__(self) -> str:
        data_str = repr(_cuda.download(self._data))
        if self.is_host:
            return f"tensor({data_str})"
        return f"tensor({data_str}, device='{self._device}')"

    # ------------------------------------------------------------------ #
    #  Helpers                                                            #
    # ------------------------------------------------------------------ #

    def _xp(self):
        return _cuda.array_module(self._device)

    def _check_compatible(self, other: 'Tensor', op: str) -> None:
        if self.shape != other.shape:
            raise ShapeMismatch(
                f"{op}: shape {self.shape} does not match {other.shape}")
        if self._device != other._device:
            raise DeviceMismatch(
                f"{op}: tensor on {self._device} cannot be combined "
                f"with tensor on {other._device}")

    def _operand(self, other, op: str):
        """Resolve *other* to a raw buffer or a Python float."""
        if isinstance(other, Tensor):
            self._check_compatible(other, op)
            return other._data
        if _is_scalar(other):
            # Python float keeps the tensor's precision.
            return float(other)
        return None

    def _ensure_host(self, op: str) -> None:
        if not self.is_host:
            raise NotHostResident(
                f"{op}: tensor lives on {self._device}; "
                f"call to_host() first")

    def _binary(self, other, fn: Callable, op: str):
        operand = self._operand(other, op)
        if operand is None:
            return NotImplemented
        with _cuda.device_scope(self._device):
            return Tensor._wrap(fn(self._data, operand), self._device)

    def _inplace(self, other, ufunc: str, op: str) -> 'Tensor':
        operand = self._operand(other, op)
        if operand is None:
            raise TypeError(
                f"{op}: unsupported operand type {type(other).__name__}")
        xp = self._xp()
        with _cuda.device_scope(self._device):
            getattr(xp, ufunc)(self._data, operand, out=self._data)
        self._version += 1
        return self

    # ------------------------------------------------------------------ #
    #  Arithmetic operators                                               #
    # ------------------------------------------------------------------ #

    def __add__(self, other):
        return self._binary(other, operator.add, 'add')

    def __radd__(self, other):
        return self._binary(other, _rev(operator.add), 'add')

    def __sub__(self, other):
        return self._binary(other, operator.sub, 'sub')

    def __rsub__(self, other):
        return self._binary(other, _rev(operator.sub), 'sub')

    def __mul__(self, other):
        return self._binary(other, operator.mul, 'mul')

    def __rmul__(self, other):
        return self._binary(other, _rev(operator.mul), 'mul')

    def __truediv__(self, other):
        return self._binary(other, operator.truediv, 'div')

    def __rtruediv__(self, other):
        return self._binary(other, _rev(operator.truediv), 'div')

    def __neg__(self):
        with _cuda.device_scope(self._device):
            return Tensor._wrap(-self._data, self._device)

    # ------------------------------------------------------------------ #
    #  Elementwise math                                                   #
    # ------------------------------------------------------------------ #

    def square(self) -> 'Tensor':
        xp = self._xp()
        with _cuda.device_scope(self._device):
            return Tensor._wrap(xp.square(self._data), self._device)

    def sqrt(self) -> 'Tensor':
        xp = self._xp()
        with _cuda.device_scope(self._device):
            return Tensor._wrap(xp.sqrt(self._data), self._device)

    # ---- In-place operations ----

    def add_(self, other) -> 'Tensor':
        return self._inplace(other, 'add', 'add_')

    def sub_(self, other) -> 'Tensor':
        return self._inplace(other, 'subtract', 'sub_')

    def mul_(self, other) -> 'Tensor':
        return self._inplace(other, 'multiply', 'mul_')

    def div_(self, other) -> 'Tensor':
        return self._inplace(other, 'divide', 'div_')

    def copy_(self, src: 'Tensor') -> 'Tensor':
        self._check_compatible(src, 'copy_')
        xp = self._xp()
        with _cuda.device_scope(self._device):
            xp.copyto(self._data, src._data)
        self._version += 1
        return self

    def fill_(self, value) -> 'Tensor':
        with _cuda.device_scope(self._device):
            self._data.fill(value)
        self._version += 1
        return self

    def zero_(self) -> 'Tensor':
        return self.fill_(0)

    # ------------------------------------------------------------------ #
    #  Data movement                                                      #
    # ------------------------------------------------------------------ #

    def copy_from_host(self, buffer: Sequence[float] | np.ndarray,
                       count: int | None = None) -> 'Tensor':
        """Overwrite the contents from a flat host buffer.

        *count* elements are taken from the front of *buffer* (all of it
        by default) and must equal :meth:`numel`.  Device-resident
        tensors receive an upload.
        """
        host = np.asarray(buffer, dtype=self._data.dtype).reshape(-1)
        if count is None:
            count = host.size
        if count != self.numel():
            raise ShapeMismatch(
                f"copy_from_host: {count} elements given for a tensor of "
                f"shape {self.shape} ({self.numel()} elements)")
        if host.size < count:
            raise ShapeMismatch(
                f"copy_from_host: buffer holds {host.size} elements, "
                f"{count} requested")
        _cuda.copy_into(self._data, host[:count].reshape(self.shape))
        self._version += 1
        return self

    def clone(self) -> 'Tensor':
        with _cuda.device_scope(self._device):
            return Tensor._wrap(self._data.copy(), self._device)

    def to(self, device: Device | str) -> 'Tensor':
        """Return a copy placed on *device*."""
        dev = _resolve_device(device)
        if dev == self._device:
            return self.clone()
        host = _cuda.download(self._data)
        return Tensor._wrap(_cuda.upload(host, dev), dev)

    def to_host(self) -> 'Tensor':
        """Return a host-resident copy; ``self`` keeps its placement."""
        return self.to(_CPU_DEVICE)

    def cpu(self) -> 'Tensor':
        return self.to_host()

    def cuda(self, device_id: int | None = None) -> 'Tensor':
        return self.to(Device('cuda', device_id))

    def numpy(self) -> np.ndarray:
        """Read-only view of the host buffer."""
        self._ensure_host('numpy')
        view = self._data.view()
        view.flags.writeable = False
        return view

    def tolist(self):
        self._ensure_host('tolist')
        return self._data.tolist()

    def item(self) -> float:
        self._ensure_host('item')
        return self._data.item()


# ====================================================================
# Module-level factory functions
# ====================================================================

def _resolve_dtype(dtype) -> np.dtype | None:
    if dtype is None:
        return None
    if isinstance(dtype, Dtype):
        return dtype.to_numpy()
    return Dtype.from_numpy(dtype).to_numpy()


def _resolve_device(device) -> Device:
    if device is None:
        return _CPU_DEVICE
    if isinstance(device, Device):
        return device
    return Device(device)


def _resolve_size(size) -> tuple[int, ...]:
    if len(size) == 1 and isinstance(size[0], (tuple, list)):
        size = tuple(size[0])
    size = tuple(int(s) for s in size)
    if any(s < 0 for s in size):
        raise ValueError(f"negative dimension in shape {size}")
    return size


def _allocate(factory: str, size, dtype, device, *args) -> Tensor:
    dev = _resolve_device(device)
    dt = _resolve_dtype(dtype) or np.dtype(np.float32)
    xp = _cuda.array_module(dev)
    with _cuda.device_scope(dev):
        arr = getattr(xp, factory)(_resolve_size(size), *args, dtype=dt)
    return Tensor._wrap(arr, dev)


def tensor(data, dtype=None, device=None) -> Tensor:
    return Tensor(data, dtype=dtype, device=device)


def zeros(*size, dtype=None, device=None) -> Tensor:
    return _allocate('zeros', size, dtype, device)


def empty(*size, dtype=None, device=None) -> Tensor:
    return _allocate('empty', size, dtype, device)


def full(size, fill_value, dtype=None, device=None) -> Tensor:
    if isinstance(size, int):
        size = (size,)
    return _allocate('full', (size,), dtype, device, fill_value)


def zeros_like(input: Tensor, dtype=None, device=None) -> Tensor:
    return zeros(input.shape,
                 dtype=dtype if dtype is not None else input.dtype,
                 device=device if device is not None else input.device)
