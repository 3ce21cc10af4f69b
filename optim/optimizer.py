# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Sapling — Tensor Optimizer Engine                                   ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Optimizer base class and RMSProp implementation."""
from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Mapping

from ..errors import ConfigurationError, ShapeMismatch
from ..tensor import Tensor, zeros_like

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OptimizerConfig:
    """Hyper-parameters shared by the optimizer family.

    ``rho`` is the decay factor of running averages, ``delta`` the
    constant added before every square root.
    """

    rho: float = 0.9
    delta: float = 1e-8

    def __post_init__(self):
        if not 0.0 <= self.rho < 1.0:
            raise ValueError(f"rho must be in [0, 1), got {self.rho}")
        if not self.delta > 0.0:
            raise ValueError(f"delta must be positive, got {self.delta}")

    @classmethod
    def from_dict(cls, conf: Mapping) -> 'OptimizerConfig':
        unknown = set(conf) - {'rho', 'delta'}
        if unknown:
            raise ValueError(f"Unknown optimizer options: {sorted(unknown)}")
        return cls(**conf)

    def to_dict(self) -> dict:
        return asdict(self)


class Optimizer:
    """Base class for all optimizers.

    An optimizer is created unconfigured; :meth:`setup` must run before
    the first :meth:`apply`.  Per-parameter state lives in ``self.state``
    keyed by the parameter name passed to :meth:`apply`.
    """

    def __init__(self, config: OptimizerConfig | Mapping | None = None):
        self.config: OptimizerConfig | None = None
        self.state: dict[str, Tensor] = {}
        if config is not None:
            self.setup(config)

    @property
    def configured(self) -> bool:
        return self.config is not None

    def setup(self, config: OptimizerConfig | Mapping):
        if not isinstance(config, OptimizerConfig):
            config = OptimizerConfig.from_dict(config)
        if self.config is not None and self.state:
            # Existing statistics are kept as they are.
            logger.debug('%s reconfigured %s -> %s with %d live entries',
                         type(self).__name__, self.config, config,
                         len(self.state))
        self.config = config

    def _require_config(self) -> OptimizerConfig:
        if self.config is None:
            raise ConfigurationError(
                f"{type(self).__name__}.apply() called before setup()")
        return self.config

    def apply(self, step: int, lr: float, name: str,
              grad: Tensor, value: Tensor) -> None:
        """Update *value* in place from *grad*."""
        raise NotImplementedError

    def step(self, step: int, lr: float,
             grads: Mapping[str, Tensor | None],
             values: Mapping[str, Tensor]):
        """Apply one update to every named parameter that has a gradient."""
        for name, grad in grads.items():
            if grad is None:
                continue
            if name not in values:
                raise KeyError(f"No value tensor for parameter {name!r}")
            self.apply(step, lr, name, grad, values[name])

    def state_dict(self) -> dict:
        return {
            'config': self.config.to_dict() if self.config is not None else None,
            'state': {name: t.clone() for name, t in self.state.items()},
        }

    def load_state_dict(self, state_dict: dict):
        conf = state_dict.get('config')
        self.config = OptimizerConfig.from_dict(conf) if conf is not None else None
        self.state = {name: t.clone()
                      for name, t in state_dict.get('state', {}).items()}
        logger.debug('%s loaded %d state entries',
                     type(self).__name__, len(self.state))


class RMSProp(Optimizer):
    """RMSProp — scale each step by the RMS of recent gradients.

    Per element::

        r     <- r * rho + grad**2 * (1 - rho)
        value <- value - lr * grad / sqrt(r + delta)

    ``r`` starts at zero the first time a name is seen.
    """

    def apply(self, step: int, lr: float, name: str,
              grad: Tensor, value: Tensor) -> None:
        conf = self._require_config()
        value._check_compatible(grad, f"RMSProp[{name}]")

        history = self.state.get(name)
        if history is None:
            history = zeros_like(value)
        elif history.shape != value.shape:
            raise ShapeMismatch(
                f"RMSProp[{name}]: statistics shape {history.shape} does "
                f"not match value shape {value.shape}")
        else:
            value._check_compatible(history, f"RMSProp[{name}]")

        # Nothing is written until both results exist.
        new_history = history * conf.rho + grad.square() * (1.0 - conf.rho)
        update = grad * lr / (new_history + conf.delta).sqrt()

        history.copy_(new_history)
        value.sub_(update)
        if name not in self.state:
            logger.debug('RMSProp: new statistics for %r, shape %s on %s',
                         name, value.shape, value.device)
            self.state[name] = history
