"""Process-wide switches of the library.

The only switch currently exposed controls whether the distributions check
the consistency of their parameters. Checks are cheap but not free, and code
that builds many distributions from parameters it already trusts may want to
turn them off:

    >>> from dunif.config import config
    >>> config.update("check_distribution_parameters", False)

The interface mirrors `jax.config`. The default can also be set from the
environment before the library is imported, with
`DUNIF_CHECK_DISTRIBUTION_PARAMETERS=0`.

Every validating entry point accepts an explicit `config` keyword argument, so
that a private `Config` instance can be used instead of the global one.
"""
import logging
import os
import warnings
from contextlib import contextmanager
from typing import Iterator, Optional

__all__ = ["Config", "config", "checking_parameters", "resolve"]

logger = logging.getLogger(__name__)


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() not in ("0", "false", "no", "off", "")


class Config:
    """Holds the library's switches."""

    _names = ("check_distribution_parameters",)

    def __init__(self, check_distribution_parameters: bool = True):
        self.check_distribution_parameters = bool(check_distribution_parameters)

    def update(self, name: str, value) -> None:
        """Set the switch `name` to `value`.

        Raises
        ------
        AttributeError
            If `name` is not a known switch.
        """
        if name not in self._names:
            raise AttributeError(f"Unrecognized config option: {name}")

        value = bool(value)
        if name == "check_distribution_parameters" and not value:
            warnings.warn(
                "Distribution parameter checks are disabled. Distributions "
                "built with inconsistent parameters will not raise and their "
                "statistics will be meaningless.",
                UserWarning,
            )
        logger.debug("config: %s set to %s", name, value)
        setattr(self, name, value)

    def __repr__(self):
        return f"Config(check_distribution_parameters={self.check_distribution_parameters})"


config = Config(
    check_distribution_parameters=_bool_env("DUNIF_CHECK_DISTRIBUTION_PARAMETERS", True)
)


def resolve(cfg: Optional[Config]) -> Config:
    """Return `cfg`, or the global configuration when `cfg` is None."""
    if cfg is None:
        return config
    return cfg


@contextmanager
def checking_parameters(
    enabled: bool, config: Optional[Config] = None
) -> Iterator[Config]:
    """Temporarily turn distribution parameter checks on or off.

        >>> with checking_parameters(False):
        ...     DiscreteUniform(5, 3)

    The previous value is restored on exit, even if the block raises.
    """
    cfg = resolve(config)
    previous = cfg.check_distribution_parameters
    cfg.update("check_distribution_parameters", enabled)
    try:
        yield cfg
    finally:
        cfg.check_distribution_parameters = previous
