from dunif.config import Config, checking_parameters
from dunif.distributions import DiscreteUniform
from dunif.errors import InvalidArgumentError, InvalidParameterError
from dunif.random import NumpySource, PRNGKeySource, RandomSource, default_source

from . import distributions

__version__ = "0.0.1"

__all__ = [
    "checking_parameters",
    "distributions",
    "Config",
    "DiscreteUniform",
    "InvalidArgumentError",
    "InvalidParameterError",
    "NumpySource",
    "PRNGKeySource",
    "RandomSource",
    "default_source",
]
