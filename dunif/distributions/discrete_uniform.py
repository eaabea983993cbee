from typing import Iterator, Optional

import numpy as onp
from jax import lax
from jax import numpy as jnp
from jax import random

from dunif.config import Config, resolve
from dunif.errors import InvalidParameterError
from dunif.random import RandomSource, default_source

from . import constraints
from .distribution import DiscreteDistribution

__all__ = [
    "DiscreteUniform",
    "draw_sample",
    "is_valid_parameter_set",
    "sample",
    "samples",
]


_DEFAULT_SOURCE = object()


class DiscreteUniform(DiscreteDistribution):
    """Random variable with a uniform distribution on a range of integers.

    Both bounds are inclusive. The parameters are checked when the
    distribution is built and every time one of the bounds is changed, unless
    checks are disabled in the configuration:

        >>> dist = DiscreteUniform(0, 9)
        >>> dist.mode
        4
        >>> dist.upper_bound = -1
        InvalidParameterError: Invalid parameterization for the distribution.

    Parameters
    ----------
    lower: int
        Inclusive lower bound of the support.
    upper: int
        Inclusive upper bound of the support.
    random_source: RandomSource, optional
        Source of randomness used for sampling. Defaults to a freshly seeded
        `NumpySource`. Passing `None` raises `InvalidArgumentError`.
    config: Config, optional
        Configuration to read the parameter checks switch from. Defaults to the
        library's global configuration, read at each mutation.
    """

    def __init__(
        self,
        lower: int,
        upper: int,
        random_source: Optional[RandomSource] = _DEFAULT_SOURCE,
        *,
        config: Optional[Config] = None,
    ):
        self._config = config
        self.set_parameters(lower, upper)
        if random_source is _DEFAULT_SOURCE:
            random_source = default_source()
        self.random_source = random_source

    def __repr__(self):
        return f"DiscreteUniform(Lower = {self._lower}, Upper = {self._upper})"

    __str__ = __repr__

    @staticmethod
    def is_valid_parameter_set(lower: int, upper: int) -> bool:
        return is_valid_parameter_set(lower, upper)

    def set_parameters(self, lower: int, upper: int) -> None:
        """Set both bounds at once.

        Neither bound is modified if the pair is rejected.

        Raises
        ------
        InvalidParameterError
            If parameter checks are enabled and `lower > upper`.
        """
        _check_parameters(lower, upper, self._config)
        self._lower = lower
        self._upper = upper

    @property
    def support(self) -> constraints.Constraint:
        return constraints.integer_interval(self._lower, self._upper)

    @property
    def lower_bound(self) -> int:
        return self._lower

    @lower_bound.setter
    def lower_bound(self, value: int) -> None:
        self.set_parameters(value, self._upper)

    @property
    def upper_bound(self) -> int:
        return self._upper

    @upper_bound.setter
    def upper_bound(self, value: int) -> None:
        self.set_parameters(self._lower, value)

    #
    # DESCRIPTIVE STATISTICS
    #

    @property
    def _num_values(self) -> onp.float64:
        return onp.float64(self._upper - self._lower + 1)

    @property
    def mean(self) -> onp.float64:
        return onp.float64(self._lower + self._upper) / 2.0

    @property
    def variance(self) -> onp.float64:
        n = self._num_values
        return (n * n - 1.0) / 12.0

    @property
    def std_dev(self) -> onp.float64:
        return onp.sqrt(self.variance)

    @property
    def entropy(self) -> onp.float64:
        return onp.log(self._num_values)

    @property
    def skewness(self) -> onp.float64:
        return onp.float64(0.0)

    @property
    def mode(self) -> int:
        return (self._lower + self._upper) // 2

    @property
    def median(self) -> int:
        return (self._lower + self._upper) // 2

    @property
    def minimum(self) -> int:
        return self._lower

    @property
    def maximum(self) -> int:
        return self._upper

    #
    # PROBABILITY FUNCTIONS
    #

    def probability(self, value: int) -> onp.float64:
        if self._lower <= value <= self._upper:
            return 1.0 / self._num_values
        return onp.float64(0.0)

    def probability_ln(self, value: int) -> onp.float64:
        if self._lower <= value <= self._upper:
            return -onp.log(self._num_values)
        return onp.float64(-onp.inf)

    def cumulative_distribution(self, x: float) -> onp.float64:
        # `x == upper` is caught by the second branch, before the general formula.
        if x < self._lower:
            return onp.float64(0.0)
        elif x >= self._upper:
            return onp.float64(1.0)

        return onp.minimum(1.0, (onp.floor(x) - self._lower + 1) / self._num_values)

    @constraints.limit_to_support
    def logpdf(self, x):
        return -jnp.log(self._upper - self._lower + 1.0)

    #
    # SAMPLING
    #

    def sample(self) -> int:
        return draw_sample(self.random_source, self._lower, self._upper)

    def samples(self) -> Iterator[int]:
        while True:
            yield draw_sample(self.random_source, self._lower, self._upper)

    def sample_array(self, rng_key, sample_shape=()) -> jnp.ndarray:
        """Draw a batch of samples with JAX's PRNG.

        This bypasses the distribution's random source.

        Parameters
        ----------
        rng_key: jnp.ndarray
            The pseudo random number generator key to use to draw samples.
        sample_shape: Tuple[int]
            The number of independent, identically distributed samples to draw.

        Raises
        ------
        ValueError
            If a bound does not fit in a 32-bit integer.
        """
        info = jnp.iinfo(jnp.int32)
        if self._lower < info.min or self._upper > info.max:
            raise ValueError(
                f"Bounds [{self._lower}, {self._upper}] do not fit in a 32-bit integer."
            )

        # `randint` excludes its maximum, which must itself fit in int32.
        if self._upper < info.max:
            return random.randint(rng_key, sample_shape, self._lower, self._upper + 1)
        if self._lower > info.min:
            shifted = random.randint(rng_key, sample_shape, self._lower - 1, self._upper)
            return shifted + 1
        bits = random.bits(rng_key, sample_shape, jnp.uint32)
        return lax.bitcast_convert_type(bits, jnp.int32)

    @staticmethod
    def static_sample(
        source: RandomSource, lower: int, upper: int, *, config: Optional[Config] = None
    ) -> int:
        return sample(source, lower, upper, config=config)

    @staticmethod
    def static_samples(
        source: RandomSource, lower: int, upper: int, *, config: Optional[Config] = None
    ) -> Iterator[int]:
        return samples(source, lower, upper, config=config)


def is_valid_parameter_set(lower: int, upper: int) -> bool:
    """Whether `lower` and `upper` are valid bounds of a discrete uniform distribution."""
    return lower <= upper


def _check_parameters(lower: int, upper: int, config: Optional[Config]) -> None:
    if resolve(config).check_distribution_parameters and not is_valid_parameter_set(
        lower, upper
    ):
        raise InvalidParameterError()


def draw_sample(source: RandomSource, lower: int, upper: int) -> int:
    """Reduce the next integer produced by `source` to [lower, upper].

    The reduction is a plain modulo and is thus slightly biased towards the
    lowest values unless `source.max_int` is a multiple of the number of values
    in the range. No check is performed on the bounds.
    """
    return source.next_int() % (upper - lower + 1) + lower


def sample(
    source: RandomSource, lower: int, upper: int, *, config: Optional[Config] = None
) -> int:
    """Draw one sample from DiscreteUniform(lower, upper) without building it.

    Raises
    ------
    InvalidParameterError
        If parameter checks are enabled and `lower > upper`.
    """
    _check_parameters(lower, upper, config)
    return draw_sample(source, lower, upper)


def samples(
    source: RandomSource, lower: int, upper: int, *, config: Optional[Config] = None
) -> Iterator[int]:
    """Lazily draw an unbounded sequence of samples from DiscreteUniform(lower, upper).

    The parameters are checked when this function is called, not when the
    first value is pulled.

    Raises
    ------
    InvalidParameterError
        If parameter checks are enabled and `lower > upper`.
    """
    _check_parameters(lower, upper, config)
    return _draw_forever(source, lower, upper)


def _draw_forever(source: RandomSource, lower: int, upper: int) -> Iterator[int]:
    while True:
        yield draw_sample(source, lower, upper)
