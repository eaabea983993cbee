from abc import ABC, abstractmethod
from typing import Iterator

from jax import numpy as jnp

from dunif.errors import InvalidArgumentError
from dunif.random import RandomSource

from .constraints import Constraint


class DiscreteDistribution(ABC):
    """Represents a probability distribution over the integers.

    A distribution is an object that can generate samples and to which a
    probability mass function and a cumulative distribution function are
    associated. It also exposes its descriptive statistics, computed in closed
    form from its current parameters.

    Randomness is not generated by the distribution itself but drawn from a
    `RandomSource` it holds a reference to. The source can be swapped at any
    time; the distribution never closes or resets it.

    Each distribution is defined on a support. Following the design of Pytorch
    Distributions _[1], the support is a constraint that returns `True` when the
    input belongs to it, `False` otherwise. The vectorized `logpdf` method is
    wrapped by a decorator that checks whether arguments belong to the support.

    Attributes
    ----------
    support: Type[Constraint]
        The support of the probability mass function.

    References
    ----------
    ..[1] Pytorch Distributions. https://pytorch.org/docs/stable/distributions.html
    """

    _random_source: RandomSource

    @property
    @abstractmethod
    def support(self) -> Constraint:
        pass

    @property
    def random_source(self) -> RandomSource:
        """The source of randomness used by `sample` and `samples`."""
        return self._random_source

    @random_source.setter
    def random_source(self, value: RandomSource) -> None:
        if value is None:
            raise InvalidArgumentError("The random source cannot be None.")
        self._random_source = value

    #
    # DESCRIPTIVE STATISTICS
    #

    @property
    @abstractmethod
    def mean(self) -> float:
        pass

    @property
    @abstractmethod
    def variance(self) -> float:
        pass

    @property
    @abstractmethod
    def std_dev(self) -> float:
        pass

    @property
    @abstractmethod
    def entropy(self) -> float:
        pass

    @property
    @abstractmethod
    def skewness(self) -> float:
        pass

    @property
    @abstractmethod
    def mode(self) -> int:
        pass

    @property
    @abstractmethod
    def median(self) -> int:
        pass

    @property
    @abstractmethod
    def minimum(self) -> int:
        pass

    @property
    @abstractmethod
    def maximum(self) -> int:
        pass

    #
    # PROBABILITY FUNCTIONS
    #

    @abstractmethod
    def probability(self, value: int) -> float:
        """Probability that the random variable takes the value `value`."""
        pass

    @abstractmethod
    def probability_ln(self, value: int) -> float:
        """Natural logarithm of `probability`; `-inf` outside of the support."""
        pass

    @abstractmethod
    def cumulative_distribution(self, x: float) -> float:
        """Probability that the random variable is lower than or equal to `x`."""
        pass

    @abstractmethod
    def logpdf(self, x: jnp.ndarray) -> jnp.ndarray:
        """Compute the value of the log-probability mass function at given points.

        Parameters
        ----------
        x: jax.numpy.ndarray, shape (n_points,)
            The point(s) at which to evaluate the log probability mass function.

        Returns
        -------
        jax.numpy.ndarray, shape (n_points,)
            The value(s) of the log-probability mass function.
        """
        pass

    def logpdf_sum(self, data) -> jnp.ndarray:
        """Return the logpdf of the distribution over the observations."""
        return jnp.sum(self.logpdf(data))

    #
    # SAMPLING
    #

    @abstractmethod
    def sample(self) -> int:
        """Draw one sample using the distribution's random source."""
        pass

    @abstractmethod
    def samples(self) -> Iterator[int]:
        """Lazily draw an unbounded sequence of samples.

        Each call returns a new generator; a generator cannot be restarted.
        """
        pass
