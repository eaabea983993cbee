"""Sources of uniformly distributed non-negative integers.

Distributions do not generate randomness themselves; they are handed a
`RandomSource` and reduce the integers it produces to their own support. Any
object implementing `next_int` can be used, which makes it possible to plug a
different generator without touching the distributions:

    >>> source = PRNGKeySource(0)
    >>> DiscreteUniform(1, 6, source).sample()

Two sources are shipped. `PRNGKeySource` is driven by a JAX PRNG key that is
split at every draw, so a given seed always yields the same sequence.
`NumpySource` wraps NumPy's `Generator` and is the default when a distribution
is built without a source.

Neither source is thread-safe.
"""
import numbers
from abc import ABC, abstractmethod
from typing import Iterator, Optional, Union

import numpy as onp
from jax import numpy as jnp
from jax import random

__all__ = ["RandomSource", "PRNGKeySource", "NumpySource", "default_source"]


class RandomSource(ABC):
    """Produces uniformly distributed non-negative integers on demand.

    Attributes
    ----------
    max_int: int
        Exclusive upper bound of the integers returned by `next_int`.
    """

    max_int: int = 2 ** 31 - 1

    @abstractmethod
    def next_int(self) -> int:
        """Return the next integer, uniformly distributed on [0, max_int)."""
        pass

    def __iter__(self) -> Iterator[int]:
        while True:
            yield self.next_int()


def _key_splitter(rng_key: jnp.ndarray) -> Iterator[jnp.ndarray]:
    while True:
        rng_key, subkey = random.split(rng_key)
        yield subkey


class PRNGKeySource(RandomSource):
    """Random source driven by a JAX PRNG key.

    The key is split at every call so that consecutive draws are independent
    and the caller never has to thread keys by hand.

    Parameters
    ----------
    rng_key: int or jnp.ndarray
        Either a PRNG key, or an integer seed used to build one.
    """

    def __init__(self, rng_key: Union[int, jnp.ndarray]):
        if isinstance(rng_key, numbers.Integral):
            rng_key = random.PRNGKey(int(rng_key))
        self._keys = _key_splitter(rng_key)

    def next_int(self) -> int:
        subkey = next(self._keys)
        return int(random.randint(subkey, (), 0, self.max_int))

    def next_key(self) -> jnp.ndarray:
        """Return a fresh PRNG key, for batched sampling."""
        return next(self._keys)


class NumpySource(RandomSource):
    """Random source backed by `numpy.random.Generator`.

    Parameters
    ----------
    seed: int, optional
        Seed of the generator. When omitted, fresh entropy is pulled from the
        operating system.
    """

    def __init__(self, seed: Optional[int] = None):
        self._generator = onp.random.default_rng(seed)

    def next_int(self) -> int:
        return int(self._generator.integers(0, self.max_int))


def default_source() -> RandomSource:
    """Source used by distributions built without an explicit one."""
    return NumpySource()
