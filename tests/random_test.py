import numpy as onp
import pytest
from jax import random

from dunif.random import NumpySource, PRNGKeySource, RandomSource, default_source


def test_random_source_is_abstract():
    with pytest.raises(TypeError):
        RandomSource()


@pytest.mark.parametrize("source", [NumpySource(0), PRNGKeySource(0)])
def test_next_int_range(source):
    for _ in range(100):
        value = source.next_int()
        assert isinstance(value, int)
        assert 0 <= value < RandomSource.max_int


def test_prng_key_source_is_reproducible():
    first = PRNGKeySource(3)
    second = PRNGKeySource(random.PRNGKey(3))
    assert [first.next_int() for _ in range(10)] == [second.next_int() for _ in range(10)]


def test_prng_key_source_splits_keys():
    source = PRNGKeySource(0)
    values = [source.next_int() for _ in range(10)]
    assert len(set(values)) == 10


def test_numpy_source_is_reproducible():
    first = NumpySource(7)
    second = NumpySource(7)
    assert [first.next_int() for _ in range(10)] == [second.next_int() for _ in range(10)]


def test_iteration():
    source = NumpySource(0)
    stream = iter(source)
    values = [next(stream) for _ in range(5)]
    assert all(0 <= value < RandomSource.max_int for value in values)


def test_next_key():
    key = PRNGKeySource(0).next_key()
    assert key.shape == random.PRNGKey(0).shape


def test_default_source():
    assert isinstance(default_source(), NumpySource)


def test_prng_key_source_accepts_numpy_integer_seed():
    first = PRNGKeySource(onp.int64(3))
    second = PRNGKeySource(3)
    assert [first.next_int() for _ in range(5)] == [second.next_int() for _ in range(5)]
