from .discrete_uniform import (
    DiscreteUniform,
    draw_sample,
    is_valid_parameter_set,
    sample,
    samples,
)
from .distribution import DiscreteDistribution

__all__ = [
    "DiscreteDistribution",
    "DiscreteUniform",
    "draw_sample",
    "is_valid_parameter_set",
    "sample",
    "samples",
]
