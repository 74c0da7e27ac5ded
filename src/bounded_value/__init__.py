from bounded_value.bounded_value import (
    BoundedValue,
    ClampPolicy,
    between,
    decrement,
    increment,
    max_bound,
    min_bound,
    set_value,
    value,
)
from bounded_value.parameter import BoundedParameter

__all__ = [
    "BoundedValue",
    "BoundedParameter",
    "ClampPolicy",
    "between",
    "set_value",
    "increment",
    "decrement",
    "value",
    "min_bound",
    "max_bound",
]
