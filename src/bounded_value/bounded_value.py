from dataclasses import InitVar, dataclass, field, replace
from enum import Enum
from typing import Generic, TypeVar

import numpy as np

from bounded_value.normalize import (
    denormalize_from_minus1_plus1,
    normalize_to_minus1_plus1,
)

T = TypeVar("T", int, float)


class ClampPolicy(Enum):
    """
    BOTH - любой результат приводится к [min, max].
    ASYMMETRIC - increment ограничивается только сверху, decrement только снизу
    (старое поведение, отрицательная дельта может вывести значение за границу).
    """
    BOTH = "both"
    ASYMMETRIC = "asymmetric"

    @classmethod
    def from_str(cls, value: str) -> "ClampPolicy":
        try:
            return cls(value)
        except ValueError:
            raise ValueError(
                f"Unknown {cls.__name__}: '{value}'. "
                f"Supported values: {[p.value for p in cls]}"
            )


def _to_policy(policy: "ClampPolicy | str") -> ClampPolicy:
    if isinstance(policy, ClampPolicy):
        return policy
    return ClampPolicy.from_str(policy)


def _clip(x: T, low: T, high: T) -> T:
    result = np.clip(x, low, high)
    # int вне диапазона int64 numpy возвращает как обычный питоновский int
    if isinstance(result, np.generic):
        return result.item()
    return result


@dataclass(frozen=True)
class BoundedValue(Generic[T]):
    """
    Иммутабельное значение в диапазоне [min, max]. Все операции возвращают
    новый экземпляр, границы не меняются.
    """
    min: T
    max: T
    current: T
    policy: ClampPolicy = field(default=ClampPolicy.BOTH, compare=False)
    clip: InitVar[bool] = True

    def __post_init__(self, clip: bool) -> None:
        if self.min > self.max:
            raise ValueError(f"min ({self.min}) must be less than or equal to max ({self.max})")
        object.__setattr__(self, "policy", _to_policy(self.policy))
        if clip:
            object.__setattr__(self, "current", _clip(self.current, self.min, self.max))

    @classmethod
    def between(cls, a: T, b: T, policy: ClampPolicy | str = ClampPolicy.BOTH) -> "BoundedValue[T]":
        low, high = (a, b) if a <= b else (b, a)
        return cls(low, high, low, policy)

    @property
    def value(self) -> T:
        return self.current

    @property
    def span(self) -> T:
        return self.max - self.min

    @property
    def is_at_min(self) -> bool:
        return self.current == self.min

    @property
    def is_at_max(self) -> bool:
        return self.current == self.max

    def contains(self, x: T) -> bool:
        return self.min <= x <= self.max

    def set(self, new_value: T) -> "BoundedValue[T]":
        return replace(self, current=_clip(new_value, self.min, self.max))

    def increment(self, by: T) -> "BoundedValue[T]":
        proposed = self.current + by
        if self.policy is ClampPolicy.ASYMMETRIC:
            return replace(self, current=proposed if proposed <= self.max else self.max, clip=False)
        return self.set(proposed)

    def decrement(self, by: T) -> "BoundedValue[T]":
        proposed = self.current - by
        if self.policy is ClampPolicy.ASYMMETRIC:
            return replace(self, current=proposed if proposed >= self.min else self.min, clip=False)
        return self.set(proposed)

    def add(self, delta: T) -> tuple["BoundedValue[T]", bool]:
        raw = self.current + delta
        result = self.set(raw)
        return result, raw != result.current

    def normalized(self) -> float:
        return normalize_to_minus1_plus1(self.current, self.min, self.max)

    def from_normalized(self, x: float) -> "BoundedValue[T]":
        raw = denormalize_from_minus1_plus1(x, self.min, self.max)
        if isinstance(self.current, (int, np.integer)):
            return self.set(round(raw))
        return self.set(raw)


def between(a: T, b: T, policy: ClampPolicy | str = ClampPolicy.BOTH) -> BoundedValue[T]:
    return BoundedValue.between(a, b, policy)


def set_value(new_value: T, instance: BoundedValue[T]) -> BoundedValue[T]:
    return instance.set(new_value)


def increment(by: T, instance: BoundedValue[T]) -> BoundedValue[T]:
    return instance.increment(by)


def decrement(by: T, instance: BoundedValue[T]) -> BoundedValue[T]:
    return instance.decrement(by)


def value(instance: BoundedValue[T]) -> T:
    return instance.current


def min_bound(instance: BoundedValue[T]) -> T:
    return instance.min


def max_bound(instance: BoundedValue[T]) -> T:
    return instance.max
