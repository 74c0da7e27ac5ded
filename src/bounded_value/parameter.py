from threading import Lock
from typing import Generic, Optional

from bounded_value.bounded_value import BoundedValue, ClampPolicy, T
from bounded_value.logger import Logger, NoOpLogger, PrefixedLogger


class BoundedParameter(Generic[T]):
    """
    Изменяемая обёртка над BoundedValue для кода, который держит параметр
    между шагами (коэффициенты регулятора, текущий выход управления).

    Каждое изменение подменяет иммутабельный снимок под блокировкой, поэтому
    читатель всегда видит согласованные min/max/value.
    """

    def __init__(
        self,
        min_val: T,
        max_val: T,
        initial: Optional[T] = None,
        *,
        name: str = "PARAM",
        logger: Optional[Logger] = None,
        policy: ClampPolicy | str = ClampPolicy.BOTH,
    ):
        start = min(min_val, max_val) if initial is None else initial
        self._snapshot: BoundedValue[T] = BoundedValue.between(min_val, max_val, policy).set(start)
        self._initial = self._snapshot
        self._lock = Lock()
        self.name = name
        self._logger = PrefixedLogger(logger or NoOpLogger(), name)

        if self._snapshot.current != start:
            self._logger.log(f"initial value {start} clipped to {self._snapshot.current}")

    @property
    def snapshot(self) -> BoundedValue[T]:
        return self._snapshot

    @property
    def min(self) -> T:
        return self._snapshot.min

    @property
    def max(self) -> T:
        return self._snapshot.max

    @property
    def value(self) -> T:
        return self._snapshot.current

    @value.setter
    def value(self, value: T) -> None:
        with self._lock:
            self._snapshot = self._snapshot.set(value)
            current = self._snapshot.current
        if current != value:
            self._logger.log(f"value {value} clipped to {current}")

    def add(self, delta: T) -> tuple[T, bool]:
        with self._lock:
            self._snapshot, clipped = self._snapshot.add(delta)
            current = self._snapshot.current
        if clipped:
            self._logger.log(f"add {delta} clipped to {current}")
        return current, clipped

    def increment(self, by: T) -> T:
        with self._lock:
            proposed = self._snapshot.current + by
            self._snapshot = self._snapshot.increment(by)
            current = self._snapshot.current
        if current != proposed:
            self._logger.log(f"increment {by} clipped to {current}")
        return current

    def decrement(self, by: T) -> T:
        with self._lock:
            proposed = self._snapshot.current - by
            self._snapshot = self._snapshot.decrement(by)
            current = self._snapshot.current
        if current != proposed:
            self._logger.log(f"decrement {by} clipped to {current}")
        return current

    def reset(self) -> None:
        with self._lock:
            self._snapshot = self._initial

    def normalized(self) -> float:
        return self._snapshot.normalized()

    def __repr__(self) -> str:
        return f"BoundedParameter(name={self.name!r}, value={self.value}, min={self.min}, max={self.max})"
