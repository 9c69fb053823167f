"""Sources of rotation timing for the slice scheduler."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol


class TimingSource(ABC):
    """Reports completed rotations and their period."""

    @abstractmethod
    def consume_new_rotation(self) -> bool:
        """Return True once per newly completed rotation."""

    @abstractmethod
    def rotation_period_us(self) -> int:
        """Duration of the last rotation in microseconds."""

    @abstractmethod
    def last_trigger_ms(self) -> int:
        """Timestamp of the last trigger in milliseconds."""


class HallSensorLike(Protocol):
    def consume_new_rotation(self) -> bool: ...

    def rotation_period_us(self) -> int: ...

    def last_trigger_ms(self) -> int: ...


class HallTimingSource(TimingSource):
    """Timing source backed by a Hall-effect sensor."""

    def __init__(self, hall: HallSensorLike) -> None:
        self._hall = hall

    def consume_new_rotation(self) -> bool:
        return self._hall.consume_new_rotation()

    def rotation_period_us(self) -> int:
        return self._hall.rotation_period_us()

    def last_trigger_ms(self) -> int:
        return self._hall.last_trigger_ms()