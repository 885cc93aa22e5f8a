# subtp/models/timing.py
"""
Four-field clock timestamps shared by the SRT and WebVTT models.

Fields are stored exactly as parsed (no range checks at construction).
Arithmetic works field by field with carry/borrow propagation
(milliseconds -> seconds -> minutes -> hours). ``datetime.timedelta`` and
integer milliseconds are the lossless bridges to other time representations.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import ClassVar

_MS_PER_SECOND = 1000
_MS_PER_MINUTE = 60 * _MS_PER_SECOND
_MS_PER_HOUR = 60 * _MS_PER_MINUTE


@dataclass(frozen=True, order=True)
class BaseTimestamp:
    """HH:MM:SS<sep>mmm timestamp; subclasses choose the separator."""

    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    milliseconds: int = 0

    SEPARATOR: ClassVar[str] = ","

    def __str__(self) -> str:
        return (
            f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d}"
            f"{self.SEPARATOR}{self.milliseconds:03d}"
        )

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def __add__(self, other):
        if isinstance(other, timedelta):
            return self._shift(other)
        if not isinstance(other, BaseTimestamp):
            return NotImplemented

        carry, milliseconds = divmod(self.milliseconds + other.milliseconds, 1000)
        carry, seconds = divmod(self.seconds + other.seconds + carry, 60)
        carry, minutes = divmod(self.minutes + other.minutes + carry, 60)
        hours = self.hours + other.hours + carry
        return type(self)(hours, minutes, seconds, milliseconds)

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, timedelta):
            return self._shift(-other)
        if not isinstance(other, BaseTimestamp):
            return NotImplemented

        # Floor division turns negative field differences into borrows
        borrow, milliseconds = divmod(self.milliseconds - other.milliseconds, 1000)
        borrow, seconds = divmod(self.seconds - other.seconds + borrow, 60)
        borrow, minutes = divmod(self.minutes - other.minutes + borrow, 60)
        hours = self.hours - other.hours + borrow
        if hours < 0:
            raise ValueError(f"Cannot subtract {other} from {self}: result is negative")
        return type(self)(hours, minutes, seconds, milliseconds)

    def _shift(self, delta: timedelta):
        """Offset by a signed duration; only the result must be non-negative."""
        return type(self).from_milliseconds(
            self.to_milliseconds() + delta // timedelta(milliseconds=1)
        )

    # -------------------------------------------------------------------------
    # Conversions
    # -------------------------------------------------------------------------

    def to_milliseconds(self) -> int:
        """Total milliseconds since zero."""
        return (
            self.hours * _MS_PER_HOUR
            + self.minutes * _MS_PER_MINUTE
            + self.seconds * _MS_PER_SECOND
            + self.milliseconds
        )

    @classmethod
    def from_milliseconds(cls, ms: int):
        """Build a normalised timestamp from a millisecond count."""
        ms = int(ms)
        if ms < 0:
            raise ValueError(f"Timestamp cannot be negative: {ms} ms")
        hours, rest = divmod(ms, _MS_PER_HOUR)
        minutes, rest = divmod(rest, _MS_PER_MINUTE)
        seconds, milliseconds = divmod(rest, _MS_PER_SECOND)
        return cls(hours, minutes, seconds, milliseconds)

    def to_timedelta(self) -> timedelta:
        return timedelta(milliseconds=self.to_milliseconds())

    @classmethod
    def from_timedelta(cls, duration: timedelta):
        """Sub-millisecond precision is truncated."""
        return cls.from_milliseconds(duration // timedelta(milliseconds=1))
