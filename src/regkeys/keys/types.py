from __future__ import annotations

from typing import ClassVar, Tuple


class BoundedInt(int):
    """Integer restricted to a signed two's-complement width."""

    bits: ClassVar[int] = 64

    def __new__(cls, value=0):
        number = super().__new__(cls, value)
        low, high = cls.bounds()
        if not low <= number <= high:
            raise ValueError(f"{int(number)} is out of range for {cls.__name__} [{low}, {high}]")
        return number

    @classmethod
    def bounds(cls) -> Tuple[int, int]:
        half = 1 << (cls.bits - 1)
        return -half, half - 1


class Int8(BoundedInt):
    bits = 8


class Int16(BoundedInt):
    bits = 16


class Int32(BoundedInt):
    bits = 32


class Int64(BoundedInt):
    bits = 64
