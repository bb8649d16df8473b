"""Unit records and the helpers used to author dimension tables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

Transform = Callable[[float], float]


def _identity(value: float) -> float:
    return value


@dataclass(frozen=True)
class Unit:
    """One measurement unit within a single dimension.

    ``to_base`` maps a value in this unit to the dimension's base unit and
    ``from_base`` maps it back. Both are arbitrary pure functions so affine
    scales (temperature) fit alongside plain multiplicative ones.
    """

    id: str
    name: str
    to_base: Transform
    from_base: Transform
    is_base: bool = False

    def round_trip(self, value: float) -> float:
        return self.from_base(self.to_base(value))


def base(id: str, name: str) -> Unit:
    """The dimension's base unit: identity in both directions."""
    return Unit(id=id, name=name, to_base=_identity, from_base=_identity, is_base=True)


def scaled(id: str, name: str, factor: float) -> Unit:
    """A unit where one of it equals ``factor`` base units."""
    if factor == 0:
        raise ValueError(f"Unit '{id}' has a zero conversion factor")
    return Unit(
        id=id,
        name=name,
        to_base=lambda value: value * factor,
        from_base=lambda value: value / factor,
    )


def divided(id: str, name: str, divisor: float) -> Unit:
    """A unit where ``divisor`` of it make one base unit (mm -> m, ns -> s)."""
    if divisor == 0:
        raise ValueError(f"Unit '{id}' has a zero conversion divisor")
    return Unit(
        id=id,
        name=name,
        to_base=lambda value: value / divisor,
        from_base=lambda value: value * divisor,
    )


def affine(id: str, name: str, offset: float, numerator: float = 1.0, denominator: float = 1.0) -> Unit:
    """A unit related to the base by ``base = (value - offset) * numerator / denominator``.

    Fahrenheit against Celsius is ``affine("f", ..., offset=32, numerator=5, denominator=9)``.
    """
    if numerator == 0 or denominator == 0:
        raise ValueError(f"Unit '{id}' has a zero scale")
    return Unit(
        id=id,
        name=name,
        to_base=lambda value: (value - offset) * numerator / denominator,
        from_base=lambda value: value * denominator / numerator + offset,
    )
