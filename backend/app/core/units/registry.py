"""Immutable per-dimension unit tables."""

from __future__ import annotations

import logging
from typing import Iterable

from app.core.units.unit import Unit

logger = logging.getLogger(__name__)


class RegistryError(ValueError):
    """Raised when a dimension table is authored incorrectly."""

    def __init__(self, dimension: str, reason: str) -> None:
        self.dimension = dimension
        super().__init__(f"Invalid registry '{dimension}': {reason}")


class DimensionRegistry:
    """Ordered, read-only set of units sharing one base unit.

    Unknown ids passed to :meth:`find_unit` resolve to the first unit
    instead of raising. Converter state coming back from a client may hold
    ids from an older table, and a blank field is preferred over an error.
    """

    def __init__(self, dimension: str, units: Iterable[Unit]):
        units = tuple(units)
        if not units:
            raise RegistryError(dimension, "no units defined")

        seen: set[str] = set()
        for unit in units:
            if unit.id in seen:
                raise RegistryError(dimension, f"duplicate unit id '{unit.id}'")
            seen.add(unit.id)

        bases = [u.id for u in units if u.is_base]
        if len(bases) != 1:
            raise RegistryError(dimension, f"expected exactly one base unit, found {len(bases)}")

        self._dimension = dimension
        self._units = units
        self._by_id = {u.id: u for u in units}
        self._base_id = bases[0]

    @property
    def dimension(self) -> str:
        return self._dimension

    @property
    def base_unit(self) -> Unit:
        return self._by_id[self._base_id]

    @property
    def default_unit(self) -> Unit:
        return self._units[0]

    def list_units(self) -> tuple[Unit, ...]:
        """All units in declaration order."""
        return self._units

    def has_unit(self, unit_id: str) -> bool:
        return unit_id in self._by_id

    def find_unit(self, unit_id: str) -> Unit:
        """Look up a unit by id, falling back to the first unit when unknown."""
        unit = self._by_id.get(unit_id)
        if unit is None:
            logger.warning(
                "Unknown unit id %r in dimension '%s', using '%s'",
                unit_id, self._dimension, self._units[0].id,
            )
            return self._units[0]
        return unit

    def __iter__(self):
        return iter(self._units)

    def __len__(self) -> int:
        return len(self._units)

    def __repr__(self) -> str:
        return f"DimensionRegistry({self._dimension!r}, units={[u.id for u in self._units]})"
