"""Two-field converter shared by every dimension.

A session holds two text fields and two unit ids. Each input event
recomputes exactly one field from the other; ``last_edited`` records which
field is authoritative so the recompute never bounces back.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from app.core.units.dimensions import Dimension, Preset
from app.core.units.formatting import FormatPolicy, format_result
from app.core.units.registry import DimensionRegistry
from app.core.units.unit import Unit
from app.utils.numbers import parse_number


class Side(str, Enum):
    SOURCE = "source"
    TARGET = "target"


@dataclass
class ConversionSession:
    source_unit: str
    target_unit: str
    source_value: str = ""
    target_value: str = ""
    last_edited: Side = Side.SOURCE


def convert_text(text: str, from_unit: Unit, to_unit: Unit,
                 policy: FormatPolicy = FormatPolicy.GENERAL) -> str:
    """Convert a raw field value. Unparseable input gives an empty string."""
    value = parse_number(text)
    if value is None:
        return ""
    result = to_unit.from_base(from_unit.to_base(value))
    return format_result(result, policy)


class BidirectionalConverter:
    """Keeps a :class:`ConversionSession` consistent under user edits."""

    def __init__(
        self,
        registry: DimensionRegistry,
        format_policy: FormatPolicy = FormatPolicy.GENERAL,
        session: Optional[ConversionSession] = None,
        default_source: Optional[str] = None,
        default_target: Optional[str] = None,
    ):
        self.registry = registry
        self.format_policy = format_policy
        units = registry.list_units()
        self.default_source = default_source or units[0].id
        self.default_target = default_target or units[min(1, len(units) - 1)].id
        self.session = session or ConversionSession(self.default_source, self.default_target)

    @classmethod
    def for_dimension(cls, dimension: Dimension,
                      session: Optional[ConversionSession] = None) -> "BidirectionalConverter":
        return cls(
            dimension.registry,
            format_policy=dimension.format_policy,
            session=session,
            default_source=dimension.default_source,
            default_target=dimension.default_target,
        )

    # ── Events ───────────────────────────────────────────────────────────

    def edit_source(self, text: str) -> ConversionSession:
        self.session.source_value = text
        self.session.last_edited = Side.SOURCE
        return self._recompute()

    def edit_target(self, text: str) -> ConversionSession:
        self.session.target_value = text
        self.session.last_edited = Side.TARGET
        return self._recompute()

    def set_source_unit(self, unit_id: str) -> ConversionSession:
        # The target number stays put; the source is re-derived from it.
        self.session.source_unit = unit_id
        self.session.last_edited = Side.TARGET
        return self._recompute()

    def set_target_unit(self, unit_id: str) -> ConversionSession:
        self.session.target_unit = unit_id
        self.session.last_edited = Side.SOURCE
        return self._recompute()

    def swap(self) -> ConversionSession:
        """Exchange units and values as-is. Both sides are already consistent."""
        s = self.session
        s.source_unit, s.target_unit = s.target_unit, s.source_unit
        s.source_value, s.target_value = s.target_value, s.source_value
        return s

    def reset(self) -> ConversionSession:
        self.session = ConversionSession(self.default_source, self.default_target)
        return self.session

    def apply_preset(self, preset: Preset) -> ConversionSession:
        self.session.source_unit = preset.source_unit
        self.session.target_unit = preset.target_unit
        self.session.source_value = preset.value
        self.session.last_edited = Side.SOURCE
        return self._recompute()

    # ── Conversion ───────────────────────────────────────────────────────

    def convert(self, text: str, from_unit_id: str, to_unit_id: str) -> str:
        return convert_text(
            text,
            self.registry.find_unit(from_unit_id),
            self.registry.find_unit(to_unit_id),
            self.format_policy,
        )

    def snapshot(self) -> ConversionSession:
        return replace(self.session)

    def _recompute(self) -> ConversionSession:
        s = self.session
        if s.last_edited is Side.SOURCE:
            s.target_value = self.convert(s.source_value, s.source_unit, s.target_unit)
        else:
            s.source_value = self.convert(s.target_value, s.target_unit, s.source_unit)
        return s
