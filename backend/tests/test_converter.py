"""Tests for the bidirectional converter state machine."""

import math

import pytest

from app.core.units.converter import BidirectionalConverter, ConversionSession, Side, convert_text
from app.core.units.dimensions import LENGTH, catalog
from app.core.units.formatting import FormatPolicy


def _converter(dimension_id: str, source: str = None, target: str = None) -> BidirectionalConverter:
    dim = catalog.get_dimension(dimension_id)
    conv = BidirectionalConverter.for_dimension(dim)
    if source:
        conv.session.source_unit = source
    if target:
        conv.session.target_unit = target
    return conv


class TestConvertText:
    def test_meter_to_feet(self):
        result = convert_text("1", LENGTH.find_unit("m"), LENGTH.find_unit("ft"))
        assert float(result) == pytest.approx(3.28084, abs=1e-4)

    def test_unparseable_gives_empty(self):
        assert convert_text("abc", LENGTH.find_unit("m"), LENGTH.find_unit("ft")) == ""

    def test_policy_applied(self):
        result = convert_text("1", LENGTH.find_unit("m"), LENGTH.find_unit("cm"), FormatPolicy.FIXED)
        assert result == "100.00"


class TestSessionDefaults:
    def test_new_session_uses_dimension_defaults(self):
        conv = _converter("speed")
        s = conv.session
        assert (s.source_unit, s.target_unit) == ("kph", "mph")
        assert (s.source_value, s.target_value) == ("", "")
        assert s.last_edited is Side.SOURCE

    def test_registry_only_defaults(self):
        conv = BidirectionalConverter(LENGTH)
        assert (conv.session.source_unit, conv.session.target_unit) == ("mm", "cm")


class TestValueEdits:
    def test_edit_source(self):
        conv = _converter("length", "m", "ft")
        s = conv.edit_source("1")
        assert s.last_edited is Side.SOURCE
        assert s.source_value == "1"
        assert s.target_value == "3.280839895"

    def test_edit_target(self):
        conv = _converter("length", "m", "ft")
        s = conv.edit_target("3.28084")
        assert s.last_edited is Side.TARGET
        assert s.target_value == "3.28084"
        assert float(s.source_value) == pytest.approx(1, abs=1e-5)

    def test_source_text_kept_verbatim(self):
        conv = _converter("length", "m", "ft")
        s = conv.edit_source("1.")
        assert s.source_value == "1."
        assert s.target_value == "3.280839895"

    def test_celsius_to_fahrenheit(self):
        conv = _converter("temperature", "c", "f")
        assert conv.edit_source("0").target_value == "32"
        assert conv.edit_source("100").target_value == "212"

    def test_degrees_to_radians(self):
        conv = _converter("angle", "deg", "rad")
        s = conv.edit_source("180")
        assert float(s.target_value) == pytest.approx(math.pi, abs=1e-9)

    def test_currency_two_decimals(self):
        conv = _converter("currency", "USD", "EUR")
        assert conv.edit_source("1").target_value == "0.92"
        assert conv.edit_target("1").source_value == "1.09"

    def test_round_trip_display(self):
        conv = _converter("length", "m", "ft")
        conv.edit_source("1")
        s = conv.edit_target(conv.session.target_value)
        assert s.source_value == "1"


class TestEmptyInput:
    @pytest.mark.parametrize("dimension", catalog.list_dimensions(), ids=lambda d: d.id)
    def test_empty_source_blanks_target(self, dimension):
        conv = BidirectionalConverter.for_dimension(dimension)
        conv.edit_source("5")
        assert conv.session.target_value != ""
        assert conv.edit_source("").target_value == ""

    @pytest.mark.parametrize("partial", ["-", ".", "abc"])
    def test_partial_typing(self, partial):
        conv = _converter("length", "m", "ft")
        conv.edit_source("2")
        assert conv.edit_source(partial).target_value == ""

    def test_empty_target_blanks_source(self):
        conv = _converter("length", "m", "ft")
        conv.edit_source("2")
        s = conv.edit_target("")
        assert s.source_value == ""


class TestUnitChanges:
    def test_source_unit_change_rederives_source(self):
        conv = _converter("length", "cm", "m")
        s = conv.edit_source("100")
        assert s.target_value == "1"

        s = conv.set_source_unit("mm")
        assert s.target_value == "1"
        assert s.source_value == "1000"
        assert s.last_edited is Side.TARGET

    def test_target_unit_change_rederives_target(self):
        conv = _converter("length", "m", "ft")
        conv.edit_source("1")
        s = conv.set_target_unit("in")
        assert s.source_value == "1"
        assert s.target_value == "39.37007874"
        assert s.last_edited is Side.SOURCE

    def test_unit_change_with_empty_values(self):
        conv = _converter("length", "m", "ft")
        s = conv.set_source_unit("km")
        assert (s.source_value, s.target_value) == ("", "")

    def test_unknown_unit_falls_back_to_first(self):
        conv = _converter("length", "m", "m")
        conv.set_source_unit("furlong")
        s = conv.edit_source("1000")
        assert s.source_unit == "furlong"
        assert s.target_value == "1"


class TestSwap:
    def test_swap_exchanges_verbatim(self):
        conv = _converter("length", "m", "ft")
        conv.edit_source("1")
        s = conv.swap()
        assert (s.source_unit, s.target_unit) == ("ft", "m")
        assert (s.source_value, s.target_value) == ("3.280839895", "1")

    def test_swap_twice_is_identity(self):
        conv = _converter("pressure", "bar", "psi")
        conv.edit_source("2.5")
        before = conv.snapshot()
        conv.swap()
        conv.swap()
        assert conv.session == before

    def test_swap_keeps_last_edited(self):
        conv = _converter("length", "m", "ft")
        conv.edit_target("3")
        assert conv.swap().last_edited is Side.TARGET


class TestResetAndPresets:
    def test_reset(self):
        conv = _converter("time")
        conv.set_source_unit("d")
        conv.edit_source("3")
        s = conv.reset()
        assert s == ConversionSession("h", "min")

    def test_apply_preset(self):
        dim = catalog.get_dimension("temperature")
        conv = BidirectionalConverter.for_dimension(dim)
        conv.edit_target("50")
        s = conv.apply_preset(dim.get_preset(2))  # 32°F to Celsius
        assert (s.source_unit, s.target_unit) == ("f", "c")
        assert s.source_value == "32"
        assert s.target_value == "0"
        assert s.last_edited is Side.SOURCE

    def test_all_presets_produce_output(self):
        for dim in catalog.list_dimensions():
            conv = BidirectionalConverter.for_dimension(dim)
            for preset in dim.presets:
                assert conv.apply_preset(preset).target_value != "", (dim.id, preset.label)


class TestSnapshot:
    def test_snapshot_is_a_copy(self):
        conv = _converter("length", "m", "ft")
        snap = conv.snapshot()
        conv.edit_source("1")
        assert snap.source_value == ""
