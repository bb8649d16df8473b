"""Dimension catalog — every converter is one of these tables.

Each entry is data only: a registry of units, the default unit pair a fresh
converter opens with, the result format policy and a few shortcut presets.
The conversion logic itself lives in ``converter.py`` and is shared.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

from app.core.units.formatting import FormatPolicy
from app.core.units.rates import RateProvider, StaticRateProvider, build_currency_registry
from app.core.units.registry import DimensionRegistry, RegistryError
from app.core.units.unit import affine, base, divided, scaled


class UnknownDimensionError(KeyError):
    """Raised when a dimension id is not in the catalog."""

    def __init__(self, dimension_id: str) -> None:
        self.dimension_id = dimension_id
        super().__init__(dimension_id)

    def __str__(self) -> str:
        return f"Unknown dimension '{self.dimension_id}'"


class UnknownPresetError(IndexError):
    """Raised when a preset index is out of range for its dimension."""

    def __init__(self, dimension_id: str, index: int) -> None:
        self.dimension_id = dimension_id
        self.index = index
        super().__init__(f"Dimension '{dimension_id}' has no preset #{index}")


@dataclass(frozen=True)
class Preset:
    """A "common conversion" shortcut: fills both units and the source value."""

    label: str
    source_unit: str
    target_unit: str
    value: str = "1"


@dataclass(frozen=True)
class Dimension:
    id: str
    title: str
    description: str
    registry: DimensionRegistry
    default_source: str
    default_target: str
    format_policy: FormatPolicy = FormatPolicy.GENERAL
    presets: tuple[Preset, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        for unit_id in (self.default_source, self.default_target):
            if not self.registry.has_unit(unit_id):
                raise RegistryError(self.id, f"default unit '{unit_id}' is not registered")
        for preset in self.presets:
            for unit_id in (preset.source_unit, preset.target_unit):
                if not self.registry.has_unit(unit_id):
                    raise RegistryError(self.id, f"preset '{preset.label}' uses unknown unit '{unit_id}'")

    def get_preset(self, index: int) -> Preset:
        if not 0 <= index < len(self.presets):
            raise UnknownPresetError(self.id, index)
        return self.presets[index]


# ── Unit tables ──────────────────────────────────────────────────────────────

LENGTH = DimensionRegistry("length", [
    divided("mm", "Millimeters (mm)", 1000),
    divided("cm", "Centimeters (cm)", 100),
    base("m", "Meters (m)"),
    scaled("km", "Kilometers (km)", 1000),
    scaled("in", "Inches (in)", 0.0254),
    scaled("ft", "Feet (ft)", 0.3048),
    scaled("yd", "Yards (yd)", 0.9144),
    scaled("mi", "Miles (mi)", 1609.344),
    scaled("nm", "Nautical Miles (nm)", 1852),
])

AREA = DimensionRegistry("area", [
    divided("mm2", "Square Millimeters (mm²)", 1_000_000),
    divided("cm2", "Square Centimeters (cm²)", 10_000),
    base("m2", "Square Meters (m²)"),
    scaled("ha", "Hectares (ha)", 10_000),
    scaled("km2", "Square Kilometers (km²)", 1_000_000),
    scaled("in2", "Square Inches (in²)", 0.00064516),
    scaled("ft2", "Square Feet (ft²)", 0.09290304),
    scaled("yd2", "Square Yards (yd²)", 0.83612736),
    scaled("ac", "Acres (ac)", 4046.8564224),
    scaled("mi2", "Square Miles (mi²)", 2_589_988.110336),
])

WEIGHT = DimensionRegistry("weight", [
    divided("mg", "Milligrams (mg)", 1_000_000),
    divided("g", "Grams (g)", 1000),
    base("kg", "Kilograms (kg)"),
    scaled("t", "Metric Tons (t)", 1000),
    scaled("oz", "Ounces (oz)", 0.028349523125),
    scaled("lb", "Pounds (lb)", 0.45359237),
    scaled("st", "Stone (st)", 6.35029318),
    scaled("ton_us", "Short Tons (US)", 907.18474),
    scaled("ton_uk", "Long Tons (UK)", 1016.0469088),
])

VOLUME = DimensionRegistry("volume", [
    divided("ml", "Milliliters (ml)", 1000),
    divided("cl", "Centiliters (cl)", 100),
    base("l", "Liters (l)"),
    scaled("m3", "Cubic Meters (m³)", 1000),
    scaled("in3", "Cubic Inches (in³)", 0.0163871),
    scaled("ft3", "Cubic Feet (ft³)", 28.3168),
    scaled("yd3", "Cubic Yards (yd³)", 764.555),
    scaled("floz", "Fluid Ounces (fl oz)", 0.0295735),
    scaled("cup", "Cups", 0.236588),
    scaled("pt", "Pints (pt)", 0.473176),
    scaled("qt", "Quarts (qt)", 0.946353),
    scaled("gal", "Gallons (gal)", 3.78541),
    scaled("ukpt", "UK Pints", 0.568261),
    scaled("ukqt", "UK Quarts", 1.13652),
    scaled("ukgal", "UK Gallons", 4.54609),
])

TEMPERATURE = DimensionRegistry("temperature", [
    base("c", "Celsius (°C)"),
    affine("f", "Fahrenheit (°F)", offset=32, numerator=5, denominator=9),
    affine("k", "Kelvin (K)", offset=273.15),
    affine("r", "Rankine (°R)", offset=491.67, numerator=5, denominator=9),
])

TIME = DimensionRegistry("time", [
    divided("ns", "Nanoseconds (ns)", 1_000_000_000),
    divided("us", "Microseconds (μs)", 1_000_000),
    divided("ms", "Milliseconds (ms)", 1000),
    base("s", "Seconds (s)"),
    scaled("min", "Minutes (min)", 60),
    scaled("h", "Hours (h)", 3600),
    scaled("d", "Days (d)", 86_400),
    scaled("wk", "Weeks (wk)", 604_800),
    scaled("mo", "Months (30 days)", 2_592_000),
    scaled("yr", "Years (365 days)", 31_536_000),
])

DIGITAL = DimensionRegistry("digital", [
    divided("b", "Bits (b)", 8),
    base("B", "Bytes (B)"),
    scaled("KB", "Kilobytes (KB)", 1024),
    scaled("MB", "Megabytes (MB)", 1024 ** 2),
    scaled("GB", "Gigabytes (GB)", 1024 ** 3),
    scaled("TB", "Terabytes (TB)", 1024 ** 4),
    scaled("PB", "Petabytes (PB)", 1024 ** 5),
    scaled("Kib", "Kibibits (Kib)", 1024 / 8),
    scaled("Mib", "Mebibits (Mib)", 1024 ** 2 / 8),
    scaled("Gib", "Gibibits (Gib)", 1024 ** 3 / 8),
])

SPEED = DimensionRegistry("speed", [
    base("mps", "Meters per second (m/s)"),
    divided("kph", "Kilometers per hour (km/h)", 3.6),
    scaled("mph", "Miles per hour (mph)", 0.44704),
    scaled("fps", "Feet per second (ft/s)", 0.3048),
    scaled("knot", "Knots", 0.514444),
])

PRESSURE = DimensionRegistry("pressure", [
    base("pa", "Pascal (Pa)"),
    scaled("kpa", "Kilopascal (kPa)", 1000),
    scaled("mpa", "Megapascal (MPa)", 1_000_000),
    scaled("bar", "Bar", 100_000),
    scaled("atm", "Atmosphere (atm)", 101_325),
    scaled("mmhg", "Millimeter of mercury (mmHg)", 133.322),
    scaled("psi", "Pound per square inch (psi)", 6894.76),
    scaled("torr", "Torr", 133.322),
])

POWER = DimensionRegistry("power", [
    base("w", "Watt (W)"),
    scaled("kw", "Kilowatt (kW)", 1000),
    scaled("mw", "Megawatt (MW)", 1_000_000),
    scaled("hp", "Horsepower (hp, mechanical)", 745.7),
    scaled("ftlb", "Foot-pound per second (ft·lb/s)", 1.35582),
    scaled("btu", "BTU per hour (BTU/h)", 0.29307107),
    scaled("cal", "Calorie per second (cal/s)", 4.1868),
    scaled("jps", "Joule per second (J/s)", 1),
])

ENERGY = DimensionRegistry("energy", [
    base("j", "Joules (J)"),
    scaled("kj", "Kilojoules (kJ)", 1000),
    scaled("mj", "Megajoules (MJ)", 1_000_000),
    scaled("cal", "Calories (cal)", 4.184),
    scaled("kcal", "Kilocalories (kcal)", 4184),
    scaled("wh", "Watt-hours (Wh)", 3600),
    scaled("kwh", "Kilowatt-hours (kWh)", 3_600_000),
    scaled("btu", "British Thermal Units (BTU)", 1055.05585262),
    scaled("ftlb", "Foot-pounds (ft·lb)", 1.3558179483),
    scaled("ev", "Electronvolts (eV)", 1.602176634e-19),
])

ANGLE = DimensionRegistry("angle", [
    base("deg", "Degrees (°)"),
    scaled("rad", "Radians (rad)", 180 / math.pi),
    scaled("grad", "Gradians (grad)", 0.9),
    scaled("turn", "Turns", 360),
    divided("minute", "Minutes of arc (')", 60),
    divided("second", 'Seconds of arc (")', 3600),
])


# ── Catalog ──────────────────────────────────────────────────────────────────

def _build_catalog(rate_provider: RateProvider) -> dict[str, Dimension]:
    dimensions = [
        Dimension(
            "length", "Length Converter",
            "Convert between different units of length (meters, feet, etc.)",
            LENGTH, "m", "ft",
            presets=(
                Preset("1 Meter to Feet", "m", "ft"),
                Preset("1 Kilometer to Miles", "km", "mi"),
                Preset("1 Inch to Centimeters", "in", "cm"),
                Preset("1 Foot to Meters", "ft", "m"),
                Preset("1 Mile to Kilometers", "mi", "km"),
                Preset("1 Yard to Meters", "yd", "m"),
            ),
        ),
        Dimension(
            "area", "Area Converter",
            "Convert between different units of area (square meters, acres, etc.)",
            AREA, "m2", "ft2",
            presets=(
                Preset("1 Square Meter to Square Feet", "m2", "ft2"),
                Preset("1 Acre to Square Meters", "ac", "m2"),
                Preset("1 Hectare to Acres", "ha", "ac"),
                Preset("1 Square Kilometer to Square Miles", "km2", "mi2"),
                Preset("1 Square Foot to Square Meters", "ft2", "m2"),
                Preset("1 Square Mile to Acres", "mi2", "ac"),
            ),
        ),
        Dimension(
            "weight", "Weight Converter",
            "Convert between different units of weight (kilograms, pounds, etc.)",
            WEIGHT, "kg", "lb",
            presets=(
                Preset("1 Kilogram to Pounds", "kg", "lb"),
                Preset("1 Pound to Kilograms", "lb", "kg"),
                Preset("1 Ounce to Grams", "oz", "g"),
                Preset("1 Stone to Pounds", "st", "lb"),
                Preset("1 Metric Ton to Short Tons", "t", "ton_us"),
                Preset("100 Grams to Ounces", "g", "oz", "100"),
            ),
        ),
        Dimension(
            "volume", "Volume Converter",
            "Convert between different units of volume (liters, gallons, etc.)",
            VOLUME, "l", "gal",
            presets=(
                Preset("1 Liter to Gallons", "l", "gal"),
                Preset("1 Milliliter to Fluid Ounces", "ml", "floz"),
                Preset("1 Gallon to Liters", "gal", "l"),
                Preset("1 Cup to Milliliters", "cup", "ml"),
                Preset("1 Pint to Milliliters", "pt", "ml"),
                Preset("1 m³ to ft³", "m3", "ft3"),
            ),
        ),
        Dimension(
            "temperature", "Temperature Converter",
            "Convert between different temperature units (Celsius, Fahrenheit, etc.)",
            TEMPERATURE, "c", "f",
            format_policy=FormatPolicy.FIXED_TRIMMED,
            presets=(
                Preset("0°C to Fahrenheit", "c", "f", "0"),
                Preset("100°C to Fahrenheit", "c", "f", "100"),
                Preset("32°F to Celsius", "f", "c", "32"),
                Preset("212°F to Celsius", "f", "c", "212"),
                Preset("0°C to Kelvin", "c", "k", "0"),
                Preset("32°F to Kelvin", "f", "k", "32"),
            ),
        ),
        Dimension(
            "time", "Time Converter",
            "Convert between different units of time (seconds, hours, days, etc.)",
            TIME, "h", "min",
            presets=(
                Preset("1 Hour to Minutes", "h", "min"),
                Preset("1 Day to Hours", "d", "h"),
                Preset("1 Week to Days", "wk", "d"),
                Preset("1 Minute to Seconds", "min", "s"),
                Preset("1 Year to Days", "yr", "d"),
                Preset("1000 ms to Seconds", "ms", "s", "1000"),
            ),
        ),
        Dimension(
            "digital", "Digital Converter",
            "Convert between different digital units (bytes, kilobytes, etc.)",
            DIGITAL, "MB", "GB",
            presets=(
                Preset("1024 MB to GB", "MB", "GB", "1024"),
                Preset("1 GB to MB", "GB", "MB"),
                Preset("1 TB to GB", "TB", "GB"),
                Preset("8 Bits to Bytes", "b", "B", "8"),
                Preset("1 KB to Bits", "KB", "b"),
                Preset("1 MB to Mebibits", "MB", "Mib"),
            ),
        ),
        Dimension(
            "speed", "Speed Converter",
            "Convert between different units of speed (mph, km/h, etc.)",
            SPEED, "kph", "mph",
            presets=(
                Preset("100 km/h to mph", "kph", "mph", "100"),
                Preset("60 mph to km/h", "mph", "kph", "60"),
                Preset("1 m/s to km/h", "mps", "kph"),
                Preset("1 Knot to km/h", "knot", "kph"),
                Preset("1 ft/s to mph", "fps", "mph"),
                Preset("1 mph to m/s", "mph", "mps"),
            ),
        ),
        Dimension(
            "pressure", "Pressure Converter",
            "Convert between different pressure units (pascal, bar, psi, etc.)",
            PRESSURE, "bar", "psi",
            presets=(
                Preset("1 Bar to PSI", "bar", "psi"),
                Preset("1 Atmosphere to Bar", "atm", "bar"),
                Preset("1 PSI to kPa", "psi", "kpa"),
                Preset("760 mmHg to kPa", "mmhg", "kpa", "760"),
                Preset("14.5038 PSI to Bar", "psi", "bar", "14.5038"),
                Preset("101.325 kPa to PSI", "kpa", "psi", "101.325"),
            ),
        ),
        Dimension(
            "power", "Power Converter",
            "Convert between different power units (watts, horsepower, etc.)",
            POWER, "hp", "kw",
            presets=(
                Preset("1 Horsepower to Kilowatts", "hp", "kw"),
                Preset("1 Kilowatt to Horsepower", "kw", "hp"),
                Preset("1 BTU/h to Watts", "btu", "w"),
                Preset("1000 Watts to Kilowatts", "w", "kw", "1000"),
                Preset("1 Calorie/s to Watts", "cal", "w"),
                Preset("1 ft·lb/s to Watts", "ftlb", "w"),
            ),
        ),
        Dimension(
            "energy", "Energy Converter",
            "Convert between different energy units (joules, calories, etc.)",
            ENERGY, "kcal", "kj",
            presets=(
                Preset("1 Kilocalorie to Kilojoules", "kcal", "kj"),
                Preset("1 kWh to Megajoules", "kwh", "mj"),
                Preset("1 BTU to Joules", "btu", "j"),
                Preset("1000 Joules to Calories", "j", "cal", "1000"),
                Preset("1 Wh to Joules", "wh", "j"),
                Preset("1 Joule to Electronvolts", "j", "ev"),
            ),
        ),
        Dimension(
            "angle", "Angle Converter",
            "Convert between different angle units (degrees, radians, etc.)",
            ANGLE, "deg", "rad",
            presets=(
                Preset("180° to Radians (π)", "deg", "rad", "180"),
                Preset("1 Radian to Degrees", "rad", "deg"),
                Preset("90° to Gradians", "deg", "grad", "90"),
                Preset("1° to Minutes of arc", "deg", "minute"),
                Preset("360° to Turns", "deg", "turn", "360"),
                Preset("1 Minute to Seconds of arc", "minute", "second"),
            ),
        ),
        Dimension(
            "currency", "Currency Converter",
            "Convert between different currencies (USD, EUR, etc.)",
            build_currency_registry(rate_provider), "USD", "EUR",
            format_policy=FormatPolicy.FIXED,
            presets=(
                Preset("1 USD to EUR", "USD", "EUR"),
                Preset("1 EUR to USD", "EUR", "USD"),
                Preset("1 USD to GBP", "USD", "GBP"),
                Preset("1 USD to JPY", "USD", "JPY"),
                Preset("1 GBP to EUR", "GBP", "EUR"),
                Preset("1 EUR to JPY", "EUR", "JPY"),
            ),
        ),
    ]
    return {d.id: d for d in dimensions}


class DimensionCatalog:
    """Lookup over all dimensions, in catalog order."""

    def __init__(self, rate_provider: Optional[RateProvider] = None):
        self._dimensions = _build_catalog(rate_provider or StaticRateProvider())

    def list_dimensions(self) -> list[Dimension]:
        return list(self._dimensions.values())

    def get_dimension(self, dimension_id: str) -> Dimension:
        try:
            return self._dimensions[dimension_id]
        except KeyError:
            raise UnknownDimensionError(dimension_id) from None

    def __contains__(self, dimension_id: str) -> bool:
        return dimension_id in self._dimensions


catalog = DimensionCatalog()
