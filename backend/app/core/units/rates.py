"""Exchange-rate sources for the currency dimension.

Currencies behave like any other unit: one US dollar is the base and each
currency's rate says how many of it buy one dollar. Where those rates come
from is the provider's concern; the converter never sees the difference.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Protocol

from app.core.units.registry import DimensionRegistry
from app.core.units.unit import Unit, base

BASE_CURRENCY = "USD"


@dataclass(frozen=True)
class CurrencyRate:
    code: str
    name: str
    symbol: str
    rate: float  # units of this currency per 1 USD


class RateProvider(Protocol):
    def rates(self) -> Mapping[str, CurrencyRate]:
        """Currency code -> rate, in display order, including the base currency."""
        ...


# Demo snapshot; not a live feed.
_SNAPSHOT: tuple[CurrencyRate, ...] = (
    CurrencyRate("USD", "US Dollar", "$", 1.0),
    CurrencyRate("EUR", "Euro", "€", 0.92),
    CurrencyRate("GBP", "British Pound", "£", 0.78),
    CurrencyRate("JPY", "Japanese Yen", "¥", 150.44),
    CurrencyRate("CAD", "Canadian Dollar", "C$", 1.37),
    CurrencyRate("AUD", "Australian Dollar", "A$", 1.51),
    CurrencyRate("CHF", "Swiss Franc", "Fr", 0.91),
    CurrencyRate("CNY", "Chinese Yuan", "¥", 7.24),
    CurrencyRate("INR", "Indian Rupee", "₹", 83.42),
    CurrencyRate("BRL", "Brazilian Real", "R$", 5.06),
    CurrencyRate("RUB", "Russian Ruble", "₽", 92.79),
    CurrencyRate("KRW", "South Korean Won", "₩", 1369.71),
    CurrencyRate("MXN", "Mexican Peso", "Mex$", 16.75),
    CurrencyRate("SGD", "Singapore Dollar", "S$", 1.35),
    CurrencyRate("NZD", "New Zealand Dollar", "NZ$", 1.64),
)


class StaticRateProvider:
    """Serves a fixed table of rates."""

    def __init__(self, rates: tuple[CurrencyRate, ...] = _SNAPSHOT):
        self._rates = {r.code: r for r in rates}

    def rates(self) -> Mapping[str, CurrencyRate]:
        return dict(self._rates)


def _currency_unit(rate: CurrencyRate) -> Unit:
    if rate.rate <= 0:
        raise ValueError(f"Currency '{rate.code}' has a non-positive rate {rate.rate}")
    label = f"{rate.name} ({rate.symbol})"
    if rate.code == BASE_CURRENCY:
        return base(rate.code, label)
    return Unit(
        id=rate.code,
        name=label,
        to_base=lambda value: value / rate.rate,
        from_base=lambda value: value * rate.rate,
    )


def build_currency_registry(provider: RateProvider) -> DimensionRegistry:
    """Turn a provider's current rates into a currency registry."""
    return DimensionRegistry("currency", [_currency_unit(r) for r in provider.rates().values()])
