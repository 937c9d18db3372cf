"""Satoshi/fiat display formatting for offer bodies and titles.

Amounts stay in integer sats; BTC and fiat figures are rendered through
Decimal so nothing here depends on float rounding or a shared formatter.
"""

from decimal import ROUND_HALF_UP, Decimal, localcontext

SATS_PER_BTC = 100_000_000
_BTC_QUANT = Decimal("0.00000001")
_FIAT_QUANT = Decimal("0.01")


def as_decimal(value: Decimal | int | float | str) -> Decimal:
    """Coerce to Decimal; floats go through their repr so 0.1 stays 0.1."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


def sats_to_btc(sats: int) -> Decimal:
    """Convert sats to BTC: 50_000_000 -> Decimal('0.50000000')."""
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, abs(sats).bit_length() // 3 + 10)
        return (Decimal(sats) / SATS_PER_BTC).quantize(_BTC_QUANT)


def format_btc(sats: int) -> str:
    """Up to 8 fractional digits, trailing zeros trimmed: 150_000_000 -> '1.5'."""
    return trim_decimal(sats_to_btc(sats))


def format_sats(sats: int) -> str:
    """Thousands-separated sats: 10000000 -> '10,000,000'."""
    return f"{sats:,}"


def format_fiat(amount: Decimal | int | float) -> str:
    """Two decimal places, half-up: 50000 -> '50000.00'."""
    value = as_decimal(amount)
    if not value.is_finite():
        return f"{value:f}"
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        ctx.Emax = max(ctx.Emax, value.adjusted() + 1)
        return f"{value.quantize(_FIAT_QUANT, rounding=ROUND_HALF_UP):f}"


def trim_decimal(value: Decimal | int | float) -> str:
    """Plain notation without trailing zeros: Decimal('2.50') -> '2.5', Decimal('0E-8') -> '0'."""
    text = f"{as_decimal(value):f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("", "-0"):
        return "0"
    return text


def format_premium(premium_percent: Decimal | int | float) -> str:
    """Market price line: 'Market price', 'Market +5%' or 'Market -3%'."""
    premium = as_decimal(premium_percent)
    if premium == 0:
        return "Market price"
    sign = "+" if not premium.is_nan() and premium > 0 else ""
    return f"Market {sign}{trim_decimal(premium)}%"
