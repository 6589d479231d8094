from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

CENT = Decimal("0.01")


def _to_decimal(amount: Decimal | int | float | str) -> Decimal:
    if isinstance(amount, Decimal):
        return amount
    # str() first so 12.1 stays 12.1 instead of its binary expansion
    return Decimal(str(amount))


def _to_cents(amount: Decimal | int | float | str) -> Decimal:
    value = _to_decimal(amount)
    with localcontext() as ctx:
        # quantize needs every integer digit plus the two decimals
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        return value.quantize(CENT, rounding=ROUND_HALF_UP)


def format_amount(amount: Decimal | int | float | str) -> str:
    """Format an amount for EMV field 54: 12.5 -> '12.50'"""
    return f"{_to_cents(amount):.2f}"


def format_brl(amount: Decimal | int | float | str) -> str:
    """Format an amount as BRL string: 2850 -> 'R$ 2.850,00'"""
    formatted = f"{_to_cents(amount):,.2f}".replace(",", "X").replace(".", ",").replace("X", ".")
    return f"R$ {formatted}"


def parse_brl(text: str) -> Decimal | None:
    """Parse a BRL amount string into a Decimal. Returns None on invalid input.

    Accepts formats like '2850', '2850.00', '2.850,00', '2850,50', 'R$ 10,00'.
    Values that do not fit the default decimal precision are rejected.
    """
    text = text.strip().removeprefix("R$").strip()
    if not text:
        return None
    # Handle PT-BR format: '2.850,00' -> '2850.00'
    if "," in text:
        text = text.replace(".", "").replace(",", ".")
    try:
        value = Decimal(text)
        if not value.is_finite():
            return None
        return value.quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return None
