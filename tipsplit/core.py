from decimal import (
    Decimal,
    InvalidOperation,
    Overflow,
    ROUND_HALF_UP,
    getcontext,
    localcontext,
)

getcontext().prec = 28

ZERO = Decimal("0")
HUNDRED = Decimal("100")
CENT = Decimal("0.01")


def _to_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _untrapped(ctx) -> None:
    # Out-of-range results come back as Infinity instead of raising
    ctx.traps[Overflow] = False
    ctx.traps[InvalidOperation] = False


def parse_bill_amount(text) -> Decimal:
    """Parse raw bill text into a Decimal.

    Returns 0 for anything that is not a plain finite number: empty text,
    letters, NaN/Infinity, digit grouping underscores. Never raises.
    """
    if text is None:
        return ZERO
    cleaned = str(text).strip()
    if not cleaned or "_" in cleaned:
        return ZERO
    try:
        amount = Decimal(cleaned)
    except InvalidOperation:
        return ZERO
    if not amount.is_finite():
        return ZERO
    return amount


def tip_percent_from_fraction(fraction) -> int:
    """Return the whole tip percentage for a slider fraction, halves rounded up."""
    f = _to_decimal(fraction)
    return int((f * HUNDRED).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def calculate_tip(bill_amount, tip_percent) -> Decimal:
    """Return the tip for `bill_amount` at `tip_percent` percent (unrounded).

    A result beyond the decimal exponent range comes back as Infinity.
    """
    a = _to_decimal(bill_amount)
    p = _to_decimal(tip_percent)
    with localcontext() as ctx:
        _untrapped(ctx)
        return a * p / HUNDRED


def calculate_total_per_person(bill_amount, split_count, tip_percent) -> Decimal:
    """Return (bill + tip) / split_count, or Infinity when that overflows."""
    if split_count < 1:
        raise ValueError("split_count must be at least 1")
    a = _to_decimal(bill_amount)
    tip = calculate_tip(a, tip_percent)
    with localcontext() as ctx:
        _untrapped(ctx)
        return (a + tip) / Decimal(split_count)


def to_cents(value) -> Decimal:
    """Round a finite amount to cents (ROUND_HALF_UP) at any magnitude."""
    d = _to_decimal(value)
    with localcontext() as ctx:
        # every integer digit, two decimals and a carry from rounding
        ctx.prec = max(ctx.prec, d.adjusted() + 4)
        return d.quantize(CENT, rounding=ROUND_HALF_UP)
