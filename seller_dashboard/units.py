"""Price unit conversion.

All prices and fees inside the package are ``Decimal`` values in
10,000-yen units ("man-yen"), the unit listings are entered and shown in.
Convert yen amounts only at the edges, with the helpers below.
"""

from decimal import ROUND_HALF_UP, Decimal

YEN_PER_MAN = Decimal("10000")


def yen_to_man(yen: int | Decimal) -> Decimal:
    """Convert a yen amount to 10,000-yen units."""
    return Decimal(yen) / YEN_PER_MAN


def man_to_yen(man: Decimal) -> int:
    """Convert 10,000-yen units to whole yen, rounding half up."""
    return int((man * YEN_PER_MAN).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def format_man_yen(man: Decimal) -> str:
    """Display form used on listing pages, e.g. ``1,234万円``."""
    if man == man.to_integral_value():
        return f"{int(man):,}万円"
    return f"{man.normalize():,f}万円"
