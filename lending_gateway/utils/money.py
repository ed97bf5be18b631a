"""Monetary rounding helpers"""

from decimal import Decimal, ROUND_HALF_UP


def round_to_unit(value: float) -> int:
    """Round to the nearest whole monetary unit, halves away from zero"""
    return int(Decimal(repr(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
