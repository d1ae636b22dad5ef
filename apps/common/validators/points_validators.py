"""
Points-related validators.
"""
from decimal import Decimal

# Largest value every supported backend stores in a PositiveIntegerField
MAX_POINTS = 2147483647


def parse_points_amount(value):
    """
    Coerce a JSON amount into a positive whole number of points.

    Booleans, strings and non-integral numbers are rejected, as are zero,
    negative amounts and anything above MAX_POINTS.

    Raises:
        ValueError: If the amount is not a positive whole number

    Returns:
        int: The amount as an integer
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise ValueError("Amount must be a number")

    if isinstance(value, float) and not value.is_integer():
        raise ValueError("Amount must be a whole number of points")
    if isinstance(value, Decimal) and (not value.is_finite() or value != value.to_integral_value()):
        raise ValueError("Amount must be a whole number of points")

    amount = int(value)
    if amount <= 0:
        raise ValueError("Amount must be greater than 0")
    if amount > MAX_POINTS:
        raise ValueError(f"Amount must not exceed {MAX_POINTS:,}")

    return amount
