"""Currency helpers. All amounts in the core are integer USD cents."""

from dockcore.models.errors import InvalidAmountError


def require_cents(value: object, field: str) -> int:
    """Validate a non-negative whole-cent amount.

    Args:
        value: Amount to check
        field: Field name reported in the error details

    Returns:
        The amount as int

    Raises:
        InvalidAmountError: If the amount is not a non-negative integer
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidAmountError({field: repr(value)})
    if value < 0:
        raise InvalidAmountError({field: str(value)})
    return value


def percent_of(amount: int, percentage: int) -> int:
    """Integer-cent share of ``amount``, rounded down."""
    return (amount * percentage) // 100


def format_usd(cents: int) -> str:
    """Format cents for display, e.g. 15000 -> "$150.00"."""
    return f"${cents / 100:,.2f}"
