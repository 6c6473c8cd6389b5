"""Number formatting for coordinate text output."""

from __future__ import annotations


def format_num(value: float, decimals: int | None = None, compact: bool = False) -> str:
    """Format a coordinate value.

    Args:
        value: The number to format (ints are treated as floats).
        decimals: Fixed number of fraction digits, or None for the
            shortest representation that round-trips.
        compact: Write values without a fractional part as bare integers
            ("15" instead of "15.0" or "15.00").

    Examples:
        >>> format_num(15.0)
        '15.0'
        >>> format_num(15.0, compact=True)
        '15'
        >>> format_num(15.5, decimals=2, compact=True)
        '15.50'
    """
    v = float(value)
    if compact and v.is_integer():
        # -0.0 prints as "0"
        return str(int(v))
    if decimals is not None:
        return f"{v:.{decimals}f}"
    return repr(v)
