import typing as t

if t.TYPE_CHECKING:
    from .. import point


_HEX_DIGITS = "0123456789abcdef"
_DEC_DIGITS = "0123456789"


def parse_int(literal: str) -> int:
    """
    Parse a decimal or 0x-prefixed hexadecimal integer literal.

    Whitespace anywhere in the literal is ignored, so long constants may
    be split across lines. Hex digits may be upper or lower case.

    Args:
        literal: Text such as "7", "-3" or "0xFFFFFC2F"

    Returns:
        Parsed integer

    Raises:
        ValueError: If the literal is empty or contains invalid digits
    """
    cleaned = "".join(literal.strip().split()).lower()
    negative = cleaned.startswith("-")
    cleaned = cleaned.removeprefix("-")

    if cleaned.startswith("0x"):
        digits = cleaned.removeprefix("0x")
        alphabet = _HEX_DIGITS
        base = 16
    else:
        digits = cleaned
        alphabet = _DEC_DIGITS
        base = 10

    if not digits:
        raise ValueError("Integer literal is empty")
    if any(c not in alphabet for c in digits):
        raise ValueError(f"Invalid base {base} integer literal: {literal!r}")

    value = int(digits, base)
    return -value if negative else value


def int_to_hex(value: int, width: int = 64) -> str:
    """Format a non-negative integer as 0x-prefixed, zero-padded uppercase hex."""
    if value < 0:
        raise ValueError("Value must be non-negative")
    return f"0x{value:0{width}X}"


def format_point(pt: "point.Point") -> str:
    """Render a point as a decimal coordinate pair, or "infinity"."""
    if pt.is_infinity:
        return "infinity"
    return f"({pt.x},{pt.y})"
