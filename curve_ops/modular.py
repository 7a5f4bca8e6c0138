def modulo_power(base: int, exponent: int, modulus: int) -> int:
    """
    Compute (base ** exponent) % modulus by repeated squaring.

    The exponent is consumed one bit at a time, least significant first.
    ``v`` holds base^(2^i) % modulus for the current bit i and is folded
    into the accumulator whenever that bit is set. Squaring always uses
    the already reduced ``v``, so intermediates stay below modulus^2.

    Example, 5^117 % 19 with 117 = 0b1110101:

        bit  v                  a
        1    5 % 19 = 5         (1 * 5) % 19 = 5
        0    (5*5) % 19 = 6     5
        1    (6*6) % 19 = 17    (5 * 17) % 19 = 9
        0    (17*17) % 19 = 4   9
        1    (4*4) % 19 = 16    (9 * 16) % 19 = 11
        1    (16*16) % 19 = 9   (11 * 9) % 19 = 4
        1    (9*9) % 19 = 5     (4 * 5) % 19 = 1

    Args:
        base: Integer base, may be negative
        exponent: Non-negative exponent
        modulus: Positive modulus

    Returns:
        Residue in the range [0, modulus)

    Raises:
        ValueError: If exponent is negative or modulus is not positive
    """
    if exponent < 0:
        raise ValueError("Exponent must be non-negative")
    if modulus <= 0:
        raise ValueError("Modulus must be positive")

    v = 0
    a = 1
    first = True
    while exponent > 0:
        if first:
            v = base % modulus
            first = False
        else:
            v = (v * v) % modulus

        if exponent % 2 == 1:
            a = (a * v) % modulus
        exponent //= 2

    return a + modulus if a < 0 else a


def modulo_inverse(value: int, modulus: int) -> int:
    """
    Compute the multiplicative inverse of value modulo a prime.

    Uses Fermat's little theorem: value^(p-1) = 1 (mod p), hence
    value^(p-2) is the inverse. The modulus must be prime; this is not
    checked, and a composite modulus yields a meaningless residue.

    Args:
        value: Integer to invert
        modulus: Prime modulus

    Returns:
        Residue r in [0, modulus) with (r * value) % modulus == 1

    Raises:
        ValueError: If value is a multiple of modulus
    """
    if modulus <= 0:
        raise ValueError("Modulus must be positive")
    if value % modulus == 0:
        raise ValueError("Value has no inverse modulo the given modulus")
    return modulo_power(value, modulus - 2, modulus)
