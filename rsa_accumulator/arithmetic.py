"""
Modular Arithmetic Helpers

Thin wrappers over Python's arbitrary-precision integers. Exponents are
applied one at a time wherever possible so intermediate values never
grow beyond the size of the modulus.
"""

import math


def mod_pow(base: int, exp: int, modulus: int) -> int:
    """
    Compute base^exp mod modulus.

    Args:
        base: Group element
        exp: Non-negative exponent
        modulus: RSA modulus

    Returns:
        int: base^exp mod modulus

    Raises:
        ValueError: If modulus is not positive or exp is negative
    """
    if modulus <= 0:
        raise ValueError("Modulus must be positive")
    if exp < 0:
        raise ValueError("Exponent must be non-negative")

    return pow(base, exp, modulus)


def is_coprime(a: int, b: int) -> bool:
    """Return True if gcd(a, b) == 1."""
    return math.gcd(a, b) == 1


def is_integer(value: object) -> bool:
    """True for plain integers; bool is rejected even though it subclasses int."""
    return isinstance(value, int) and not isinstance(value, bool)
