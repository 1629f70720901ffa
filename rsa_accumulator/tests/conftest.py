"""
Shared fixtures for RSA accumulator tests.
"""

import math
import secrets

import pytest

from rsa_accumulator.accumulator import RSAAccumulator
from rsa_accumulator.config import get_settings
from rsa_accumulator.rsa_params import DEFAULT_N, generate_toy_params


@pytest.fixture
def toy_params():
    """Provide toy RSA parameters for testing (N=209, g=4)."""
    return generate_toy_params()


@pytest.fixture
def toy_accumulator(toy_params):
    """Fresh accumulator over the toy group."""
    N, g = toy_params
    return RSAAccumulator(N, g)


@pytest.fixture
def random_element():
    """Factory for random 120-byte elements coprime to the default modulus."""

    def _make(modulus: int = DEFAULT_N) -> int:
        while True:
            x = int.from_bytes(secrets.token_bytes(120), "big")
            if x > 1 and math.gcd(x, modulus) == 1:
                return x

    return _make


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached; drop them so env patches take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
