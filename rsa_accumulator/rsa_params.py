"""
RSA Parameters for the Accumulator

Provides the fixed public parameters (modulus N and generator g) used when
a caller does not supply its own, plus validation and JSON loading for
externally generated parameters.
"""

import json
import logging
import math
from pathlib import Path
from typing import Optional, Tuple, Union

from .exceptions import InvalidParameter

logger = logging.getLogger(__name__)

# Demo 2048-bit RSA modulus. Its factorization is not used anywhere in this
# package; production deployments must supply N from a trusted setup.
DEFAULT_N = int(
    "c09f09d858a2037ca76e7b1c52543a002213c8f1086a587f41f9616ac4fd8d6e"
    "cbec8852fd95adaec50c34cde7f0e676059896c2be9f2e479297a7507f1d1e58"
    "afe26be99489b798a704f1627b8e6b09b9a88b01ce697c4197bbeec134bb41aa"
    "c0579c8026deec542c6965b0b8d39e77405a65110af3774f88cd463c6c304483"
    "c6f0a802f288c8ba4f071b6afcefa2b9395e2fe71aaea8e277c06b5d2724153c"
    "4a20209c06f2e0f523fb96b576a37937fb340478e86bbbfa8914c50f0f33a894"
    "8836caf99ca5f7f6983787a25e091d9591204dbb8c14e473d172f4e7a0b5164c"
    "f9ee97f838ded82fd2357a51a6f495850ef268009e7ecc19047f8e99a91a4d9b",
    16,
)

# QR subgroup generator: g = 2^2 mod N
DEFAULT_G = pow(2, 2, DEFAULT_N)

# Minimum modulus size accepted from a params file
PARAMS_FILE_MIN_BITS = 2040


def generate_demo_params() -> Tuple[int, int]:
    """
    Return the built-in demo parameters.

    Returns:
        Tuple[int, int]: (N, g) with the documented 2048-bit demo modulus
    """
    return DEFAULT_N, DEFAULT_G


def generate_toy_params() -> Tuple[int, int]:
    """
    Generate small toy RSA parameters for unit testing.

    Returns:
        Tuple[int, int]: A tuple containing small (N, g) for fast testing
    """
    # Small toy parameters: N = 11 * 19 = 209, g = 4
    return 209, 4


def validate_params(N: int, g: int, min_bits: int = 0) -> None:
    """
    Validate RSA parameters for accumulator operations.

    Args:
        N: RSA modulus
        g: Generator base
        min_bits: Minimum accepted bit length of N (0 disables the check)

    Raises:
        InvalidParameter: If parameters are invalid
    """
    for name, value in (("N", N), ("g", g)):
        if not isinstance(value, int) or isinstance(value, bool):
            raise InvalidParameter(f"{name} must be an integer, got {type(value).__name__}")

    if N < 3:
        raise InvalidParameter("RSA modulus N must be at least 3")

    if N % 2 == 0:
        raise InvalidParameter("RSA modulus N must be odd")

    if min_bits and N.bit_length() < min_bits:
        raise InvalidParameter(f"RSA modulus N must be at least {min_bits} bits")

    if g <= 1:
        raise InvalidParameter("Generator g must be greater than 1")

    if g >= N:
        raise InvalidParameter("Generator g must be less than modulus N")

    if math.gcd(N, g) != 1:
        raise InvalidParameter("RSA modulus N and generator g must be coprime")


def load_params(params_file: Optional[Union[str, Path]] = None) -> Tuple[int, int]:
    """
    Load RSA parameters for accumulator operations.

    Args:
        params_file: JSON file with hex-encoded "N" and "g". Defaults to
            params.json next to this module.

    Returns:
        Tuple[int, int]: A tuple containing (N, g)

    Raises:
        InvalidParameter: If the file is malformed or parameters are invalid
    """
    path = Path(params_file) if params_file else Path(__file__).parent / "params.json"

    try:
        with open(path, "r") as f:
            params = json.load(f)
    except FileNotFoundError:
        logger.info(f"Params file {path} not found, using demo parameters")
        return generate_demo_params()
    except json.JSONDecodeError as e:
        raise InvalidParameter(f"Invalid parameters file format: {e}") from e

    try:
        N_int = int(params["N"], 16)
        g_int = int(params["g"], 16)
    except (KeyError, TypeError, ValueError) as e:
        raise InvalidParameter(f"Invalid parameters file format: {e}") from e

    validate_params(N_int, g_int, min_bits=PARAMS_FILE_MIN_BITS)
    logger.info(f"Loaded RSA parameters from {path}: N={N_int.bit_length()} bits")
    return N_int, g_int


def save_params(params_file: Union[str, Path], N: int, g: int, description: str = "") -> Path:
    """
    Write RSA parameters in the format read by load_params.

    Args:
        params_file: Destination path
        N: RSA modulus
        g: Generator base
        description: Optional free-form note stored alongside the values

    Returns:
        Path: The written file
    """
    validate_params(N, g)

    params = {"N": hex(N), "g": hex(g)}
    if description:
        params["description"] = description

    path = Path(params_file)
    with open(path, "w") as f:
        json.dump(params, f, indent=2)

    return path


def params_from_settings(settings) -> Tuple[int, int]:
    """
    Resolve (N, g) from application settings.

    Explicit hex values win, then the configured params file, then the
    built-in defaults. g falls back to 2^2 mod N when only N is given;
    g without N is rejected.
    """
    if settings.n_hex:
        try:
            N_int = int(settings.n_hex, 16)
            g_int = int(settings.g_hex, 16) if settings.g_hex else pow(2, 2, N_int)
        except ValueError as e:
            raise InvalidParameter(f"Invalid hex parameter in settings: {e}") from e
        validate_params(N_int, g_int, min_bits=settings.min_modulus_bits)
        return N_int, g_int

    if settings.g_hex:
        raise InvalidParameter("g_hex is set without n_hex; a generator needs its modulus")

    if settings.params_file:
        N_int, g_int = load_params(settings.params_file)
    else:
        N_int, g_int = generate_demo_params()

    validate_params(N_int, g_int, min_bits=settings.min_modulus_bits)
    return N_int, g_int
