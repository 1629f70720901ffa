"""
RSA Accumulator Package

Compact commitments to a growing set of integers with succinct,
incrementally maintained membership witnesses.
"""

from .accumulator import (
    AccumulatorSnapshot,
    MembershipProof,
    RSAAccumulator,
    membership_witness,
    recompute_root,
    verify_membership,
)
from .exceptions import (
    AccumulatorError,
    InvalidElement,
    InvalidParameter,
    UnknownElement,
)
from .rsa_params import (
    DEFAULT_G,
    DEFAULT_N,
    generate_toy_params,
    load_params,
    save_params,
    validate_params,
)
from .witness_refresh import (
    WitnessTracker,
    batch_refresh_witnesses,
    refresh_witness,
    update_witness_on_addition,
)

__version__ = "0.1.0"
__all__ = [
    "RSAAccumulator",
    "MembershipProof",
    "AccumulatorSnapshot",
    "recompute_root",
    "membership_witness",
    "verify_membership",
    "AccumulatorError",
    "InvalidElement",
    "InvalidParameter",
    "UnknownElement",
    "DEFAULT_N",
    "DEFAULT_G",
    "generate_toy_params",
    "load_params",
    "save_params",
    "validate_params",
    "WitnessTracker",
    "batch_refresh_witnesses",
    "refresh_witness",
    "update_witness_on_addition",
]
