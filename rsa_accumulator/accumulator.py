"""
RSA Accumulator Core Operations

Implements the accumulator state, incremental member addition with
witness maintenance, membership proofs and stateless verification.

    A_0 = g
    A_i = A_{i-1}^{x_i} mod N
    w_j = g^(prod of all x_i, i != j) mod N,   w_j^{x_j} == A_n
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, NamedTuple, Optional

from .arithmetic import is_coprime, is_integer, mod_pow
from .config import get_settings
from .exceptions import InvalidElement
from .rsa_params import DEFAULT_G, DEFAULT_N, params_from_settings, validate_params
from .witness_refresh import WitnessTracker, refresh_witness

logger = logging.getLogger(__name__)


class MembershipProof(NamedTuple):
    """Membership witness pair (w, x); unpacks like a plain tuple."""

    witness: int
    element: int


@dataclass(frozen=True)
class AccumulatorSnapshot:
    """Consistent view of an accumulator taken between two additions."""

    modulus: int
    generator: int
    commitment: int
    size: int
    witnesses: Dict[int, int] = field(default_factory=dict)

    def prove_membership(self, element: int) -> Optional[MembershipProof]:
        witness = self.witnesses.get(element)
        if witness is None:
            return None
        return MembershipProof(witness, element)


def recompute_root(elements: Iterable[int], N: int, g: int) -> int:
    """
    Recompute accumulator root from scratch given a sequence of elements.

    Uses iterative modular exponentiation to avoid huge intermediate exponents.

    Args:
        elements: Elements to include in the accumulator
        N: RSA modulus
        g: Generator base

    Returns:
        int: Accumulator root value

    Raises:
        ValueError: If inputs are invalid

    Example:
        >>> recompute_root([3, 5, 7], 35, 2) == pow(2, 105, 35)
        True
    """
    if N <= 0 or g <= 0:
        raise ValueError("N and g must be positive")

    if g >= N:
        raise ValueError("Generator g must be less than modulus N")

    A = g
    for x in elements:
        if x <= 0:
            raise ValueError("All elements must be positive")
        A = mod_pow(A, x, N)

    return A


def membership_witness(elements: Iterable[int], target: int, N: int, g: int) -> int:
    """
    Compute the membership witness for target from scratch.

    Equivalent to refresh_witness, with the argument order of recompute_root.
    """
    if target <= 1:
        raise ValueError(f"Target element {target} must be greater than 1")

    return refresh_witness(target, elements, N, g)


def verify_membership(commitment: int, proof: MembershipProof, N: int) -> bool:
    """
    Verify that proof = (w, x) shows x is accumulated in commitment.

    Verification equation: w^x ≡ A (mod N)

    Malformed input (non-integers, values outside the group, x < 2) is
    rejected by returning False rather than raising.

    Args:
        commitment: Claimed accumulator value A
        proof: (witness, element) pair
        N: RSA modulus

    Returns:
        bool: True if x is a member, False otherwise

    Example:
        >>> verify_membership(pow(4, 13, 209), (4, 13), 209)
        True
    """
    try:
        w, x = proof
    except (TypeError, ValueError):
        return False

    if not all(is_integer(v) for v in (commitment, w, x, N)):
        return False

    if N <= 2 or w <= 0 or commitment <= 0 or x <= 1:
        return False

    if w >= N or commitment >= N:
        return False

    return mod_pow(w, x, N) == commitment


class RSAAccumulator:
    """
    Mutable RSA accumulator with incrementally maintained witnesses.

    A single re-entrant lock guards the (commitment, witnesses) pair so
    readers never see a half-applied addition.
    """

    def __init__(self, N: Optional[int] = None, g: Optional[int] = None):
        N = DEFAULT_N if N is None else N
        g = DEFAULT_G if g is None else g
        validate_params(N, g)

        self._n = N
        self._a0 = g
        self._a = g
        self._size = 0
        self._witnesses = WitnessTracker()
        self._lock = threading.RLock()

        logger.info(f"Initialized RSA accumulator: N={N.bit_length()} bits")

    @classmethod
    def from_settings(cls, settings=None) -> "RSAAccumulator":
        """Build an accumulator from the configured public parameters."""
        N, g = params_from_settings(settings or get_settings())
        return cls(N, g)

    @property
    def modulus(self) -> int:
        return self._n

    @property
    def commitment(self) -> int:
        """Current accumulator value A."""
        with self._lock:
            return self._a

    def get_a0(self) -> int:
        """Return the generator g, the value of A before any addition."""
        return self._a0

    def get_size(self) -> int:
        """Return the number of elements added so far."""
        with self._lock:
            return self._size

    def elements(self) -> List[int]:
        """Accumulated elements in insertion order."""
        with self._lock:
            return self._witnesses.elements()

    def __len__(self) -> int:
        return self.get_size()

    def __contains__(self, element: object) -> bool:
        with self._lock:
            return element in self._witnesses

    def __repr__(self) -> str:
        return f"RSAAccumulator(N=<{self._n.bit_length()} bits>, size={self._size})"

    def _check_element(self, x: int) -> None:
        if not is_integer(x):
            raise InvalidElement(f"Element must be an integer, got {type(x).__name__}")

        if x <= 1:
            raise InvalidElement(f"Element {x} must be greater than 1")

        if not is_coprime(x, self._n):
            raise InvalidElement("Element shares a factor with the modulus N")

    def add(self, x: int) -> int:
        """
        Add element x to the accumulator.

        Updates the commitment to A^x mod N, raises every existing witness
        to x, and records the previous commitment as the witness for x.
        Adding an element that is already accumulated changes nothing.

        Args:
            x: Element to add (integer > 1, coprime to N)

        Returns:
            int: The updated commitment

        Raises:
            InvalidElement: If x is rejected; no state is modified
        """
        try:
            self._check_element(x)
        except InvalidElement as e:
            logger.warning(f"Rejected element: {e}")
            raise

        with self._lock:
            if x in self._witnesses:
                logger.debug("Element already accumulated, commitment unchanged")
                return self._a

            previous = self._a
            new_a = mod_pow(previous, x, self._n)

            self._witnesses.update_on_addition(x, self._n)
            self._witnesses.register(x, previous)

            self._a = new_a
            self._size += 1

            logger.debug(f"Added element #{self._size} ({x.bit_length()} bits)")
            return new_a

    def prove_membership(self, x: int) -> MembershipProof:
        """
        Return the current membership proof (w, x) for x.

        Raises:
            UnknownElement: If x was never added
        """
        with self._lock:
            return MembershipProof(self._witnesses.get(x), x)

    @staticmethod
    def verify_membership(commitment: int, proof: MembershipProof, N: int) -> bool:
        """Stateless check of proof against commitment; see verify_membership."""
        return verify_membership(commitment, proof, N)

    def snapshot(self) -> AccumulatorSnapshot:
        """Copy commitment, size and all witnesses as of the last completed add."""
        with self._lock:
            return AccumulatorSnapshot(
                modulus=self._n,
                generator=self._a0,
                commitment=self._a,
                size=self._size,
                witnesses=dict(self._witnesses.items()),
            )

    def recompute_commitment(self) -> int:
        """Rebuild A from g and the element history, ignoring the stored value."""
        with self._lock:
            return recompute_root(self._witnesses.elements(), self._n, self._a0)

    def refresh_witness(self, x: int) -> int:
        """Rebuild the witness for x from the element history."""
        with self._lock:
            return self._witnesses.refresh(x, self._n, self._a0)
