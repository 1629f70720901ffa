"""
Witness Tracking for RSA Accumulators

Keeps a membership witness for every accumulated element and updates
them in place as new elements join, so a proof can be handed out at any
time without recomputing from the full element history.
"""

import logging
from typing import Dict, Iterable, Iterator, List, Tuple

from .arithmetic import mod_pow
from .exceptions import UnknownElement

logger = logging.getLogger(__name__)


def update_witness_on_addition(old_witness: int, added: int, N: int) -> int:
    """
    Update an existing witness when a new element is added to the set.

    new_witness = old_witness^added mod N

    Args:
        old_witness: Existing witness before addition
        added: The element that was just added to the set
        N: RSA modulus

    Returns:
        int: Updated witness after addition
    """
    if old_witness <= 0 or added <= 0 or N <= 0:
        raise ValueError("All parameters must be positive")

    return mod_pow(old_witness, added, N)


def refresh_witness(target: int, elements: Iterable[int], N: int, g: int) -> int:
    """
    Recompute the membership witness for target from scratch.

    The witness is g raised to every accumulated element except target.
    Only the first occurrence of target is skipped, so the result stays
    correct if the history is a sequence rather than a set.

    Args:
        target: The element whose witness is needed
        elements: Every element currently in the accumulator
        N: RSA modulus
        g: Generator base

    Returns:
        int: Witness for target

    Raises:
        UnknownElement: If target is not among elements
        ValueError: If N or g is not positive
    """
    if N <= 0 or g <= 0:
        raise ValueError("N and g must be positive")

    witness = g
    skipped = False
    for x in elements:
        if not skipped and x == target:
            skipped = True
            continue
        witness = mod_pow(witness, x, N)

    if not skipped:
        raise UnknownElement(f"Element {target} not found in accumulated elements")

    return witness


def batch_refresh_witnesses(elements: Iterable[int], N: int, g: int) -> Dict[int, int]:
    """
    Refresh witnesses for all members in the current set.

    Returns:
        dict[int, int]: Mapping from element -> witness
    """
    element_list = list(elements)
    return {x: refresh_witness(x, element_list, N, g) for x in element_list}


class WitnessTracker:
    """
    Insertion-ordered map from accumulated element to its current witness.

    The tracker does no locking of its own; its owner serializes access.
    """

    def __init__(self) -> None:
        self._witnesses: Dict[int, int] = {}

    def register(self, element: int, witness: int) -> None:
        """Start tracking element with its initial witness."""
        self._witnesses[element] = witness

    def update_on_addition(self, added: int, N: int) -> None:
        """Raise every tracked witness to the newly added element."""
        for element, witness in self._witnesses.items():
            self._witnesses[element] = update_witness_on_addition(witness, added, N)

    def get(self, element: int) -> int:
        try:
            return self._witnesses[element]
        except KeyError:
            raise UnknownElement(f"Element {element} was never added") from None

    def refresh(self, element: int, N: int, g: int) -> int:
        """Recompute element's witness from the tracked history, ignoring the stored value."""
        if element not in self._witnesses:
            raise UnknownElement(f"Element {element} was never added")
        return refresh_witness(element, self._witnesses.keys(), N, g)

    def elements(self) -> List[int]:
        return list(self._witnesses)

    def items(self) -> Iterator[Tuple[int, int]]:
        return iter(list(self._witnesses.items()))

    def clear(self) -> None:
        self._witnesses.clear()

    def __contains__(self, element: object) -> bool:
        return element in self._witnesses

    def __len__(self) -> int:
        return len(self._witnesses)
