"""
Reduction of a set of GeoDNA codes to a minimal covering set.
"""

from typing import Iterable, List

from .codec import ALPHABET, bounding_box


def _reduce_pass(codes: List[str]) -> List[str]:
    """
    Merge every complete quartet of siblings into its parent, once.

    A code whose parent would be empty (the bare hemisphere marker) or
    whose siblings are not all present is kept as is. A parent that was
    already in the input is emitted only once.
    """
    present = set(codes)
    emitted = set()
    reduced = []

    for code in codes:
        if code not in present:
            continue
        parent = code[:-1]
        siblings = [parent + ch for ch in ALPHABET]
        if parent and all(s in present for s in siblings):
            for s in siblings:
                present.discard(s)
            code = parent
        if code not in emitted:
            emitted.add(code)
            reduced.append(code)

    return reduced


def reduce(codes: Iterable[str]) -> List[str]:
    """
    Reduce codes to the smallest set covering the same area.

    Whenever all four children of a code are present they are replaced by
    the parent. Passes repeat until nothing merges, since a merge can
    complete a quartet one level up. Output order is not significant.

    Args:
        codes: GeoDNA codes, of the same or mixed precision

    Returns:
        List of GeoDNA codes

    Raises:
        InvalidCodeError: If any input is not a valid code
    """
    current = list(dict.fromkeys(codes))
    for code in current:
        bounding_box(code)

    # Each pass that shrinks the list shortens at least one code.
    while True:
        reduced = _reduce_pass(current)
        if len(reduced) == len(current):
            return reduced
        current = reduced
