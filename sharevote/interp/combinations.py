"""k-subset enumeration.

Subsets come out in lexicographic order of the original indices and keep
the input's relative order.  The consensus tie-break depends on this order.
"""

from __future__ import annotations

import math
from typing import Iterator, Sequence, Tuple, TypeVar

from sharevote.errors import InvalidThresholdError

T = TypeVar("T")


def k_subsets(items: Sequence[T], k: int) -> Iterator[Tuple[T, ...]]:
    """Yield every *k*-sized subset of *items* as a tuple."""
    m = len(items)
    if k < 1 or k > m:
        raise InvalidThresholdError(f"Invalid threshold: k={k}, n={m}")
    return _generate(items, k)


def _generate(items: Sequence[T], k: int) -> Iterator[Tuple[T, ...]]:
    m = len(items)
    idx = list(range(k))
    while True:
        yield tuple(items[i] for i in idx)
        # Rightmost index that can still move right
        pos = k - 1
        while pos >= 0 and idx[pos] == m - k + pos:
            pos -= 1
        if pos < 0:
            return
        idx[pos] += 1
        for j in range(pos + 1, k):
            idx[j] = idx[j - 1] + 1


def count_subsets(m: int, k: int) -> int:
    """C(m, k)."""
    return math.comb(m, k)
