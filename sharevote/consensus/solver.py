"""Plurality vote over k-subsets and suspect detection.

Flow
----
1. Every k-subset of the points is interpolated; candidates are tallied.
   The winner is the first candidate whose tally strictly exceeds the
   running maximum, so ties go to the candidate seen first.
2. For each share (input order) a trial subset is formed from the first k
   *other* shares.  If its candidate differs from the winner, the share is
   reported as a suspect.  Shares with fewer than k others are skipped.

The solver is a pure function of ``(points, k, mode)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Sequence, Tuple

from sharevote.config import DEFAULT_MODE
from sharevote.errors import DuplicateShareError, InvalidThresholdError
from sharevote.interp.combinations import k_subsets
from sharevote.interp.lagrange import Candidate, PointLike, interpolator_for


@dataclass(frozen=True)
class Reconstruction:
    """Outcome of one reconstruction."""

    secret: Candidate
    suspects: FrozenSet[int]
    votes: int  # tally of the winning candidate
    subsets: int  # number of k-subsets enumerated
    tally: Tuple[Tuple[Candidate, int], ...]  # first-seen order
    support: Tuple[Tuple[int, int], ...]  # (share x, winning subsets containing it)

    def support_for(self, x: int) -> int:
        return dict(self.support)[x]

    def as_pair(self) -> Tuple[Candidate, FrozenSet[int]]:
        return self.secret, self.suspects


def _validate(points: Sequence[PointLike], k: int) -> None:
    m = len(points)
    if m == 0 or k < 1 or k > m:
        raise InvalidThresholdError(f"Invalid threshold: k={k}, n={m}")
    seen = set()
    for x, _ in points:
        if x in seen:
            raise DuplicateShareError(f"Share {x} appears more than once")
        seen.add(x)


def reconstruct(
    points: Sequence[PointLike], k: int, mode: str = DEFAULT_MODE
) -> Reconstruction:
    """Run the plurality and suspect phases over *points*."""
    interpolate = interpolator_for(mode)
    _validate(points, k)

    # ---- plurality phase ----
    tally: Dict[Candidate, int] = {}
    winners: Dict[Candidate, List[Tuple[int, ...]]] = {}
    best: Candidate | None = None
    max_votes = 0
    subsets = 0
    for subset in k_subsets(points, k):
        subsets += 1
        cand = interpolate(subset)
        tally[cand] = tally.get(cand, 0) + 1
        winners.setdefault(cand, []).append(tuple(x for x, _ in subset))
        if tally[cand] > max_votes:
            max_votes = tally[cand]
            best = cand

    # ---- suspect phase ----
    suspects = set()
    for x, _ in points:
        trial = [p for p in points if p[0] != x][:k]
        if len(trial) < k:
            continue
        if interpolate(trial) != best:
            suspects.add(x)

    support = {x: 0 for x, _ in points}
    for xs in winners[best]:
        for x in xs:
            support[x] += 1

    return Reconstruction(
        secret=best,
        suspects=frozenset(suspects),
        votes=max_votes,
        subsets=subsets,
        tally=tuple(tally.items()),
        support=tuple(support.items()),
    )


def solve(
    points: Sequence[PointLike], k: int, mode: str = DEFAULT_MODE
) -> Tuple[Candidate, FrozenSet[int]]:
    """Return ``(secret, suspects)`` for *points* with threshold *k*."""
    return reconstruct(points, k, mode).as_pair()
