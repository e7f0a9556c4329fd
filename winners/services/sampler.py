from __future__ import annotations
import logging
import random
import time
from typing import List, MutableSequence, Optional, Tuple, TypeVar

from winners.core.errors import EmptyParticipantList, InsufficientParticipants, InvalidWinnerCount
from winners.core.schemas import Winner

logger = logging.getLogger(__name__)

T = TypeVar("T")


def make_rng(seed: Optional[int] = None) -> Tuple[random.Random, int]:
    """Return a private generator and the seed it was built from.

    Without a seed the current time is used, so two runs give different draws.
    """
    if seed is None:
        seed = time.time_ns()
    return random.Random(seed), seed


def partial_shuffle(items: MutableSequence[T], n: int, rng: random.Random) -> None:
    """In-place Fisher-Yates that stops once the first `n` positions are final.

    Afterwards items[:n] is a uniformly random n-permutation of the input.
    Callers guarantee 1 <= n <= len(items).
    """
    size = len(items)
    for i in range(min(n, size - 1)):
        j = rng.randrange(i, size)
        items[i], items[j] = items[j], items[i]


def pick_winners(participants: List[str], n: int, rng: random.Random, source: str = "") -> List[Winner]:
    """Shuffle `participants` in place and return the first `n` as ranked winners."""
    if n < 1:
        raise InvalidWinnerCount(n)
    if not participants:
        raise EmptyParticipantList(source)
    if n > len(participants):
        raise InsufficientParticipants(n, len(participants))

    logger.debug(f"Drawing {n} winner(s) from {len(participants)} participant(s)")
    partial_shuffle(participants, n, rng)
    return [Winner(position=i + 1, name=name) for i, name in enumerate(participants[:n])]
