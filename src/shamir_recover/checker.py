"""Cross-check every k-subset of shares and report the distinct secrets."""
from __future__ import annotations

from concurrent.futures import ProcessPoolExecutor
from typing import Dict, Iterable, Iterator, Sequence, Tuple

import structlog

from .arith import ExactRational
from .combinations import CombinationEnumerator
from .config import ReconstructionConfig
from .errors import InvalidThreshold, SharesInsufficient, TooManyCombinations
from .interpolation import interpolate_at_zero
from .models import Consistent, Inconsistent, Reconstruction, Share

logger = structlog.get_logger(__name__)


def _select(shares: Sequence[Share], enumerator: CombinationEnumerator) -> Iterator[Tuple[Share, ...]]:
    for combination in enumerator:
        yield tuple(shares[index] for index in combination)


class ConsistencyChecker:
    """Interpolate every combination of ``k`` shares and compare the results.

    Genuine shares of one polynomial agree on every subset, so more than one
    distinct candidate means some share is corrupted, mismatched or forged.
    Candidates are reported in the order their first combination was
    enumerated, whether or not a worker pool is used.
    """

    def __init__(self, config: ReconstructionConfig | None = None) -> None:
        self.config = config or ReconstructionConfig()

    def reconstruct(self, shares: Sequence[Share], k: int) -> Reconstruction:
        if isinstance(k, bool) or not isinstance(k, int) or k < 1:
            raise InvalidThreshold(f"Threshold must be a positive integer, got {k!r}")
        shares = tuple(shares)
        if len(shares) < k:
            raise SharesInsufficient(len(shares), k)

        enumerator = CombinationEnumerator(len(shares), k)
        total = len(enumerator)
        limit = self.config.max_combinations
        if limit is not None and total > limit:
            raise TooManyCombinations(total, limit)

        logger.info("reconstruct.start", shares=len(shares), threshold=k, combinations=total)
        distinct: Dict[ExactRational, None] = {}
        for candidate in self._evaluate(_select(shares, enumerator), total):
            distinct.setdefault(candidate, None)

        candidates = tuple(distinct)
        if len(candidates) == 1:
            logger.info("reconstruct.consistent", combinations=total, integral=candidates[0].is_integer())
            return Consistent(secret=candidates[0], combinations=total)
        logger.warning("reconstruct.inconsistent", combinations=total, candidates=len(candidates))
        return Inconsistent(candidates=candidates, combinations=total)

    def _evaluate(self, subsets: Iterable[Tuple[Share, ...]], total: int) -> Iterator[ExactRational]:
        workers = self.config.workers
        if workers <= 1 or total <= 1:
            for subset in subsets:
                yield interpolate_at_zero(subset)
            return
        logger.debug("reconstruct.pool", workers=workers, chunk_size=self.config.chunk_size)
        with ProcessPoolExecutor(max_workers=workers) as executor:
            yield from executor.map(interpolate_at_zero, subsets, chunksize=self.config.chunk_size)


def reconstruct(
    shares: Sequence[Share],
    k: int,
    *,
    checker: ConsistencyChecker | None = None,
) -> Reconstruction:
    runner = checker or ConsistencyChecker()
    return runner.reconstruct(shares, k)


__all__ = ["ConsistencyChecker", "reconstruct"]
