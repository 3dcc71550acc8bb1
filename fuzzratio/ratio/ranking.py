"""
Candidate Filtering and Ranking
"""

from typing import List, Optional, Sequence

from .types import Candidate, Ratio


def is_allowed(candidate: Candidate, allowed_ratios: Sequence[Ratio]) -> bool:
    """
    True if the candidate's effective pair is in the allow-list.

    Divisor 1 (no reduction at all) always passes so that at least
    one candidate survives when it exists.
    """
    if candidate.divisor == 1:
        return True

    width = candidate.effective_width
    height = candidate.effective_height
    return any(allowed.width == width and allowed.height == height for allowed in allowed_ratios)


def filter_allowed(
    candidates: Sequence[Candidate],
    allowed_ratios: Optional[Sequence[Ratio]] = None,
) -> List[Candidate]:
    """Apply the allow-list; no allow-list keeps everything."""
    if allowed_ratios is None:
        return list(candidates)
    return [candidate for candidate in candidates if is_allowed(candidate, allowed_ratios)]


def rank_candidates(candidates: Sequence[Candidate]) -> List[Candidate]:
    """
    Sort ascending by cost (effective width + height).

    Smaller ratio terms win. Equal costs keep enumeration order.
    """
    return sorted(candidates, key=lambda candidate: candidate.cost)


__all__ = ["is_allowed", "filter_allowed", "rank_candidates"]
