"""
Result Assembly

Packages the ranked candidates into a FuzzResult.
"""

from typing import Dict, Sequence, Tuple

from .types import Candidate, FuzzRatio, FuzzResult, Ratio, RatioError


def to_fuzz_ratio(candidate: Candidate) -> FuzzRatio:
    """
    Convert an error-bearing candidate into its public form.

    Raises:
        ValueError: If the candidate is an exact reduction without error
    """
    error = candidate.error
    if error is None:
        raise ValueError(f"Candidate with divisor {candidate.divisor} has no error metric")

    return FuzzRatio(
        width=error.width.ratio,
        height=error.height.ratio,
        original=Ratio(width=candidate.width, height=candidate.height),
        error_width=RatioError(
            diff=error.width.range,
            percent=error.width.percent,
            mod=error.width.mod,
        ),
        error_height=RatioError(
            diff=error.height.range,
            percent=error.height.percent,
            mod=error.height.mod,
        ),
        divisor=candidate.divisor,
    )


def collect_alts(ranked: Sequence[Candidate]) -> Tuple[FuzzRatio, ...]:
    """
    Deduplicate non-winning candidates by their fuzzed "width:height" key.

    Exact candidates are skipped. For a repeated key the variant with the
    strictly lower combined percent error is kept; the key keeps its
    first-seen position. The winner's pair is not excluded.
    """
    alts: Dict[str, FuzzRatio] = {}

    for candidate in ranked:
        if candidate.error is None:
            continue

        fuzz_ratio = to_fuzz_ratio(candidate)
        existing = alts.get(fuzz_ratio.key)
        if existing is None or fuzz_ratio.combined_percent < existing.combined_percent:
            alts[fuzz_ratio.key] = fuzz_ratio

    return tuple(alts.values())


def assemble_result(ratio: Ratio, ranked: Sequence[Candidate]) -> FuzzResult:
    """
    Build the result from ranked candidates.

    Args:
        ratio: Exact reduced ratio of the true dimensions
        ranked: Candidates sorted best-first

    Returns:
        FuzzResult; fuzzed and alts are None when nothing qualified
    """
    if not ranked:
        return FuzzResult(ratio=ratio)

    best = ranked[0]
    fuzzed = to_fuzz_ratio(best) if best.error is not None else None

    return FuzzResult(ratio=ratio, fuzzed=fuzzed, alts=collect_alts(ranked[1:]))


__all__ = ["to_fuzz_ratio", "collect_alts", "assemble_result"]
