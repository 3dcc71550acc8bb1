"""
Ratio Value Types

Immutable records passed between the fuzzing stages.

Author: fuzzratio Project
Date: 2026-10-18
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Union

Number = Union[int, float]


def _normalize(value: Number) -> Number:
    """Collapse integral floats (16.0) to int so equal ratios compare and print alike."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


@dataclass(frozen=True)
class Ratio:
    """
    Aspect ratio in pixel-dimension form.

    Attributes:
        width: Width component
        height: Height component
    """
    width: Number
    height: Number

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", _normalize(self.width))
        object.__setattr__(self, "height", _normalize(self.height))

    @property
    def key(self) -> str:
        """Composite "width:height" key."""
        return f"{self.width}:{self.height}"

    def to_dict(self) -> Dict[str, Number]:
        return {"width": self.width, "height": self.height}


@dataclass
class ErrorMetric:
    """
    Per-dimension error of one divisor candidate.

    ``ratio`` is mutable on purpose: the width/height pair is re-reduced
    jointly after both metrics are computed.

    Attributes:
        range: Absolute deviation in original pixel units
        percent: Deviation as percent of the original value (2 decimals)
        ratio: Integer ratio component for this dimension
        mod: Floored value rescaled by the divisor
    """
    range: float
    percent: float
    ratio: float
    mod: float


@dataclass
class PairError:
    """Width and height error metrics of one candidate."""
    width: ErrorMetric
    height: ErrorMetric


@dataclass(frozen=True)
class Candidate:
    """
    One divisor trial.

    ``width``/``height`` are the true dimensions divided by ``divisor``.
    Exact reductions carry no error.
    """
    width: float
    height: float
    divisor: int
    error: Optional[PairError] = None

    @property
    def effective_width(self) -> float:
        return self.error.width.ratio if self.error is not None else self.width

    @property
    def effective_height(self) -> float:
        return self.error.height.ratio if self.error is not None else self.height

    @property
    def cost(self) -> float:
        """Ranking cost: smaller ratio terms are preferred."""
        return self.effective_width + self.effective_height


@dataclass(frozen=True)
class RatioError:
    """Public per-dimension error of a fuzzed ratio."""
    diff: float
    percent: float
    mod: float

    def to_dict(self) -> Dict[str, float]:
        return {"diff": self.diff, "percent": self.percent, "mod": self.mod}


@dataclass(frozen=True)
class FuzzRatio(Ratio):
    """
    Fuzzed ratio candidate.

    Attributes:
        original: Candidate dimensions before error rounding (true size / divisor)
        error_width: Width error
        error_height: Height error
        divisor: Divisor the candidate came from
    """
    original: Optional[Ratio] = None
    error_width: Optional[RatioError] = None
    error_height: Optional[RatioError] = None
    divisor: int = 1

    @property
    def combined_percent(self) -> float:
        """Sum of width and height percent error."""
        return self.error_width.percent + self.error_height.percent

    def to_dict(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "original": self.original.to_dict(),
            "error": {
                "width": self.error_width.to_dict(),
                "height": self.error_height.to_dict(),
            },
        }


@dataclass(frozen=True)
class FuzzResult:
    """
    Outcome of one fuzzing run.

    Attributes:
        ratio: Exact GCD-reduced ratio of the true dimensions
        fuzzed: Best error-bearing candidate, None if the winner was exact
        alts: Deduplicated remaining candidates, None if nothing qualified
    """
    ratio: Ratio
    fuzzed: Optional[FuzzRatio] = None
    alts: Optional[Tuple[FuzzRatio, ...]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Plain nested dict; absent entries are omitted."""
        result: Dict[str, Any] = {"ratio": self.ratio.to_dict()}
        if self.fuzzed is not None:
            result["fuzzed"] = self.fuzzed.to_dict()
        if self.alts is not None:
            result["alts"] = [alt.to_dict() for alt in self.alts]
        return result


__all__ = [
    "Number",
    "Ratio",
    "ErrorMetric",
    "PairError",
    "Candidate",
    "RatioError",
    "FuzzRatio",
    "FuzzResult",
]
