"""
Configuration Parsers

Turns YAML/dict values into ratio objects and FuzzConfig.

Author: fuzzratio Project
Date: 2026-10-18
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Iterable, Optional, Tuple

from ..ratio.types import Ratio

if TYPE_CHECKING:
    from .fuzz_config import FuzzConfig

# "16:9", "16x9", "16 / 9"
_RATIO_PATTERN = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*[:xX/]\s*(\d+(?:\.\d+)?)\s*$")


def parse_ratio(value: Any) -> Ratio:
    """Parse a ratio from a Ratio, "W:H" string, {width, height} mapping or pair.

    Raises:
        ValueError: If the value cannot be interpreted as a ratio.
    """
    if isinstance(value, Ratio):
        return value

    if isinstance(value, str):
        match = _RATIO_PATTERN.match(value)
        if match is None:
            raise ValueError(f"Invalid ratio string: {value!r} (expected e.g. '16:9')")
        return Ratio(width=float(match.group(1)), height=float(match.group(2)))

    if isinstance(value, dict):
        if "width" not in value or "height" not in value:
            raise ValueError(f"Ratio mapping needs 'width' and 'height' keys, got {value!r}")
        return Ratio(width=value["width"], height=value["height"])

    if isinstance(value, (list, tuple)) and len(value) == 2:
        return Ratio(width=value[0], height=value[1])

    raise ValueError(f"Cannot parse ratio from {value!r}{_yaml_hint(value)}")


def _yaml_hint(value: Any) -> str:
    # YAML 1.1 reads unquoted 16:9 as the base-60 integer 969
    if isinstance(value, int) and not isinstance(value, bool):
        return " (quote ratio strings in YAML: unquoted 16:9 is read as the integer 969)"
    return ""


def parse_allowed_ratios(values: Optional[Iterable[Any]]) -> Optional[Tuple[Ratio, ...]]:
    """Parse an allow-list; None stays None (no restriction).

    A single ratio (string, mapping or Ratio) is accepted as a one-item list.

    Raises:
        ValueError: If values is neither a ratio nor a collection of ratios.
    """
    if values is None:
        return None
    if isinstance(values, (str, dict, Ratio)):
        values = [values]
    if not isinstance(values, (list, tuple, set, frozenset)):
        raise ValueError(
            f"allowed_ratios must be a ratio or a list of ratios, got {values!r}"
            f"{_yaml_hint(values)}"
        )
    return tuple(parse_ratio(value) for value in values)


def parse_fuzz_config(data: dict) -> "FuzzConfig":
    """Parse fuzz configuration from YAML data.

    Reads the ``fuzz`` section when present, otherwise the document itself.
    The YAML key ``type`` maps to ``fuzz_type``.
    """
    from .fuzz_config import FuzzConfig

    fuzz_data = dict(data.get("fuzz", data) or {})

    if "type" in fuzz_data:
        fuzz_data["fuzz_type"] = fuzz_data.pop("type")

    known = {"fuzz_type", "tolerance", "allowed_ratios", "divisor_strategy"}
    unknown = set(fuzz_data) - known
    if unknown:
        raise ValueError(f"Unknown fuzz configuration keys: {sorted(unknown)}")

    return FuzzConfig(**fuzz_data) if fuzz_data else FuzzConfig()


__all__ = ["parse_ratio", "parse_allowed_ratios", "parse_fuzz_config"]
