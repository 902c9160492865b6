from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class StyleComposition(Enum):
    """Order in which ``AggregatedStyle`` layers the current and new style."""

    # The new style renders first; the ambient style wraps its output.
    STYLE_INNERMOST = "style-innermost"
    # The ambient style renders first; the new style wraps its output.
    CURRENT_INNERMOST = "current-innermost"


@dataclass(frozen=True)
class ExpansionConfig:
    style_composition: StyleComposition = StyleComposition.STYLE_INNERMOST
    color_type: str = "Color"
    key_access_level: str = "fileprivate"
    expand_generated: bool = True  # expand #color inside generated code
