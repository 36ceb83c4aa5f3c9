"""Ranked alternatives for the confirmation dialog.

The dialog pre-selects the suggested label and offers a short list of
contextually relevant alternatives; the coach can expand it to the full menu.
"""

from __future__ import annotations

from typing import List, Optional

from playsketch.catalog.labels import PASSING_ROUTE_MENU, RouteLabel, vocabulary_for
from playsketch.classifiers.results import ClassificationResult, RouteClassification
from playsketch.config import FieldConfig, resolve_config
from playsketch.core.enums import Curvature, Direction, DrawTool

DEEP_ROUTE_OPTIONS = (RouteLabel.GO, RouteLabel.POST, RouteLabel.CORNER, RouteLabel.SEAM)
BREAKING_ROUTE_OPTIONS = (RouteLabel.OUT, RouteLabel.IN_DIG, RouteLabel.CURL, RouteLabel.COMEBACK)
QUICK_ROUTE_OPTIONS = (RouteLabel.SLANT, RouteLabel.HITCH, RouteLabel.FLAT, RouteLabel.SWING)


def _label_text(label) -> str:
    return str(getattr(label, "value", label))


def _append_unique(options: List[str], labels) -> None:
    for label in labels:
        text = _label_text(label)
        if text not in options:
            options.append(text)


def get_route_options(
    analysis: RouteClassification,
    config: Optional[FieldConfig] = None,
) -> List[str]:
    """Route options ordered by relevance to the drawn path.

    The suggested route comes first, then one family of alternatives picked
    from the path's shape, and the custom option is always last.
    """
    config = resolve_config(config)
    traits = analysis.characteristics
    options = [_label_text(analysis.label)]

    if traits.direction == Direction.UPFIELD and traits.total_distance > config.deep_option_distance:
        _append_unique(options, DEEP_ROUTE_OPTIONS)
    elif traits.curvature == Curvature.BREAKING:
        _append_unique(options, BREAKING_ROUTE_OPTIONS)
    else:
        _append_unique(options, QUICK_ROUTE_OPTIONS)

    _append_unique(options, [RouteLabel.CUSTOM])
    return options


def get_assignment_options(
    result: ClassificationResult,
    config: Optional[FieldConfig] = None,
) -> List[str]:
    """Ranked options for any tool's result.

    Routes use the shape-aware ranking; the smaller vocabularies list the
    suggestion first and the rest in catalogue order.
    """
    if isinstance(result, RouteClassification):
        return get_route_options(result, config)

    options = [_label_text(result.label)]
    _append_unique(options, vocabulary_for(result.kind))
    return options


def get_tool_options(tool: DrawTool) -> List[str]:
    """Full menu for the dialog's "show all" view."""
    tool = DrawTool(tool)
    if tool == DrawTool.ROUTE:
        return list(PASSING_ROUTE_MENU)
    return vocabulary_for(tool)
