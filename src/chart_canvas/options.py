"""Chart configuration.

Options are grouped the way they are overridden: a caller supplies a partial
mapping per group and it is merged over the defaults of that group only.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Mapping

from chart_canvas.layout.constants import (
    ARROW_SIZE,
    AXIS_WIDTH,
    GAP,
    LABEL_FONT_SIZE,
    LABEL_MARGIN,
    PADDING,
    SNAPPING,
    TITLE_ALIGN,
    TITLE_FONT_SIZE,
    TITLE_TEXT,
    X_LABEL,
    Y_LABEL,
)
from chart_canvas.render.constants import (
    ARROW_COLOR,
    AXIS_COLOR,
    BORDER_COLOR,
    FONT_FAMILY,
    LABEL_COLOR,
    TITLE_COLOR,
)


class OptionsError(ValueError):
    """Raised for option overrides that do not fit the option groups."""


@dataclass(frozen=True)
class LayoutOptions:
    padding: float = PADDING
    snapping: float = SNAPPING
    gap: float = GAP


@dataclass(frozen=True)
class AxesOptions:
    color: str = AXIS_COLOR
    width: float = AXIS_WIDTH


@dataclass(frozen=True)
class ArrowOptions:
    display: bool = False
    size: float = ARROW_SIZE
    color: str = ARROW_COLOR


@dataclass(frozen=True)
class LabelOptions:
    display: bool = False
    color: str = LABEL_COLOR
    font_family: str = FONT_FAMILY
    font_size: float = LABEL_FONT_SIZE
    margin: float = LABEL_MARGIN
    x_label: str = X_LABEL
    y_label: str = Y_LABEL

    @property
    def font(self) -> str:
        return f"{self.font_size:g}px {self.font_family}"


@dataclass(frozen=True)
class TitleOptions:
    display: bool = False
    text: str = TITLE_TEXT
    align: str = TITLE_ALIGN
    font_size: float = TITLE_FONT_SIZE
    color: str = TITLE_COLOR
    font_family: str = FONT_FAMILY

    @property
    def font(self) -> str:
        return f"{self.font_size:g}px {self.font_family}"


@dataclass(frozen=True)
class DebugOptions:
    show_borders: bool = False
    border_color: str = BORDER_COLOR


# Flat option names accepted by ChartOptions.from_flat: name -> (group, field)
FLAT_OPTIONS: dict[str, tuple[str, str]] = {
    "padding": ("layout", "padding"),
    "snapping": ("layout", "snapping"),
    "gap": ("layout", "gap"),
    "axisColor": ("axes", "color"),
    "axisWidth": ("axes", "width"),
    "arrowSize": ("arrows", "size"),
    "arrowColor": ("arrows", "color"),
    "labelColor": ("labels", "color"),
    "labelFontFamily": ("labels", "font_family"),
    "labelFontSize": ("labels", "font_size"),
    "labelMargin": ("labels", "margin"),
    "xLabel": ("labels", "x_label"),
    "yLabel": ("labels", "y_label"),
    "titleText": ("title", "text"),
    "titleAlign": ("title", "align"),
    "titleFontSize": ("title", "font_size"),
    "showTitle": ("title", "display"),
    "showBorderDebug": ("debug", "show_borders"),
    "showAxisArrows": ("arrows", "display"),
    "showAxisLabels": ("labels", "display"),
}


@dataclass(frozen=True)
class ChartOptions:
    """Complete, immutable chart configuration."""

    layout: LayoutOptions = field(default_factory=LayoutOptions)
    axes: AxesOptions = field(default_factory=AxesOptions)
    arrows: ArrowOptions = field(default_factory=ArrowOptions)
    labels: LabelOptions = field(default_factory=LabelOptions)
    title: TitleOptions = field(default_factory=TitleOptions)
    debug: DebugOptions = field(default_factory=DebugOptions)

    def merge(self, overrides: Mapping[str, Any] | None = None) -> ChartOptions:
        """Return a copy with ``overrides`` shallow-merged group by group.

        ``overrides`` maps a group name to a partial mapping of that group's
        fields, e.g. ``{"title": {"display": True, "align": "center"}}``.
        """
        if not overrides:
            return self

        groups = {f.name for f in fields(self)}
        changes: dict[str, Any] = {}
        for group, values in overrides.items():
            if group not in groups:
                raise OptionsError(
                    f"Unknown option group '{group}' "
                    f"(expected one of: {', '.join(sorted(groups))})"
                )
            if not isinstance(values, Mapping):
                raise OptionsError(
                    f"Option group '{group}' must be a mapping, "
                    f"got {type(values).__name__}"
                )
            current = getattr(self, group)
            known = {f.name for f in fields(current)}
            unknown = sorted(set(values) - known)
            if unknown:
                raise OptionsError(
                    f"Unknown option(s) for group '{group}': {', '.join(unknown)}"
                )
            changes[group] = replace(current, **values)

        return replace(self, **changes)

    @classmethod
    def from_overrides(cls, overrides: Mapping[str, Any] | None = None) -> ChartOptions:
        """Build options from grouped overrides over the defaults."""
        return cls().merge(overrides)

    @classmethod
    def from_flat(cls, **kwargs: Any) -> ChartOptions:
        """Build options from flat names such as ``showTitle`` or ``padding``."""
        return cls().merge(group_flat_options(kwargs))


def group_flat_options(flat: Mapping[str, Any]) -> dict[str, dict[str, Any]]:
    """Translate flat option names into grouped overrides."""
    grouped: dict[str, dict[str, Any]] = {}
    for name, value in flat.items():
        if name not in FLAT_OPTIONS:
            raise OptionsError(f"Unknown option '{name}'")
        group, attr = FLAT_OPTIONS[name]
        grouped.setdefault(group, {})[attr] = value
    return grouped


def load_options(path: Path, base: ChartOptions | None = None) -> ChartOptions:
    """Read grouped overrides from a JSON file and merge them over ``base``."""
    try:
        data = json.loads(path.read_text())
    except (OSError, json.JSONDecodeError) as e:
        raise OptionsError(f"Cannot read options file {path}: {e}") from e

    if not isinstance(data, dict):
        raise OptionsError(
            f"Options file {path} must contain a JSON object, "
            f"got {type(data).__name__}"
        )
    return (base or ChartOptions()).merge(data)
