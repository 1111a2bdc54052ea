"""Accessibility preferences and the CSS classes/variables derived from them."""

import json
from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields, replace
from typing import Any

from loguru import logger

from kcic_site.models.enums import (
    FONT_SCALE_FACTORS,
    LETTER_SPACING_EMS,
    LINE_HEIGHT_FACTORS,
    FontScale,
    LetterSpacing,
    LineHeight,
    TextAlignment,
)

# Boolean preference -> class toggled on the root element
_ROOT_FLAG_CLASSES: dict[str, str] = {
    "high_contrast": "accessibility-high-contrast",
    "reduced_motion": "accessibility-reduced-motion",
    "focus_indicators": "accessibility-enhanced-focus",
    "readable_font": "accessibility-readable-font",
    "hide_images": "accessibility-hide-images",
    "pause_animations": "accessibility-pause-animations",
}

_ENUM_FIELDS: dict[str, type] = {
    "font_size": FontScale,
    "line_height": LineHeight,
    "letter_spacing": LetterSpacing,
    "text_alignment": TextAlignment,
}


def _snake(key: str) -> str:
    """``highContrast`` -> ``high_contrast``; snake_case passes through."""
    return "".join(f"_{c.lower()}" if c.isupper() else c for c in key)


def _camel(key: str) -> str:
    head, *rest = key.split("_")
    return head + "".join(part.title() for part in rest)


@dataclass(frozen=True)
class AccessibilitySettings:
    font_size: FontScale = FontScale.BASE
    line_height: LineHeight = LineHeight.NORMAL
    letter_spacing: LetterSpacing = LetterSpacing.NORMAL
    text_alignment: TextAlignment = TextAlignment.LEFT
    high_contrast: bool = False
    reduced_motion: bool = False
    focus_indicators: bool = True
    readable_font: bool = False
    hide_images: bool = False
    pause_animations: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "AccessibilitySettings":
        """Overlay ``data`` onto the defaults.

        Accepts camelCase or snake_case keys. Unknown keys are ignored and
        invalid values keep the default.
        """
        known = {f.name for f in fields(cls)}
        updates: dict[str, Any] = {}
        for raw_key, value in data.items():
            key = _snake(str(raw_key))
            if key not in known:
                continue
            if key in _ENUM_FIELDS:
                try:
                    updates[key] = _ENUM_FIELDS[key](value)
                except ValueError:
                    continue
            elif isinstance(value, bool):
                updates[key] = value
        return replace(cls(), **updates)

    @classmethod
    def from_cookie(cls, raw: str | None) -> "AccessibilitySettings":
        if not raw:
            return cls()
        try:
            data = json.loads(raw)
        except ValueError:
            logger.debug("Ignoring malformed accessibility cookie")
            return cls()
        if not isinstance(data, dict):
            return cls()
        return cls.from_mapping(data)

    def to_dict(self) -> dict[str, Any]:
        """camelCase dict, the shape stored in the accessibility cookie."""
        return {_camel(k): (str(v) if k in _ENUM_FIELDS else v) for k, v in asdict(self).items()}

    def to_cookie(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"))

    @property
    def motion_disabled(self) -> bool:
        return self.reduced_motion or self.pause_animations


def root_classes(settings: AccessibilitySettings) -> list[str]:
    """Classes for the document root, in a stable order."""
    return [cls for name, cls in _ROOT_FLAG_CLASSES.items() if getattr(settings, name)]


def css_variables(settings: AccessibilitySettings) -> dict[str, str]:
    return {
        "--accessibility-font-scale": f"{FONT_SCALE_FACTORS[settings.font_size]:g}",
        "--accessibility-line-height": f"{LINE_HEIGHT_FACTORS[settings.line_height]:g}",
        "--accessibility-letter-spacing": f"{LETTER_SPACING_EMS[settings.letter_spacing]:g}em",
        "--accessibility-text-align": str(settings.text_alignment),
    }


def text_classes(settings: AccessibilitySettings, extra: str = "") -> str:
    """Base classes for text elements, plus any ``extra`` classes."""
    parts = [
        "accessibility-enhanced",
        f"accessibility-font-{settings.font_size}",
        f"accessibility-line-height-{settings.line_height}",
        f"accessibility-letter-spacing-{settings.letter_spacing}",
        f"accessibility-text-{settings.text_alignment}",
    ]
    if extra:
        parts.append(extra)
    return " ".join(parts)


def interactive_classes(settings: AccessibilitySettings, extra: str = "") -> str:
    parts = [text_classes(settings), "accessibility-interactive"]
    if settings.focus_indicators:
        parts.append("accessibility-enhanced-focus")
    if extra:
        parts.append(extra)
    return " ".join(parts)


def animation_classes(settings: AccessibilitySettings, normal: str, reduced: str = "") -> str:
    return reduced if settings.motion_disabled else normal


def style_attribute(settings: AccessibilitySettings) -> str:
    """Inline ``style`` value carrying the CSS custom properties."""
    return "; ".join(f"{name}: {value}" for name, value in css_variables(settings).items())
