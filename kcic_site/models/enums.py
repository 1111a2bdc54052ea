"""Accessibility preference scales."""

from enum import StrEnum


class FontScale(StrEnum):
    XS = "xs"
    SM = "sm"
    BASE = "base"
    LG = "lg"
    XL = "xl"
    XXL = "2xl"


class LineHeight(StrEnum):
    TIGHT = "tight"
    NORMAL = "normal"
    RELAXED = "relaxed"
    LOOSE = "loose"


class LetterSpacing(StrEnum):
    TIGHT = "tight"
    NORMAL = "normal"
    WIDE = "wide"
    WIDER = "wider"


class TextAlignment(StrEnum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    JUSTIFY = "justify"


# Multipliers applied through CSS custom properties
FONT_SCALE_FACTORS: dict[FontScale, float] = {
    FontScale.XS: 0.8,
    FontScale.SM: 0.9,
    FontScale.BASE: 1.0,
    FontScale.LG: 1.1,
    FontScale.XL: 1.25,
    FontScale.XXL: 1.5,
}

LINE_HEIGHT_FACTORS: dict[LineHeight, float] = {
    LineHeight.TIGHT: 1.2,
    LineHeight.NORMAL: 1.4,
    LineHeight.RELAXED: 1.6,
    LineHeight.LOOSE: 1.8,
}

LETTER_SPACING_EMS: dict[LetterSpacing, float] = {
    LetterSpacing.TIGHT: -0.025,
    LetterSpacing.NORMAL: 0.0,
    LetterSpacing.WIDE: 0.025,
    LetterSpacing.WIDER: 0.05,
}
