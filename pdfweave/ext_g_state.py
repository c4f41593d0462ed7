"""Extended graphics state: transparency, blend modes and rendering options."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .objects.containers import PdfDictionaryObject
from .objects.scalars import PdfNameObject


class BlendMode(Enum):
    """Blend modes for compositing transparent content."""

    NORMAL = "Normal"
    MULTIPLY = "Multiply"
    SCREEN = "Screen"
    OVERLAY = "Overlay"
    DARKEN = "Darken"
    LIGHTEN = "Lighten"
    COLOR_DODGE = "ColorDodge"
    COLOR_BURN = "ColorBurn"
    HARD_LIGHT = "HardLight"
    SOFT_LIGHT = "SoftLight"
    DIFFERENCE = "Difference"
    EXCLUSION = "Exclusion"
    HUE = "Hue"
    SATURATION = "Saturation"
    COLOR = "Color"
    LUMINOSITY = "Luminosity"

    def as_str(self) -> str:
        return self.value


class RenderingIntent(Enum):
    """Colour rendering intents."""

    ABSOLUTE_COLORIMETRIC = "AbsoluteColorimetric"
    RELATIVE_COLORIMETRIC = "RelativeColorimetric"
    SATURATION = "Saturation"
    PERCEPTUAL = "Perceptual"

    def as_str(self) -> str:
        return self.value


def _clamp_unit(value: float) -> float:
    return max(0.0, min(1.0, float(value)))


@dataclass
class ExtGState:
    """Graphics state parameters; unset entries are left out of the dictionary."""

    line_width: float | None = None
    line_cap: int | None = None
    line_join: int | None = None
    miter_limit: float | None = None
    stroke_alpha: float | None = None
    fill_alpha: float | None = None
    blend_mode: BlendMode | None = None
    rendering_intent: RenderingIntent | None = None
    overprint_stroke: bool | None = None
    overprint_fill: bool | None = None
    overprint_mode: int | None = None
    flatness: float | None = None
    smoothness: float | None = None
    stroke_adjust: bool | None = None
    alpha_is_shape: bool | None = None
    text_knockout: bool | None = None

    @classmethod
    def with_alpha(cls, stroke_alpha: float, fill_alpha: float) -> ExtGState:
        """A state with the given stroke and fill alpha, taken as they are."""
        return cls(stroke_alpha=stroke_alpha, fill_alpha=fill_alpha)

    @classmethod
    def with_blend_mode(cls, blend_mode: BlendMode) -> ExtGState:
        return cls(blend_mode=blend_mode)

    def set_stroke_alpha(self, alpha: float) -> ExtGState:
        """Set the stroke alpha, clamped to 0.0..1.0."""
        self.stroke_alpha = _clamp_unit(alpha)
        return self

    def set_fill_alpha(self, alpha: float) -> ExtGState:
        """Set the fill alpha, clamped to 0.0..1.0."""
        self.fill_alpha = _clamp_unit(alpha)
        return self

    def set_blend_mode(self, mode: BlendMode) -> ExtGState:
        self.blend_mode = mode
        return self

    def set_line_width(self, width: float) -> ExtGState:
        self.line_width = width
        return self

    def to_dict(self) -> PdfDictionaryObject:
        """The ``/Type /ExtGState`` dictionary holding every set parameter."""
        entries = (
            ("LW", self.line_width, float),
            ("LC", self.line_cap, int),
            ("LJ", self.line_join, int),
            ("ML", self.miter_limit, float),
            ("CA", self.stroke_alpha, float),
            ("ca", self.fill_alpha, float),
            ("BM", self.blend_mode, lambda m: PdfNameObject(m.as_str())),
            ("RI", self.rendering_intent, lambda r: PdfNameObject(r.as_str())),
            ("OP", self.overprint_stroke, bool),
            ("op", self.overprint_fill, bool),
            ("OPM", self.overprint_mode, int),
            ("FL", self.flatness, float),
            ("SM", self.smoothness, float),
            ("SA", self.stroke_adjust, bool),
            ("AIS", self.alpha_is_shape, bool),
            ("TK", self.text_knockout, bool),
        )
        dictionary = PdfDictionaryObject().typed("ExtGState")
        for key, value, convert in entries:
            if value is not None:
                dictionary.add(key, convert(value))
        return dictionary