"""Persistence-of-vision display parts: parameters, bitmap font, output scaling, timing and slice effects."""

__version__ = "0.1.0"
__all__ = ["param", "output_scale", "timing", "font", "effects"]