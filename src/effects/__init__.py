"""
Special effects over RGBA pixel buffers.

Every effect takes an ``RgbaImage`` and rewrites it in place, except the
``*_retimg`` variants which return a new image.

- offsets: channel offsets (offset, offset_red/green/blue, multiple_offsets)
- tone: primary, solarize, solarize_retimg, colorize
- adjust: inc_brightness, adjust_contrast, tint
- halftone: 2x2 halftone dithering
- strips: horizontal and vertical strip overlays
- kuwahara: Kuwahara edge-preserving smoothing
"""

from effects.adjust import adjust_contrast, build_contrast_table, inc_brightness, tint
from effects.halftone import halftone
from effects.kuwahara import WindowStatistics, compute_window_statistics, kuwahara
from effects.offsets import multiple_offsets, offset, offset_blue, offset_green, offset_red
from effects.strips import horizontal_strips, strips, vertical_strips
from effects.tone import colorize, primary, solarize, solarize_retimg

__all__ = [
    # Offsets
    "offset",
    "offset_red",
    "offset_green",
    "offset_blue",
    "multiple_offsets",
    # Tone
    "primary",
    "solarize",
    "solarize_retimg",
    "colorize",
    # Adjustments
    "inc_brightness",
    "adjust_contrast",
    "build_contrast_table",
    "tint",
    # Region effects
    "halftone",
    "strips",
    "horizontal_strips",
    "vertical_strips",
    # Kuwahara
    "kuwahara",
    "compute_window_statistics",
    "WindowStatistics",
]
