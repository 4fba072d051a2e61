"""
Constants and configuration values for the photofx effects engine.
Centralizes all magic numbers used by the effects.
"""


# Pixel Buffer Constants
class ImageConstants:
    """Constants related to the RGBA pixel buffer."""

    CHANNELS = 4  # R, G, B, A
    OPAQUE_ALPHA = 255


# Point Effect Constants
class OffsetConstants:
    """Constants for the channel offset effects."""

    # Fixed margin kept clear on the right and bottom edges. Independent of
    # the offset amount, so offsets above 10 rely on the bounds check alone.
    MARGIN = 10
    MAX_CHANNEL_INDEX = 2


class ToneConstants:
    """Constants for tone quantization and solarize."""

    PRIMARY_THRESHOLD = 128
    SOLARIZE_PIVOT = 200


class ColorizeConstants:
    """Constants for the colorize effect."""

    TARGET_COLOR = (0, 255, 255)  # Cyan
    THRESHOLD = 220
    RED_FACTOR = 0.5
    GREEN_FACTOR = 1.25
    BLUE_FACTOR = 0.5


class ContrastConstants:
    """Constants for the contrast lookup table."""

    MIN_CONTRAST = -255.0
    MAX_CONTRAST = 255.0
    TABLE_SIZE = 256
    FACTOR_NUMERATOR = 259.0
    FACTOR_DENOMINATOR = 255.0
    MIDPOINT = 128.0


class BrightnessConstants:
    """Constants for brightness and tint adjustment."""

    MIN_BRIGHTNESS = 0
    MAX_BRIGHTNESS = 255


# Region Effect Constants
class HalftoneConstants:
    """Constants for halftone dithering."""

    BLOCK_SIZE = 2

    # Luma weights (ITU-R BT.601)
    LUMA_RED = 0.299
    LUMA_GREEN = 0.587
    LUMA_BLUE = 0.114

    # Band lower bounds, checked in order (strictly greater than)
    BAND_THRESHOLDS = (200.0, 159.0, 95.0, 32.0)

    # Dither pattern per band as (top_left, top_right, bottom_left, bottom_right)
    BAND_PATTERNS = (
        (255, 255, 255, 255),  # all white
        (255, 255, 0, 255),  # checker
        (255, 0, 0, 255),  # diagonal
        (0, 0, 255, 0),  # inverse checker
        (0, 0, 0, 0),  # all black
    )


class StripConstants:
    """Constants for strip overlays."""

    MIN_STRIPS = 1
    DEFAULT_COLOR = (255, 255, 255)
    DEFAULT_ALPHA = 255


class KuwaharaConstants:
    """Constants for the Kuwahara filter."""

    MIN_RADIUS = 0


# System Constants
class SystemConstants:
    """Constants for system operations."""

    # Logging
    LOG_LEVEL_DEFAULT = "INFO"
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

    # Environments
    VALID_ENVIRONMENTS = ["development", "staging", "production", "test"]
