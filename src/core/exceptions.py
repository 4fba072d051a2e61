"""
Custom exceptions for the effects engine.
Provides consistent error reporting across all effects.

Every exception carries a human readable message and a ``details`` dict so
hosts can report failures without parsing strings.
"""

import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class EffectsException(Exception):
    """Base exception for the effects engine."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidParameterException(EffectsException):
    """Exception raised when an effect parameter is outside its valid range."""

    def __init__(self, parameter: str, value: Any, reason: str):
        super().__init__(
            message=f"Invalid value for {parameter}: {value!r} ({reason})",
            details={"parameter": parameter, "value": value, "reason": reason},
        )


class InvalidChannelException(InvalidParameterException):
    """Exception raised when a channel index is not 0, 1 or 2."""

    def __init__(self, channel_index: Any, parameter: str = "channel_index"):
        super().__init__(
            parameter=parameter,
            value=channel_index,
            reason="channel index must be equal to 0, 1, or 2",
        )


class PixelOutOfBoundsException(EffectsException):
    """Exception raised when a pixel coordinate lies outside the buffer."""

    def __init__(self, x: int, y: int, width: int, height: int):
        super().__init__(
            message=f"Pixel ({x}, {y}) is out of bounds for {width}x{height} buffer",
            details={"x": x, "y": y, "width": width, "height": height},
        )


class InvalidImageException(EffectsException):
    """Exception raised when a pixel buffer violates the RGBA layout."""

    def __init__(self, reason: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message=f"Invalid image: {reason}", details=details)
