"""
Parameter validation shared by the effects.

Every effect validates its static parameters up front, before touching the
buffer, so an invalid call never leaves a partially rewritten image.
"""

from typing import Optional, Union

from common.constants import OffsetConstants
from config import get_settings
from core.enums import EffectMode
from core.exceptions import InvalidChannelException, InvalidParameterException


def validate_channel_index(channel_index: int, parameter: str = "channel_index") -> int:
    """Ensure a color channel index is 0, 1 or 2."""
    if not 0 <= channel_index <= OffsetConstants.MAX_CHANNEL_INDEX:
        raise InvalidChannelException(channel_index, parameter)
    return int(channel_index)


def validate_non_negative(value: int, parameter: str) -> int:
    """Ensure an integer parameter is >= 0."""
    if value < 0:
        raise InvalidParameterException(parameter, value, "must be non-negative")
    return int(value)


def validate_range(
    value: Union[int, float], parameter: str, minimum: Union[int, float], maximum: Union[int, float]
) -> Union[int, float]:
    """Ensure a parameter lies in [minimum, maximum]."""
    if value < minimum or value > maximum:
        raise InvalidParameterException(parameter, value, f"must be in [{minimum}, {maximum}]")
    return value


def resolve_mode(mode: Optional[Union[EffectMode, str]]) -> EffectMode:
    """
    Resolve the behavior variant of an effect.

    Args:
        mode: Explicit mode, or None to use the configured default

    Returns:
        EffectMode
    """
    if mode is None:
        return get_settings().effects.default_mode
    try:
        return EffectMode(mode)
    except ValueError:
        raise InvalidParameterException(
            "mode", mode, f"must be one of {[m.value for m in EffectMode]}"
        ) from None
