# slicekit/config.py
import logging
from dataclasses import dataclass, fields, replace
from typing import Any

from slicekit.types import ElementType

logger = logging.getLogger("slicekit")


@dataclass(slots=True)
class SliceSettings:
    """
    Package-wide knobs. Replace through configure(), never mutate in place.
    """

    # Reallocating appends reserve growth_factor * new length.
    growth_factor: int = 2
    default_element_type: ElementType = int
    debug_logging: bool = False


_settings = SliceSettings()


def get_settings() -> SliceSettings:
    return _settings


def configure(**overrides: Any) -> SliceSettings:
    """
    Replace the active settings with a copy carrying `overrides`.

    Raises TypeError for unknown keys and ValueError for a growth factor
    below 1.
    """
    global _settings

    known = {f.name for f in fields(SliceSettings)}
    unknown = set(overrides) - known
    if unknown:
        raise TypeError(f"Unknown setting(s): {', '.join(sorted(unknown))}")

    new = replace(_settings, **overrides)
    if new.growth_factor < 1:
        raise ValueError(f"growth_factor must be >= 1, not {new.growth_factor}")

    _settings = new
    logger.setLevel(logging.DEBUG if new.debug_logging else logging.NOTSET)
    logger.debug("[configure] %r", new)
    return new
