"""Runtime access to slot grid configuration defaults."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from django.conf import settings as django_settings

__all__ = [
    "settings",
    "SlotGridSettings",
    "THRESHOLD_SETTINGS",
    "DEFAULT_MOBILE_MAX_PX",
    "DEFAULT_NARROW_MAX_PX",
    "DEFAULT_MID_MAX_PX",
    "DEFAULT_CSS_PREFIX",
]

# Viewport thresholds in pixels (closed upper bounds)
DEFAULT_MOBILE_MAX_PX = 600
DEFAULT_NARROW_MAX_PX = 800
DEFAULT_MID_MAX_PX = 1000

DEFAULT_CSS_PREFIX = "slot"

THRESHOLD_SETTINGS = (
    "SLOTGRID_MOBILE_MAX_PX",
    "SLOTGRID_NARROW_MAX_PX",
    "SLOTGRID_MID_MAX_PX",
)


@dataclass
class SlotGridSettings:
    """Proxy object exposing Django settings with sensible fallbacks."""

    defaults: dict[str, Any]

    def __getattr__(self, attr: str) -> Any:  # pragma: no cover - simple delegation
        if attr in self.defaults:
            return getattr(django_settings, attr, self.defaults[attr])
        return getattr(django_settings, attr)


settings = SlotGridSettings(
    defaults={
        "SLOTGRID_MOBILE_MAX_PX": DEFAULT_MOBILE_MAX_PX,
        "SLOTGRID_NARROW_MAX_PX": DEFAULT_NARROW_MAX_PX,
        "SLOTGRID_MID_MAX_PX": DEFAULT_MID_MAX_PX,
        "SLOTGRID_CSS_PREFIX": DEFAULT_CSS_PREFIX,
    }
)
