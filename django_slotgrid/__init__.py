"""Responsive slot grid application."""

from .apps import SlotGridConfig
from .conf import settings

__all__ = ["settings", "SlotGridConfig"]
