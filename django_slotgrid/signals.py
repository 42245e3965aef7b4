from django.core.signals import setting_changed
from django.dispatch import receiver

from django_slotgrid.conf import THRESHOLD_SETTINGS
from django_slotgrid.grid.breakpoints import get_default_classifier


@receiver(setting_changed)
def reset_default_classifier(sender, setting, **kwargs):
    """Drop the cached classifier when a threshold setting changes."""
    if setting in THRESHOLD_SETTINGS:
        get_default_classifier.cache_clear()
