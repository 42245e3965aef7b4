import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class SlotGridConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "django_slotgrid"
    verbose_name = "Slot Grid"

    def ready(self):
        from .grid.breakpoints import get_default_classifier

        # Reset the cached classifier whenever thresholds are overridden.
        from . import signals  # noqa: F401

        # Build the classifier now so misconfigured thresholds fail at startup.
        get_default_classifier.cache_clear()
        classifier = get_default_classifier()
        logger.debug("Slot grid breakpoints configured: %r", classifier)
