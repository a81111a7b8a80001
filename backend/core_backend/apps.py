from django.apps import AppConfig
import logging

logger = logging.getLogger(__name__)


class CoreBackendConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "core_backend"

    def ready(self):
        """
        Validate restaurant configuration when Django starts up so a bad
        RESTAURANT_FLOOR value fails at boot instead of mid-settlement.
        """
        from .config import app_settings

        app_settings.reload()
        logger.debug(
            f"Floor backend ready: shop={app_settings.shop_name}, currency={app_settings.currency}"
        )
