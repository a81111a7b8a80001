"""
Centralized access to restaurant-level configuration using the Singleton pattern.

Business logic reads shop name, currency and report limits from here rather
than poking at django.conf.settings directly.
"""

from typing import Any, Dict, Optional
from django.conf import settings
import logging

logger = logging.getLogger(__name__)


DEFAULTS: Dict[str, Any] = {
    "SHOP_NAME": "Restaurant",
    "CURRENCY": "THB",
    "CURRENCY_SYMBOL": "฿",
    "TOP_SELLING_LIMIT": 10,
    "RECEIPT_WIDTH": 30,
}


class AppSettings:
    """
    A LAZY singleton that exposes the RESTAURANT_FLOOR settings dict as
    lower-case attributes (``app_settings.shop_name``), falling back to DEFAULTS.
    Loading is deferred until the first attribute access.
    """

    _instance: Optional["AppSettings"] = None
    _initialized: bool = False

    def __new__(cls) -> "AppSettings":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        pass

    def _setup(self):
        if not self._initialized:
            self.load_settings()
            self._initialized = True

    def __getattr__(self, name: str) -> Any:
        if not self._initialized:
            self._setup()

        try:
            return self.__dict__[name]
        except KeyError:
            raise AttributeError(f"'AppSettings' object has no attribute '{name}'")

    def load_settings(self) -> None:
        """Populate instance attributes from settings.RESTAURANT_FLOOR."""
        configured = getattr(settings, "RESTAURANT_FLOOR", {}) or {}
        unknown = set(configured) - set(DEFAULTS)
        if unknown:
            logger.warning(f"Ignoring unknown RESTAURANT_FLOOR keys: {sorted(unknown)}")

        for key, default in DEFAULTS.items():
            self.__dict__[key.lower()] = configured.get(key, default)

        if int(self.__dict__["top_selling_limit"]) <= 0:
            raise ValueError("RESTAURANT_FLOOR['TOP_SELLING_LIMIT'] must be positive")

        logger.debug(f"Restaurant settings loaded for '{self.__dict__['shop_name']}'")

    def reload(self) -> None:
        """Re-read settings, e.g. after override_settings in tests."""
        for key in DEFAULTS:
            self.__dict__.pop(key.lower(), None)
        self._initialized = False
        self._setup()


app_settings = AppSettings()
