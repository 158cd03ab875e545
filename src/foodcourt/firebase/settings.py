"""App-wide theme and delivery settings."""

import logging

from foodcourt.config import FirebaseConfig
from foodcourt.constants import SETTINGS_PATH
from foodcourt.firebase.client import get_reference
from foodcourt.models import AppSettings

logger = logging.getLogger(__name__)


def fetch_app_settings(config: FirebaseConfig) -> AppSettings:
    """Read settings, falling back to defaults for anything missing or on error."""
    try:
        return AppSettings.from_raw(get_reference(config, SETTINGS_PATH).get())
    except Exception as e:
        logger.error("Failed to fetch settings: %s", e)
        return AppSettings()
