"""
Service: SettingsService

Loads the runtime chatbot settings from the site_settings table.

Rows are stored as `chatbot_<name>` → string. Each value is parsed to the
type of its default (bool / int / float / str); unparsable values and
missing keys keep the default. When the table cannot be read at all the
full default snapshot is returned, so a turn never fails on configuration.
"""

# Python Packages
import logging

# Database
from ...config.database import db

# Models
from ...models.site_setting import SiteSetting

# Config
from ..config import bot_config

# Schemas
from ..schemas import ChatbotSettings


logger = logging.getLogger(__name__)

_TRUE_VALUES  = ("true", "1", "yes", "on")
_FALSE_VALUES = ("false", "0", "no", "off")


class SettingsService:

    def load(self) -> ChatbotSettings:
        """ Return a settings snapshot for one request... """

        try:
            rows = (
                SiteSetting.query
                .filter(SiteSetting.key.startswith(bot_config.SETTINGS_KEY_PREFIX))
                .all()
            )
        except Exception as exc:
            db.session.rollback()
            logger.warning("⚠️  Chatbot settings unavailable, using defaults: %s", exc)
            return ChatbotSettings()

        stored = {row.key[len(bot_config.SETTINGS_KEY_PREFIX):]: row.value for row in rows}

        values = {}
        for name in ChatbotSettings.field_names():
            if name not in stored:
                continue
            default = bot_config.DEFAULT_CHATBOT_SETTINGS[name]
            parsed = self.parse_value(stored[name], default)
            if parsed is not None:
                values[name] = parsed

        return ChatbotSettings(**values)


    @staticmethod
    def parse_value(raw, default):
        """
        Parse a stored string to the type of *default*.
        Returns None when the value cannot be parsed.
        """
        if raw is None:
            return None

        value = str(raw).strip()

        if isinstance(default, bool):
            lowered = value.lower()
            if lowered in _TRUE_VALUES:
                return True
            if lowered in _FALSE_VALUES:
                return False
            return None

        try:
            if isinstance(default, int):
                return int(float(value))
            if isinstance(default, float):
                return float(value)
        except ValueError:
            logger.warning("⚠️  Ignoring unparsable chatbot setting value '%s'", value)
            return None

        return value or None
