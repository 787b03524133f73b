"""
Service layer for site settings.

Settings are grouped in three sections edited on separate tabs of the
admin settings screen:

* ``general``: site name, tagline, contact details, social links,
* ``business``: currency, timezone, business hours, booking rules,
* ``notifications``: which alerts the admin receives.

Each section is one row ``{"id", "section", "values"}`` in the
``settings`` file collection.  Reads merge the stored values over the
built-in defaults, so a fresh installation still returns a complete
configuration.  Updates are shallow merges into the stored values.
"""

import logging
from typing import Any, Dict, Mapping, Optional

from pan_eventz_api.app.core.fallbacks import SETTINGS_DEFAULTS, fallback
from pan_eventz_api.app.core.file_storage import SETTINGS, FileStorage


logger = logging.getLogger(__name__)


SECTIONS = tuple(SETTINGS_DEFAULTS)


class SettingsService:
    """Service for reading and updating settings sections."""

    def __init__(self, storage: FileStorage) -> None:
        self.storage = storage

    def _stored(self, section: str) -> Optional[Dict[str, Any]]:
        for row in self.storage.get_all(SETTINGS):
            if row.get("section") == section:
                return row
        return None

    async def get_section(self, section: str) -> Dict[str, Any]:
        """Return the effective values of ``section``.

        Raises ``ValueError`` for unknown sections.
        """
        if section not in SETTINGS_DEFAULTS:
            raise ValueError(f"Unknown settings section: {section}")
        values = fallback(SETTINGS_DEFAULTS[section])
        row = self._stored(section)
        if row is not None:
            values.update(row.get("values") or {})
        return values

    async def get_all(self) -> Dict[str, Dict[str, Any]]:
        return {section: await self.get_section(section) for section in SECTIONS}

    async def update_section(self, section: str, data: Mapping[str, Any]) -> Dict[str, Any]:
        """Merge ``data`` into ``section`` and return the effective values."""
        if section not in SETTINGS_DEFAULTS:
            raise ValueError(f"Unknown settings section: {section}")
        row = self._stored(section)
        if row is None:
            self.storage.create(SETTINGS, {"section": section, "values": dict(data)})
        else:
            values = {**(row.get("values") or {}), **data}
            self.storage.update(SETTINGS, row["id"], {"values": values})
        logger.info("Settings section %s updated", section)
        return await self.get_section(section)
