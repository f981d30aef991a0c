"""Access to the general scan settings stored in the database."""

from __future__ import annotations

import json
import logging
from typing import Any

from asmm8.models import GeneralScanSettings, ScanSettings, parse_uuid

logger = logging.getLogger(__name__)

SELECT_SQL = "SELECT id, settings FROM cptm8generalscansettings"


def _decode_settings(value: Any) -> ScanSettings:
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8")
    if isinstance(value, str):
        value = json.loads(value)
    if not isinstance(value, dict):
        raise ValueError(f"cannot decode scan settings from {value!r}")
    return ScanSettings.from_dict(value)


class GeneralScanSettingsRepository:
    """Reads the general scan settings through a DB-API connection."""

    def __init__(self, db: Any) -> None:
        self.db = db

    def get(self) -> GeneralScanSettings:
        """The first settings row, or default settings when the table is empty."""
        cursor = self.db.cursor()
        try:
            cursor.execute(SELECT_SQL, ())
            row = cursor.fetchone()
            if row is None:
                return GeneralScanSettings()
            raw_id, raw_settings = row
            return GeneralScanSettings(id=parse_uuid(raw_id), settings=_decode_settings(raw_settings))
        except Exception as exc:
            logger.debug("%s", exc)
            raise
        finally:
            cursor.close()