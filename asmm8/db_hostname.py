"""Storage of discovered hostnames in the ``cptm8hostname`` table."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime
from typing import Any, Iterable, Optional, Sequence

from asmm8.db_domain import _fetch_all, _transaction
from asmm8.models import Hostname, PostHostname, parse_uuid

logger = logging.getLogger(__name__)

_COLUMNS = "SELECT id, name, foundfirsttime, live, domainid, enabled FROM ONLY cptm8hostname"

SELECT_ALL_SQL = _COLUMNS + " ORDER BY name"
SELECT_BY_DOMAIN_SQL = _COLUMNS + " WHERE domainid = %s"
SELECT_IDS_BY_DOMAIN_SQL = "SELECT id FROM ONLY cptm8hostname WHERE domainid = %s"
SELECT_BY_ID_AND_DOMAIN_SQL = _COLUMNS + " WHERE id = %s AND domainid = %s"
SELECT_BY_NAME_SQL = _COLUMNS + " WHERE name = %s"
INSERT_SQL = (
    "INSERT INTO cptm8hostname(name, foundfirsttime, live, domainid) "
    "VALUES (%s, NOW(), true, %s) ON CONFLICT DO NOTHING"
)
INSERT_BATCH_SQL = (
    "INSERT INTO cptm8hostname(name, foundfirsttime, live, enabled, domainid) "
    "VALUES (%s, NOW(), true, %s, %s) "
    "ON CONFLICT (name) DO UPDATE SET live = EXCLUDED.live "
    "WHERE cptm8hostname.live != EXCLUDED.live"
)
UPDATE_SQL = (
    "UPDATE cptm8hostname SET name = %s, enabled = %s, live = %s "
    "WHERE id = %s AND domainid = %s"
)
UPDATE_LIVE_BY_DOMAIN_SQL = "UPDATE cptm8hostname SET live = %s WHERE domainid = %s"
UPDATE_LIVE_BY_NAME_SQL = "UPDATE cptm8hostname SET live = %s WHERE name = %s"
DELETE_BY_ID_SQL = "DELETE FROM ONLY cptm8hostname WHERE id = %s"
DELETE_BY_DOMAIN_SQL = "DELETE FROM ONLY cptm8hostname WHERE domainid = %s"
DELETE_BY_NAME_SQL = "DELETE FROM ONLY cptm8hostname WHERE name = %s"


def _to_datetime(value: Any) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    if isinstance(value, str):
        text = value[:-1] + "+00:00" if value.endswith(("Z", "z")) else value
        return datetime.fromisoformat(text)
    raise ValueError(f"not a timestamp: {value!r}")


def _hostname_from_row(row: Sequence[Any]) -> Hostname:
    raw_id, name, found, live, raw_domain, enabled = row
    return Hostname(
        id=parse_uuid(raw_id),
        name=name,
        foundfirsttime=_to_datetime(found),
        live=bool(live),
        domainid=parse_uuid(raw_domain),
        enabled=bool(enabled),
    )


class HostnameRepository:
    """Reads and writes hostnames through a DB-API connection."""

    def __init__(self, db: Any) -> None:
        self.db = db

    def insert_hostname(self, domainid: uuid.UUID, post: PostHostname) -> uuid.UUID:
        """Insert a live hostname under ``domainid`` and return its stored id."""
        with _transaction(self.db) as cursor:
            cursor.execute(INSERT_SQL, (post.name, str(domainid)))
        return self.get_one_hostname_by_name(post.name).id

    def insert_batch(self, domainid: uuid.UUID, enabled: bool, names: Iterable[str]) -> bool:
        """Upsert ``names`` as live; True if any row was inserted or changed."""
        changed = False
        with _transaction(self.db) as cursor:
            for name in names:
                cursor.execute(INSERT_BATCH_SQL, (name, enabled, str(domainid)))
                if not changed and (cursor.rowcount or 0) > 0:
                    changed = True
        return changed

    def get_all_hostname(self) -> list[Hostname]:
        return [_hostname_from_row(row) for row in _fetch_all(self.db, SELECT_ALL_SQL)]

    def get_all_hostname_by_domainid(self, domainid: uuid.UUID) -> list[Hostname]:
        rows = _fetch_all(self.db, SELECT_BY_DOMAIN_SQL, (str(domainid),))
        return [_hostname_from_row(row) for row in rows]

    def get_all_hostname_ids_by_domainid(self, domainid: uuid.UUID) -> list[uuid.UUID]:
        rows = _fetch_all(self.db, SELECT_IDS_BY_DOMAIN_SQL, (str(domainid),))
        return [parse_uuid(row[0]) for row in rows]

    def get_one_hostname_by_id_and_domainid(
        self, id: uuid.UUID, domainid: uuid.UUID
    ) -> Hostname:
        """The matching hostname, or an empty Hostname when there is none."""
        hostname = Hostname()
        for row in _fetch_all(self.db, SELECT_BY_ID_AND_DOMAIN_SQL, (str(id), str(domainid))):
            hostname = _hostname_from_row(row)
        return hostname

    def get_one_hostname_by_name(self, name: str) -> Hostname:
        """The hostname called ``name``, or an empty Hostname when there is none."""
        hostname = Hostname()
        for row in _fetch_all(self.db, SELECT_BY_NAME_SQL, (name,)):
            hostname = _hostname_from_row(row)
        return hostname

    def update_hostname(
        self, domainid: uuid.UUID, id: uuid.UUID, post: PostHostname
    ) -> Hostname:
        """Update a hostname and return it as stored afterwards."""
        with _transaction(self.db) as cursor:
            cursor.execute(UPDATE_SQL, (post.name, post.enabled, post.live, str(id), str(domainid)))
        return self.get_one_hostname_by_id_and_domainid(id, domainid)

    def update_live_column_by_parent_id(self, domainid: uuid.UUID, live: bool) -> bool:
        with _transaction(self.db) as cursor:
            cursor.execute(UPDATE_LIVE_BY_DOMAIN_SQL, (live, str(domainid)))
        return True

    def update_live_column_by_name(self, name: str, live: bool) -> bool:
        with _transaction(self.db) as cursor:
            cursor.execute(UPDATE_LIVE_BY_NAME_SQL, (live, name))
        return True

    def delete_hostname_by_id(self, id: uuid.UUID) -> bool:
        with _transaction(self.db) as cursor:
            cursor.execute(DELETE_BY_ID_SQL, (str(id),))
        return True

    def delete_all_by_parent_id(self, domainid: uuid.UUID) -> bool:
        with _transaction(self.db) as cursor:
            cursor.execute(DELETE_BY_DOMAIN_SQL, (str(domainid),))
        return True

    def delete_hostname_by_name(self, name: str) -> bool:
        with _transaction(self.db) as cursor:
            cursor.execute(DELETE_BY_NAME_SQL, (name,))
        return True