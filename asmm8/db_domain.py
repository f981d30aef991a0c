"""Storage of seed domains in the ``cptm8domain`` table."""

from __future__ import annotations

import contextlib
import logging
import uuid
from typing import Any, Iterator, Sequence

from asmm8.models import Domain, PostDomain, parse_uuid

logger = logging.getLogger(__name__)

SELECT_ALL_SQL = "SELECT id, name, companyname, enabled FROM cptm8domain"
SELECT_ENABLED_SQL = SELECT_ALL_SQL + " WHERE enabled = true"
SELECT_ONE_SQL = SELECT_ALL_SQL + " WHERE id = %s"
INSERT_SQL = (
    "INSERT INTO cptm8domain(name, companyname, enabled) "
    "VALUES (%s,%s,%s) ON CONFLICT DO NOTHING"
)
UPDATE_SQL = "UPDATE cptm8domain SET name = %s, companyname = %s, enabled = %s WHERE id = %s"
DELETE_SQL = "DELETE FROM cptm8domain WHERE id = %s"


@contextlib.contextmanager
def _transaction(db: Any) -> Iterator[Any]:
    """Yield a cursor; commit on success, roll back and re-raise on failure."""
    cursor = db.cursor()
    try:
        try:
            yield cursor
        except Exception as exc:
            logger.debug("%s", exc)
            with contextlib.suppress(Exception):
                db.rollback()
            raise
        try:
            db.commit()
        except Exception as exc:
            logger.debug("%s", exc)
            with contextlib.suppress(Exception):
                db.rollback()
            raise
    finally:
        cursor.close()


def _fetch_all(db: Any, sql: str, params: Sequence[Any] = ()) -> list[Any]:
    cursor = db.cursor()
    try:
        cursor.execute(sql, tuple(params))
        return list(cursor.fetchall())
    except Exception as exc:
        logger.debug("%s", exc)
        raise
    finally:
        cursor.close()


def _domain_from_row(row: Sequence[Any]) -> Domain:
    raw_id, name, companyname, enabled = row
    return Domain(id=parse_uuid(raw_id), name=name, companyname=companyname, enabled=bool(enabled))


class DomainRepository:
    """Reads and writes domains through a DB-API connection."""

    def __init__(self, db: Any) -> None:
        self.db = db

    def insert_domain(self, post: PostDomain) -> bool:
        """Insert a domain, ignoring conflicts; returns True once committed."""
        with _transaction(self.db) as cursor:
            cursor.execute(INSERT_SQL, (post.name, post.companyname, post.enabled))
        return True

    def get_all_domain(self) -> list[Domain]:
        return [_domain_from_row(row) for row in _fetch_all(self.db, SELECT_ALL_SQL)]

    def get_all_enabled(self) -> list[Domain]:
        return [_domain_from_row(row) for row in _fetch_all(self.db, SELECT_ENABLED_SQL)]

    def get_one_domain(self, id: uuid.UUID) -> Domain:
        """The domain with ``id``, or an empty Domain when there is none."""
        domain = Domain()
        for row in _fetch_all(self.db, SELECT_ONE_SQL, (str(id),)):
            domain = _domain_from_row(row)
        return domain

    def exist_enabled(self) -> bool:
        """Whether at least one enabled domain exists; False on any error."""
        cursor = self.db.cursor()
        try:
            cursor.execute(SELECT_ENABLED_SQL, ())
            return cursor.fetchone() is not None
        except Exception as exc:
            logger.debug("%s", exc)
            return False
        finally:
            cursor.close()

    def update_domain(self, id: uuid.UUID, post: PostDomain) -> Domain:
        """Update a domain and return it as stored afterwards."""
        with _transaction(self.db) as cursor:
            cursor.execute(UPDATE_SQL, (post.name, post.companyname, post.enabled, str(id)))
        return self.get_one_domain(id)

    def delete_domain(self, id: uuid.UUID) -> bool:
        with _transaction(self.db) as cursor:
            cursor.execute(DELETE_SQL, (str(id),))
        return True