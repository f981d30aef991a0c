"""HTTP handlers for managing hostnames under a domain."""

from __future__ import annotations

import logging
import uuid
from typing import Any

from flask import Flask, jsonify, request

from asmm8.db_hostname import HostnameRepository
from asmm8.models import PostHostname, parse_uuid

logger = logging.getLogger(__name__)


def _respond(status: int, **body: Any) -> tuple[Any, int]:
    return jsonify(body), status


def _parse_id(value: str) -> uuid.UUID:
    if not value:
        raise ValueError("missing identifier")
    return parse_uuid(value)


class HostnameController:
    """Create, read, update and delete hostnames over HTTP."""

    def __init__(self, db: Any) -> None:
        self.db = db

    def _repository(self) -> HostnameRepository:
        return HostnameRepository(self.db)

    def delete_hostname(self, id: str, hostnameid: str) -> tuple[Any, int]:
        try:
            _parse_id(id)
            hostname_id = _parse_id(hostnameid)
        except ValueError as exc:
            logger.debug("%s", exc)
            logger.info("400 HTTP Response - DeleteHostname")
            return _respond(400, status="failed", msg="DeleteHostname failed - Check URL parameters.")
        try:
            self._repository().delete_hostname_by_id(hostname_id)
        except Exception as exc:
            logger.debug("%s", exc)
            logger.info("500 HTTP Response - DeleteHostname")
            return _respond(500, status="failed", msg="delete hostname failed")
        logger.info("200 HTTP Response - Delete Hostname sucess")
        return _respond(200, status="success", msg="delete hostname success")

    def get_all_hostname(self, id: str) -> tuple[Any, int]:
        """All stored hostnames; the domain in the path does not filter them."""
        try:
            hostnames = self._repository().get_all_hostname()
        except Exception as exc:
            logger.debug("%s", exc)
            logger.info("500 HTTP Response - GetAllHostname")
            return _respond(500, status="success", msg="GetAllHostname failed")
        logger.info("200 HTTP Response - GetAllHostname")
        return _respond(
            200,
            status="success",
            data=[hostname.to_dict() for hostname in hostnames],
            msg="get all hostname successfully",
        )

    def get_one_hostname(self, id: str, hostnameid: str) -> tuple[Any, int]:
        try:
            domain_id = _parse_id(id)
        except ValueError as exc:
            logger.debug("%s", exc)
            logger.info("400 HTTP Response - GetOneHostname")
            return _respond(
                400, status="failed",
                msg="GetOneHostname failed - Check UUID for domain URL parameters.",
            )
        try:
            hostname_id = _parse_id(hostnameid)
        except ValueError as exc:
            logger.debug("%s", exc)
            logger.info("400 HTTP Response - GetOneHostname")
            return _respond(
                400, status="failed",
                msg="GetOneHostname failed - Check UUID for hostname URL parameters.",
            )
        try:
            hostname = self._repository().get_one_hostname_by_id_and_domainid(hostname_id, domain_id)
        except Exception as exc:
            logger.debug("%s", exc)
            logger.info("500 HTTP Response - GetOneHostname")
            return _respond(500, status="failed", msg="GetOneHostname failed.")
        logger.info("200 HTTP Response - GetOneHostname")
        return _respond(200, status="success", data=hostname.to_dict(), msg="get hostname successfully")

    def update_hostname(self, id: str, hostnameid: str) -> tuple[Any, int]:
        try:
            post = PostHostname.from_dict(request.get_json(silent=True))
        except ValueError as exc:
            logger.debug("%s", exc)
            logger.info("400 HTTP Response - UpdateHostname")
            return _respond(400, status="failed", msg="UpdateHostname failed - Check Body parameters")
        try:
            domain_id = _parse_id(id)
        except ValueError as exc:
            logger.debug("%s", exc)
            logger.info("400 HTTP Response - UpdateHostname")
            return _respond(
                400, status="failed",
                msg="UpdateHostname failed - Check UUID for domain URL parameters.",
            )
        try:
            hostname_id = _parse_id(hostnameid)
        except ValueError as exc:
            logger.debug("%s", exc)
            logger.info("400 HTTP Response - UpdateHostname")
            return _respond(
                400, status="failed",
                msg="UpdateHostname failed - Check UUID for hostname URL parameters.",
            )
        try:
            hostname = self._repository().update_hostname(domain_id, hostname_id, post)
        except Exception as exc:
            logger.debug("%s", exc)
            logger.info("500 HTTP Response - UpdateHostname")
            return _respond(500, status="failed", msg="UpdateHostname failed.")
        logger.info("200 HTTP Response - UpdateHostname")
        return _respond(200, status="success", data=hostname.to_dict(), msg="update hostname success")

    def insert_hostname(self, id: str) -> tuple[Any, int]:
        try:
            post = PostHostname.from_dict(request.get_json(silent=True))
        except ValueError as exc:
            logger.debug("%s", exc)
            logger.info("400 HTTP Response - Insert Hostname")
            return _respond(400, status="failed", msg="Insert Hostname failed - Check Body parameters")
        try:
            domain_id = _parse_id(id)
        except ValueError as exc:
            logger.debug("%s", exc)
            logger.info("400 HTTP Response - Insert Hostname - Check UUID parameters in URL.")
            return _respond(
                400, status="failed",
                msg="Insert hostname failed - Check UUID for domain URL parameters.",
            )
        try:
            hostname_id = self._repository().insert_hostname(domain_id, post)
        except Exception as exc:
            logger.debug("%s", exc)
            logger.info("500 HTTP Response - Insert Hostname")
            return _respond(500, status="failed", msg="Insert hostname failed")
        logger.debug("200 HTTP Response - Insert Hostname")
        return _respond(200, status="success", data=str(hostname_id), msg="insert hostname success")

    def register(self, app: Flask) -> None:
        """Attach the hostname routes to ``app``."""
        base = "/domain/<id>/hostname"
        one = base + "/<hostnameid>"
        app.add_url_rule(base, "hostname_insert", self.insert_hostname, methods=["POST"])
        app.add_url_rule(base, "hostname_get_all", self.get_all_hostname, methods=["GET"])
        app.add_url_rule(one, "hostname_get_one", self.get_one_hostname, methods=["GET"])
        app.add_url_rule(one, "hostname_update", self.update_hostname, methods=["PUT"])
        app.add_url_rule(one, "hostname_delete", self.delete_hostname, methods=["DELETE"])