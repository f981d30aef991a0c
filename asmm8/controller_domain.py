"""HTTP handlers for managing seed domains."""

from __future__ import annotations

import logging
import uuid
from typing import Any

from flask import Flask, jsonify, request

from asmm8.db_domain import DomainRepository
from asmm8.models import PostDomain, parse_uuid

logger = logging.getLogger(__name__)


def _respond(status: int, **body: Any) -> tuple[Any, int]:
    return jsonify(body), status


def _parse_id(value: str) -> uuid.UUID:
    if not value:
        raise ValueError("missing identifier")
    return parse_uuid(value)


class DomainController:
    """Create, read, update and delete domains over HTTP."""

    def __init__(self, db: Any) -> None:
        self.db = db

    def _repository(self) -> DomainRepository:
        return DomainRepository(self.db)

    def delete_domain(self, id: str) -> tuple[Any, int]:
        try:
            domain_id = _parse_id(id)
        except ValueError as exc:
            logger.debug("%s", exc)
            logger.info("400 HTTP Response - DeleteDomain - Check UUID parameters in URL.")
            return _respond(400, status="failed", msg="Delete domain failed - Check parameters in URL.")
        try:
            self._repository().delete_domain(domain_id)
        except Exception as exc:
            logger.debug("%s", exc)
            logger.info("500 HTTP Response - DeleteDomain")
            return _respond(500, status="failed", msg="delete domain failed")
        logger.info("200 HTTP Response - DeleteDomain")
        return _respond(200, status="success", msg="delete domain successfully")

    def get_all_domain(self) -> tuple[Any, int]:
        try:
            domains = self._repository().get_all_domain()
        except Exception as exc:
            logger.debug("%s", exc)
            logger.info("400 HTTP Response - GetAllDomain")
            return _respond(400, status="failed", msg="get all domain failed")
        logger.info("200 HTTP Response - GetAllDomain")
        return _respond(
            200,
            status="success",
            data=[domain.to_dict() for domain in domains],
            msg="get all domain success",
        )

    def get_one_domain(self, id: str) -> tuple[Any, int]:
        try:
            domain_id = _parse_id(id)
        except ValueError as exc:
            logger.debug("%s", exc)
            logger.info("400 HTTP Response - GetOneDomain - Check UUID parameters in URL.")
            return _respond(400, status="failed", msg="get one domain failed - Check URL parameters")
        try:
            domain = self._repository().get_one_domain(domain_id)
        except Exception as exc:
            logger.debug("%s", exc)
            logger.info("500 HTTP Response - GetOneDomain")
            return _respond(500, status="failed", msg="get one domain failed.")
        logger.info("200 HTTP Response - GetOneDomain")
        return _respond(200, status="success", data=domain.to_dict(), msg="get one domain success")

    def update_domain(self, id: str) -> tuple[Any, int]:
        try:
            post = PostDomain.from_dict(request.get_json(silent=True))
        except ValueError as exc:
            logger.debug("%s", exc)
            logger.info("400 HTTP Response - UpdateDomain")
            return _respond(400, status="failed", msg="UpdateDomain failed - Check Body parameters.")
        try:
            domain_id = _parse_id(id)
        except ValueError as exc:
            logger.debug("%s", exc)
            logger.info("400 HTTP Response - UpdateDomain - Check UUID parameters in URL.")
            return _respond(400, status="failed", msg="UpdateDomain failed - Check URL parameters.")
        try:
            domain = self._repository().update_domain(domain_id, post)
        except Exception as exc:
            logger.debug("%s", exc)
            logger.info("500 HTTP Response - UpdateDomain")
            return _respond(500, status="failed", msg="UpdateDomain failed.")
        logger.info("200 HTTP Response - Update Domain")
        return _respond(200, status="success", data=domain.to_dict(), msg="Update domain success")

    def insert_domain(self) -> tuple[Any, int]:
        try:
            post = PostDomain.from_dict(request.get_json(silent=True))
        except ValueError as exc:
            logger.debug("%s", exc)
            logger.info("400 HTTP Response - InsertDomain")
            return _respond(400, status="failed", msg="InsertDomain failed - Check Body parameters.")
        try:
            inserted = self._repository().insert_domain(post)
        except Exception as exc:
            logger.debug("%s", exc)
            logger.info("500 HTTP Response - InsertDomain")
            return _respond(500, status="failed", msg="InsertDomain failed")
        logger.info("200 HTTP Response - Insert Domain")
        return _respond(200, status="success", data=inserted, msg="Insert domain success")

    def register(self, app: Flask) -> None:
        """Attach the domain routes to ``app``."""
        app.add_url_rule("/domain", "domain_insert", self.insert_domain, methods=["POST"])
        app.add_url_rule("/domain", "domain_get_all", self.get_all_domain, methods=["GET"])
        app.add_url_rule("/domain/<id>", "domain_get_one", self.get_one_domain, methods=["GET"])
        app.add_url_rule("/domain/<id>", "domain_update", self.update_domain, methods=["PUT"])
        app.add_url_rule("/domain/<id>", "domain_delete", self.delete_domain, methods=["DELETE"])