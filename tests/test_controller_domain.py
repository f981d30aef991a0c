import uuid

import pytest
from flask import Flask

from asmm8.controller_domain import DomainController

EXAMPLE = {"name": "example.com", "companyname": "Example Inc", "enabled": True}
UPDATED = {"name": "updated.com", "companyname": "Updated Inc", "enabled": True}


class RecordingDb:
    """Connection standing in for the database; it serves as its own cursor."""

    def __init__(self, results=(), fail_on=()):
        self.results = list(results)
        self.fail_on = tuple(fail_on)
        self.executed = []
        self.current = []
        self.rowcount = 0
        self.commits = 0
        self.rollbacks = 0

    def cursor(self):
        return self

    def execute(self, sql, params=()):
        self.executed.append((sql, tuple(params)))
        if any(marker in sql for marker in self.fail_on):
            raise RuntimeError("database error")
        if sql.startswith("SELECT"):
            self.current = self.results.pop(0) if self.results else []
        self.rowcount = 1

    def fetchall(self):
        return list(self.current)

    def fetchone(self):
        return self.current[0] if self.current else None

    def close(self):
        pass

    def commit(self):
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1


def client_for(db):
    app = Flask(__name__)
    DomainController(db).register(app)
    return app.test_client()


def test_insert_domain_success():
    db = RecordingDb()
    resp = client_for(db).post("/domain", json=EXAMPLE)
    assert resp.status_code == 200
    assert resp.get_json()["status"] == "success"
    sql, params = db.executed[0]
    assert "INSERT INTO cptm8domain" in sql
    assert params == ("example.com", "Example Inc", True)
    assert db.commits == 1


@pytest.mark.parametrize(
    "method, path",
    [("post", "/domain"), ("put", f"/domain/{uuid.uuid4()}")],
)
def test_missing_required_fields(method, path):
    db = RecordingDb()
    resp = getattr(client_for(db), method)(path, json={"name": "example.com"})
    assert resp.status_code == 400
    assert resp.get_json()["status"] == "failed"
    assert db.executed == []


def test_insert_domain_invalid_json_body():
    resp = client_for(RecordingDb()).post(
        "/domain", data="invalid json", content_type="application/json"
    )
    assert resp.status_code == 400


def test_insert_domain_database_error():
    db = RecordingDb(fail_on=("INSERT",))
    resp = client_for(db).post("/domain", json=EXAMPLE)
    assert resp.status_code == 500
    assert db.rollbacks == 1


@pytest.mark.parametrize(
    "rows",
    [
        [(uuid.uuid4(), "example.com", "Example Inc", True), (uuid.uuid4(), "test.com", "Test Corp", False)],
        [],
    ],
)
def test_get_all_domain(rows):
    resp = client_for(RecordingDb(results=[rows])).get("/domain")
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["status"] == "success"
    assert [d["id"] for d in body["data"] or []] == [str(row[0]) for row in rows]
    assert [d["name"] for d in body["data"] or []] == [row[1] for row in rows]


def test_get_all_domain_error_is_bad_request():
    resp = client_for(RecordingDb(fail_on=("SELECT",))).get("/domain")
    assert resp.status_code == 400
    assert resp.get_json()["msg"] == "get all domain failed"


def test_get_one_domain_by_id():
    domain_id = uuid.uuid4()
    db = RecordingDb(results=[[(domain_id, "example.com", "Example Inc", True)]])
    resp = client_for(db).get(f"/domain/{domain_id}")
    assert resp.status_code == 200
    assert resp.get_json()["data"]["name"] == "example.com"
    assert db.executed[0][1] == (str(domain_id),)


@pytest.mark.parametrize(
    "method, body",
    [("get", None), ("put", UPDATED), ("delete", None)],
)
def test_invalid_uuid_is_bad_request(method, body):
    db = RecordingDb()
    resp = getattr(client_for(db), method)("/domain/invalid-uuid", json=body)
    assert resp.status_code == 400
    assert resp.get_json()["status"] == "failed"
    assert db.executed == []


def test_update_domain_success():
    domain_id = uuid.uuid4()
    db = RecordingDb(results=[[(domain_id, "updated.com", "Updated Inc", True)]])
    resp = client_for(db).put(f"/domain/{domain_id}", json=UPDATED)
    assert resp.status_code == 200
    assert resp.get_json()["data"]["name"] == "updated.com"
    assert db.executed[0][1] == ("updated.com", "Updated Inc", True, str(domain_id))


def test_delete_domain_success():
    domain_id = uuid.uuid4()
    db = RecordingDb()
    resp = client_for(db).delete(f"/domain/{domain_id}")
    assert resp.status_code == 200
    assert resp.get_json()["status"] == "success"
    assert db.executed == [("DELETE FROM cptm8domain WHERE id = %s", (str(domain_id),))]


def test_delete_domain_error():
    db = RecordingDb(fail_on=("DELETE",))
    resp = client_for(db).delete(f"/domain/{uuid.uuid4()}")
    assert resp.status_code == 500
    assert resp.get_json()["msg"] == "delete domain failed"