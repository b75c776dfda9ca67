"""Blueprint exposing the applicant table over REST verbs.

Every request borrows one connection from the injected pool, runs a single
statement and renders the rows as JSON. Storage errors are left to propagate
so the app-level handler can answer with a generic 500.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from flask import Blueprint, jsonify, request
from flask.views import MethodView
from psycopg import sql
from werkzeug.exceptions import NotFound

logger = logging.getLogger(__name__)

TABLE_APPLICANT = sql.Identifier("applicant")
FIXED_APPLICANT_ID = 1

REQUIRED_FIELDS: tuple[str, ...] = ("first_name", "last_name", "age", "email")
OPTIONAL_FIELDS: tuple[str, ...] = ("professional_desc", "hobbies")
WRITABLE_FIELDS: tuple[str, ...] = REQUIRED_FIELDS + OPTIONAL_FIELDS

ALLOWED_METHODS = "GET, POST, HEAD, PUT, PATCH, DELETE"

NOT_FOUND_ERROR = "Applicant not found."
EMPTY_BODY_ERROR = "Request body cannot be empty in this request."
MISSING_FIELDS_ERROR = "Missing required fields."
UNKNOWN_FIELDS_ERROR = "Unknown fields."
DELETED_MESSAGE = "Applicant deleted successfully."

SELECT_ALL = sql.SQL("SELECT * FROM {table} ORDER BY id ASC").format(
    table=TABLE_APPLICANT,
)
SELECT_BY_ID = sql.SQL("SELECT * FROM {table} WHERE id = %(id)s").format(
    table=TABLE_APPLICANT,
)
EXISTS_BY_ID = sql.SQL("SELECT 1 FROM {table} WHERE id = %(id)s").format(
    table=TABLE_APPLICANT,
)
DELETE_BY_ID = sql.SQL("DELETE FROM {table} WHERE id = %(id)s RETURNING *").format(
    table=TABLE_APPLICANT,
)
INSERT_APPLICANT = sql.SQL(
    "INSERT INTO {table} ({columns}) VALUES ({values}) RETURNING *"
).format(
    table=TABLE_APPLICANT,
    columns=sql.SQL(", ").join(map(sql.Identifier, WRITABLE_FIELDS)),
    values=sql.SQL(", ").join(map(sql.Placeholder, WRITABLE_FIELDS)),
)


def build_update(fields: Iterable[str]) -> sql.Composed:
    """Return an ``UPDATE ... RETURNING *`` touching exactly ``fields``.

    Field names become quoted identifiers and values are bound by name, so
    callers must pass a mapping with one key per field plus ``id``.
    """

    assignments = sql.SQL(", ").join(
        sql.SQL("{column} = {value}").format(
            column=sql.Identifier(field),
            value=sql.Placeholder(field),
        )
        for field in fields
    )
    return sql.SQL(
        "UPDATE {table} SET {assignments} WHERE id = %(id)s RETURNING *"
    ).format(table=TABLE_APPLICANT, assignments=assignments)


UPDATE_APPLICANT = build_update(WRITABLE_FIELDS)


def missing_fields(body: dict[str, Any]) -> list[str]:
    """Return required fields that are absent or falsy, in declaration order."""

    return [field for field in REQUIRED_FIELDS if not body.get(field)]


def unknown_fields(body: dict[str, Any]) -> list[str]:
    """Return keys that do not name a writable applicant column."""

    return [field for field in body if field not in WRITABLE_FIELDS]


def fetch_rows(pool, query, params: dict[str, Any] | None = None) -> list[dict[str, Any]]:
    """Run one statement on a pooled connection and return every row."""

    with pool.connection() as conn, conn.cursor() as cur:
        cur.execute(query, params)
        return cur.fetchall()


def _json_body() -> dict[str, Any] | None:
    """Return the request JSON when it is an object, otherwise ``None``."""

    body = request.get_json(silent=True)
    if isinstance(body, dict):
        return body
    return None


def _not_found():
    return jsonify(error=NOT_FOUND_ERROR), 404


def _empty_body():
    return jsonify(error=EMPTY_BODY_ERROR), 400


def _unrouted_applicant(exc: NotFound):
    """Answer ids the item route cannot parse with the not-found payload."""

    if request.path.startswith("/applicants/"):
        return _not_found()
    return exc


class PooledView(MethodView):
    """Class-based view that receives the connection pool at construction."""

    def __init__(self, pool) -> None:
        self.pool = pool


class FixedApplicantAPI(PooledView):
    """The showcase record stored under id 1."""

    def get(self):
        rows = fetch_rows(self.pool, SELECT_BY_ID, {"id": FIXED_APPLICANT_ID})
        if not rows:
            # Answered as JSON null with 200; no not-found mapping here.
            logger.warning("Applicant %s is missing", FIXED_APPLICANT_ID)
            return jsonify(None)
        return jsonify(rows[0])


class ApplicantListAPI(PooledView):
    """Collection endpoint: list and create."""

    def get(self):
        return jsonify(fetch_rows(self.pool, SELECT_ALL))

    def post(self):
        body = _json_body()
        if not body:
            return _empty_body()

        missing = missing_fields(body)
        if missing:
            return jsonify(error=MISSING_FIELDS_ERROR, missingFields=missing), 400

        params = {field: body.get(field) for field in WRITABLE_FIELDS}
        rows = fetch_rows(self.pool, INSERT_APPLICANT, params)
        return jsonify(rows[0])


class ApplicantItemAPI(PooledView):
    """Single applicant addressed by id."""

    def get(self, applicant_id: int):
        rows = fetch_rows(self.pool, SELECT_BY_ID, {"id": applicant_id})
        if not rows:
            return _not_found()
        return jsonify(rows[0])

    def put(self, applicant_id: int):
        body = _json_body() or {}
        params = {field: body.get(field) for field in WRITABLE_FIELDS}
        params["id"] = applicant_id
        rows = fetch_rows(self.pool, UPDATE_APPLICANT, params)
        if not rows:
            return _not_found()
        return jsonify(rows[0])

    def patch(self, applicant_id: int):
        body = _json_body()
        if not body:
            return _empty_body()

        unknown = unknown_fields(body)
        if unknown:
            return jsonify(error=UNKNOWN_FIELDS_ERROR, unknownFields=unknown), 400

        params = dict(body)
        params["id"] = applicant_id
        rows = fetch_rows(self.pool, build_update(body), params)
        if not rows:
            return _not_found()
        return jsonify(rows[0])

    def delete(self, applicant_id: int):
        rows = fetch_rows(self.pool, DELETE_BY_ID, {"id": applicant_id})
        if not rows:
            return _not_found()
        return jsonify(message=DELETED_MESSAGE)

    def head(self, applicant_id: int):
        rows = fetch_rows(self.pool, EXISTS_BY_ID, {"id": applicant_id})
        return "", 200 if rows else 404

    def options(self, applicant_id: int):
        del applicant_id
        return "", 200, {"Allow": ALLOWED_METHODS}


def create_blueprint(pool) -> Blueprint:
    """Build the applicant blueprint bound to ``pool``."""

    bp = Blueprint("applicants", __name__)
    bp.add_url_rule(
        "/awesome/applicant",
        view_func=FixedApplicantAPI.as_view("awesome_applicant", pool),
    )
    bp.add_url_rule(
        "/applicants",
        view_func=ApplicantListAPI.as_view("applicant_list", pool),
    )
    bp.add_url_rule(
        "/applicants/<int(signed=True):applicant_id>",
        view_func=ApplicantItemAPI.as_view("applicant_item", pool),
    )
    bp.app_errorhandler(NotFound)(_unrouted_applicant)
    return bp
