"""Shared sample data used across tests to avoid duplication."""

from __future__ import annotations

from typing import Any

FIXED_APPLICANT: dict[str, Any] = {
    "first_name": "Awesome",
    "last_name": "Applicant",
    "age": 29,
    "email": "awesome@example.com",
    "professional_desc": "Backend engineer",
    "hobbies": "Climbing, Chess",
}

NEW_APPLICANT: dict[str, Any] = {
    "first_name": "Test Name",
    "last_name": "Test Last Name",
    "age": 30,
    "email": "test@example.com",
    "professional_desc": "Experienced software engineer",
    "hobbies": "Reading, Coding",
}

MINIMAL_APPLICANT: dict[str, Any] = {
    "first_name": "A",
    "last_name": "B",
    "age": 30,
    "email": "a@b.com",
}

UPDATED_APPLICANT: dict[str, Any] = {
    "first_name": "UpdatedJohn",
    "last_name": "Doe",
    "age": 31,
    "email": "updated.john.doe@example.com",
    "professional_desc": "Updated software engineer",
    "hobbies": "Updated Reading, Coding",
}


def configure_pg_env(monkeypatch) -> None:
    """Populate environment variables with deterministic Postgres settings."""

    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setenv("PGHOST", "db-host")
    monkeypatch.setenv("PGPORT", "6543")
    monkeypatch.setenv("PGDATABASE", "dbname")
    monkeypatch.setenv("PGUSER", "dbuser")
    monkeypatch.setenv("PGPASSWORD", "secret")


__all__ = [
    "FIXED_APPLICANT",
    "MINIMAL_APPLICANT",
    "NEW_APPLICANT",
    "UPDATED_APPLICANT",
    "configure_pg_env",
]
