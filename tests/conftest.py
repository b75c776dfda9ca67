"""Fixtures for pytest to set up the testing environment."""

from __future__ import annotations

import importlib
import sys
from pathlib import Path
from typing import Any

import pytest
from flask import Flask

from tests.fakes import ApplicantTable, FailingPool, FakePool
from tests.sample_data import FIXED_APPLICANT

ROOT_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT_DIR / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


def _load_module(name: str) -> Any:
    """Import a first-party module after ensuring ``src`` is on the path."""

    return importlib.import_module(name)


@pytest.fixture(name="table")
def table_fixture() -> ApplicantTable:
    """In-memory applicant table seeded with the fixed record as id 1."""

    table = ApplicantTable()
    table.seed(FIXED_APPLICANT)
    return table


@pytest.fixture(name="pool")
def pool_fixture(table: ApplicantTable) -> FakePool:
    """Fake connection pool backed by ``table``."""

    return FakePool(table)


@pytest.fixture(name="test_app")
def fixture_test_app(pool: FakePool) -> Flask:
    """Flask application configured for testing with a fake pool."""

    flask_app_module = _load_module("app")
    return flask_app_module.create_app(pool, test_config={"TESTING": True})


@pytest.fixture(name="client")
def client_fixture(test_app: Flask):
    """Provide a test client for issuing requests."""

    return test_app.test_client()


@pytest.fixture(name="failing_client")
def failing_client_fixture():
    """Test client whose every database statement raises."""

    flask_app_module = _load_module("app")
    app = flask_app_module.create_app(FailingPool(), test_config={"TESTING": True})
    return app.test_client()
