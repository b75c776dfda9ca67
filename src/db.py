''' Database connection utilities '''

from __future__ import annotations

import logging
import os
from typing import Any

import psycopg
from psycopg.conninfo import make_conninfo
from psycopg.rows import dict_row
from psycopg_pool import ConnectionPool

logger = logging.getLogger(__name__)

PING_QUERY = "SELECT NOW() AS now"


def connection_params() -> dict[str, Any]:
    ''' Discrete connection settings taken from the PG* environment variables '''
    return {
        "host": os.getenv("PGHOST", "localhost"),
        "port": int(os.getenv("PGPORT", "5432")),
        "dbname": os.getenv("PGDATABASE", "applicants"),
        "user": os.getenv("PGUSER", "postgres"),
        "password": os.getenv("PGPASSWORD", ""),
    }


def conninfo() -> str:
    ''' Return a libpq connection string, preferring DATABASE_URL '''
    url = os.getenv("DATABASE_URL")
    if url:
        return url
    return make_conninfo("", **connection_params())


def get_conn():
    ''' Get a new database connection using environment variables '''
    url = os.getenv("DATABASE_URL")
    if url:
        return psycopg.connect(url, row_factory=dict_row)
    return psycopg.connect(**connection_params(), row_factory=dict_row)


def create_pool() -> ConnectionPool:
    ''' Open the process-wide pool shared by every request '''
    min_size = int(os.getenv("DB_POOL_MIN_SIZE", "1"))
    max_size = int(os.getenv("DB_POOL_MAX_SIZE", "10"))
    return ConnectionPool(
        conninfo(),
        min_size=min_size,
        max_size=max_size,
        kwargs={"row_factory": dict_row},
        name="applicants",
        open=True,
    )


def check_connection(pool) -> bool:
    ''' Run a single probe query and log whether the database answered '''
    try:
        with pool.connection() as conn, conn.cursor() as cur:
            cur.execute(PING_QUERY)
            row = cur.fetchone()
    except psycopg.Error as exc:
        logger.error("Error connecting to PostgreSQL: %s", exc)
        return False
    logger.info("Connected to PostgreSQL at: %s", row["now"])
    return True


if __name__ == "__main__":
    with get_conn() as conn, conn.cursor() as cur:
        cur.execute("SELECT version();")
        print(cur.fetchone()["version"])
    print("DB connection OK")
