"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from db.connection import Database
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Organizations that publish job postings
CREATE TABLE IF NOT EXISTS organizations (
    handle          VARCHAR(25) PRIMARY KEY CHECK (handle = lower(handle)),
    name            TEXT NOT NULL CONSTRAINT organizations_name_key UNIQUE,
    num_employees   INTEGER CHECK (num_employees >= 0),
    description     TEXT NOT NULL DEFAULT '',
    logo_url        TEXT
);

-- Job postings; equity is a fraction in [0, 1)
CREATE TABLE IF NOT EXISTS postings (
    id              SERIAL PRIMARY KEY,
    title           TEXT NOT NULL,
    salary          INTEGER CHECK (salary >= 0),
    equity          NUMERIC CHECK (equity >= 0 AND equity < 1.0),
    company_handle  VARCHAR(25) NOT NULL
                    REFERENCES organizations(handle) ON DELETE CASCADE
);

-- Accounts; password holds a bcrypt hash, never plain text
CREATE TABLE IF NOT EXISTS accounts (
    username        VARCHAR(25) PRIMARY KEY,
    password        TEXT NOT NULL,
    first_name      TEXT NOT NULL,
    last_name       TEXT NOT NULL,
    email           TEXT NOT NULL CHECK (position('@' IN email) > 1),
    is_admin        BOOLEAN NOT NULL DEFAULT FALSE
);

-- Which account applied to which posting
CREATE TABLE IF NOT EXISTS applications (
    username        VARCHAR(25)
                    REFERENCES accounts(username) ON DELETE CASCADE,
    posting_id      INTEGER
                    REFERENCES postings(id) ON DELETE CASCADE,
    PRIMARY KEY (username, posting_id)
);

CREATE INDEX IF NOT EXISTS idx_postings_company ON postings(company_handle);
"""


def create_tables(db: Database) -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    conn = db.get_connection()
    try:
        with conn.cursor() as cur:
            cur.execute(SCHEMA_SQL)
        conn.commit()
        logger.info("Database schema initialized successfully.")
    except Exception as e:
        conn.rollback()
        logger.error(f"Failed to initialize schema: {e}")
        raise
    finally:
        db.release_connection(conn)


if __name__ == "__main__":
    database = Database()
    database.open()
    try:
        create_tables(database)
    finally:
        database.close()
    print("Database schema created successfully.")
