"""Government office model."""

OFFICE_DDL = """
CREATE TABLE IF NOT EXISTS office (
    name VARCHAR PRIMARY KEY,
    id VARCHAR NOT NULL,
    category VARCHAR NOT NULL,
    level VARCHAR NOT NULL,
    description VARCHAR
)
"""
