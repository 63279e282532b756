"""Operator account model."""

ACCOUNT_DDL = """
CREATE TABLE IF NOT EXISTS account (
    email VARCHAR PRIMARY KEY,
    password_hash VARCHAR NOT NULL,
    first_name VARCHAR,
    last_name VARCHAR,
    role VARCHAR NOT NULL,
    is_active BOOLEAN DEFAULT TRUE,
    created_at TIMESTAMP NOT NULL,
    updated_at TIMESTAMP NOT NULL
)
"""
