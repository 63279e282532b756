"""Politician model."""

POLITICIAN_DDL = """
CREATE TABLE IF NOT EXISTS politician (
    id VARCHAR PRIMARY KEY,
    first_name VARCHAR NOT NULL,
    last_name VARCHAR NOT NULL,
    middle_name VARCHAR,
    party VARCHAR,
    region_code VARCHAR,
    biography VARCHAR,
    date_of_birth DATE,
    performance_score DOUBLE DEFAULT 50,
    integrity_status VARCHAR,
    is_active BOOLEAN DEFAULT TRUE
)
"""
