"""Tenure (politician holding an office) model."""

TENURE_DDL = """
CREATE TABLE IF NOT EXISTS tenure (
    politician_id VARCHAR NOT NULL,
    office_id VARCHAR NOT NULL,
    start_date DATE,
    is_current BOOLEAN DEFAULT TRUE,
    PRIMARY KEY (politician_id, office_id)
)
"""
