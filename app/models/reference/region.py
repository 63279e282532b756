"""Region (state / FCT) model."""

REGION_DDL = """
CREATE TABLE IF NOT EXISTS region (
    code VARCHAR PRIMARY KEY,
    name VARCHAR NOT NULL,
    zone VARCHAR NOT NULL
)
"""
