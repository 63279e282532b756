"""Per-office ranking model."""

RANKING_DDL = """
CREATE TABLE IF NOT EXISTS ranking (
    politician_id VARCHAR NOT NULL,
    office_id VARCHAR NOT NULL,
    rank INTEGER NOT NULL,
    total_score DOUBLE NOT NULL,
    calculated_at TIMESTAMP NOT NULL,
    PRIMARY KEY (politician_id, office_id)
)
"""
