"""Seeded data validation."""

import duckdb


def validate_seed(conn: duckdb.DuckDBPyConnection) -> dict:
    """Check integrity of the seeded reference data."""
    issues = []
    stats = {}

    for table in ("region", "office", "account", "politician", "tenure", "ranking"):
        stats[table] = conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]

    if stats["region"] == 0:
        issues.append("No regions found")
    if stats["office"] == 0:
        issues.append("No offices found")

    operators = conn.execute("SELECT COUNT(*) FROM account WHERE role = 'SUPER_ADMIN' AND is_active").fetchone()[0]
    if operators == 0:
        issues.append("No active operator account")

    orphans = conn.execute(
        """
        SELECT COUNT(*) FROM politician p
        LEFT JOIN region r ON r.code = p.region_code
        WHERE p.region_code IS NOT NULL AND r.code IS NULL
        """
    ).fetchone()[0]
    if orphans:
        issues.append(f"{orphans} politicians reference unknown regions")

    gaps = conn.execute(
        """
        SELECT office_id FROM ranking
        GROUP BY office_id
        HAVING MIN(rank) <> 1 OR MAX(rank) <> COUNT(*) OR COUNT(DISTINCT rank) <> COUNT(*)
        ORDER BY office_id
        """
    ).fetchall()
    for (office_id,) in gaps:
        issues.append(f"Ranking for office {office_id} is not a dense 1..n sequence")

    return {
        "valid": len(issues) == 0,
        "stats": stats,
        "issues": issues,
    }
