"""Per-office ranking computation."""

import polars as pl

RANKING_SCHEMA = {
    "politician_id": pl.Utf8,
    "office_id": pl.Utf8,
    "total_score": pl.Float64,
}


def compute_rankings(scores: list[dict]) -> pl.DataFrame:
    """Rank politicians within each office by score, best first.

    Ranks are dense 1..n per office; equal scores are ordered by politician id.
    """
    df = pl.DataFrame(scores, schema=RANKING_SCHEMA)
    return (
        df.sort(["office_id", "politician_id"])
        .with_columns(
            pl.col("total_score").rank("ordinal", descending=True).over("office_id").cast(pl.Int64).alias("rank")
        )
        .sort(["office_id", "rank"])
    )
