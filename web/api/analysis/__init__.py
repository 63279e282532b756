"""Analysis API."""

from web.api.analysis.views import compare_politicians, get_methodology, get_score_breakdown

__all__ = [
    "get_score_breakdown",
    "get_methodology",
    "compare_politicians",
]
