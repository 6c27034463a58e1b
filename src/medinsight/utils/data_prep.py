"""Data preparation for export."""

import datetime
import json
from typing import Dict, Any, Sequence

from ..core.models import ReviewAnalysis, DashboardStats


def prepare_export(reviews: Sequence[ReviewAnalysis], stats: DashboardStats) -> Dict[str, Any]:
    """Prepare data for JSON export."""

    summary = {
        "total": stats.total,
        "positive_percent": stats.positive_percent,
        "negative_percent": stats.negative_percent,
        "average_score": round(stats.average_score, 3),
        "sentiment_distribution": [{"name": n, "value": v} for n, v in stats.sentiment_distribution],
        "category_distribution": [{"name": n, "value": v} for n, v in stats.category_distribution],
    }

    return {
        "summary": summary,
        "reviews": [review.to_dict() for review in reviews],
        "metadata": {
            "export_timestamp": None,  # Will be set by export_to_json
            "version": "1.0.0"
        }
    }


def export_to_json(data: Dict[str, Any]) -> str:
    """Serialize export data to a JSON string."""
    data["metadata"]["export_timestamp"] = datetime.datetime.now().isoformat()
    return json.dumps(data, indent=2, ensure_ascii=False)
