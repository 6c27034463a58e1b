"""Rendering helpers for the dashboard page."""

from datetime import datetime
from typing import List, Tuple

import pandas as pd

from ..core.constants import DisplayConstants
from ..core.models import Sentiment, Category


def excerpt(s, n=DisplayConstants.MAX_EXCERPT_LENGTH):
    s = (s or "").strip().replace("\n", " ")
    return s if len(s) <= n else s[:n-1] + "…"


def sentiment_badge(sentiment: Sentiment) -> str:
    style = DisplayConstants.SENTIMENT_STYLES[sentiment]
    return f"{style['icon']} :{style['markdown']}[**{sentiment.value.upper()}**]"


def category_badge(category: Category) -> str:
    return f":{DisplayConstants.CATEGORY_STYLE['markdown']}[{category.value.upper()}]"


def display_date(timestamp: str) -> str:
    """Render an ISO-8601 timestamp as a date; unparseable values pass through."""
    try:
        return datetime.fromisoformat(timestamp).strftime("%Y-%m-%d")
    except (TypeError, ValueError):
        return timestamp


def distribution_frame(distribution: List[Tuple[str, int]]) -> pd.DataFrame:
    """Chart data for a (name, count) distribution."""
    return pd.DataFrame(distribution, columns=["name", "count"])


def sentiment_frame(distribution: List[Tuple[str, int]]) -> pd.DataFrame:
    """Sentiment chart data with one color per sentiment."""
    df = distribution_frame(distribution)
    df["color"] = [DisplayConstants.SENTIMENT_STYLES[Sentiment(name)]["color"] for name in df["name"]]
    return df
