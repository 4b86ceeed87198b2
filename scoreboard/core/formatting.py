from datetime import datetime


def format_score(score: int) -> str:
    return f"{score:,}"


def format_timestamp(timestamp: datetime) -> str:
    return timestamp.strftime('%Y-%m-%d %H:%M')
