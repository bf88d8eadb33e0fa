"""날짜/시간 유틸리티"""

from datetime import date, datetime, timezone
from typing import Optional

UTC = timezone.utc


def now_utc() -> datetime:
    """현재 UTC 시간 반환"""
    return datetime.now(UTC)


def parse_iso(date_str: str) -> Optional[datetime]:
    """ISO 8601 형식 문자열 파싱"""
    try:
        return datetime.fromisoformat(date_str)
    except ValueError:
        return None


def parse_iso_date(date_str: str) -> Optional[datetime]:
    """ISO 날짜(또는 일시) 문자열을 UTC 기준 datetime으로 파싱

    ``YYYY-MM-DD`` 는 해당 날짜의 UTC 자정으로 변환합니다.
    타임존이 없는 일시는 UTC로 간주합니다.

    Args:
        date_str: 파싱할 문자열

    Returns:
        타임존이 있는 datetime, 파싱 실패 시 None
    """
    text = date_str.strip()
    if not text:
        return None

    if "T" not in text and " " not in text:
        try:
            day = date.fromisoformat(text)
        except ValueError:
            return None
        return datetime(day.year, day.month, day.day, tzinfo=UTC)

    parsed = parse_iso(text.replace("Z", "+00:00"))
    if parsed is None:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed
