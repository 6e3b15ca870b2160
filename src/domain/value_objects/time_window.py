from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from email.utils import parsedate_to_datetime
from enum import Enum


class TimeFilter(str, Enum):
    """기간 필터 (최근 N일)"""

    WEEKLY = "weekly"
    MONTHLY = "monthly"

    @property
    def days(self) -> int:
        return 7 if self is TimeFilter.WEEKLY else 30

    @classmethod
    def parse(cls, token: str) -> "TimeFilter":
        try:
            return cls(token.strip().lower())
        except ValueError:
            raise ValueError(f"unknown time filter: {token!r}") from None


def parse_release_date(value: str) -> datetime | None:
    """ISO 날짜/일시 문자열을 UTC datetime으로 변환 (실패 시 None)

    timezone 정보가 없으면 UTC로 간주한다.
    """
    if not value or not value.strip():
        return None
    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_feed_date(value: str) -> datetime | None:
    """RSS pubDate (RFC 822) 또는 ISO 문자열 파싱"""
    iso = parse_release_date(value)
    if iso is not None:
        return iso
    if not value or not value.strip():
        return None
    try:
        parsed = parsedate_to_datetime(value.strip())
    except (TypeError, ValueError, IndexError):
        return None
    if parsed is None:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


@dataclass(frozen=True)
class TimeWindow:
    """[start, end] 구간을 나타내는 Value Object"""

    start: datetime
    end: datetime

    def __post_init__(self):
        if self.start > self.end:
            raise ValueError(f"start must not be after end: start={self.start}, end={self.end}")

    @classmethod
    def trailing(cls, time_filter: TimeFilter, now: datetime | None = None) -> "TimeWindow":
        """now 기준 최근 N일 구간 생성"""
        end = now or datetime.now(timezone.utc)
        return cls(start=end - timedelta(days=time_filter.days), end=end)

    def contains(self, release_date: str) -> bool:
        """날짜 문자열이 구간 안에 있는지 확인 (파싱 실패 시 False)"""
        parsed = parse_release_date(release_date)
        if parsed is None:
            return False
        return self.start <= parsed <= self.end
