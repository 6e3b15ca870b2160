"""소스별 원시 레코드를 FreeGame 공통 스키마로 변환

- GamerPower JSON 기브어웨이 → FreeGame / GameDetail
- RSS 피드에서 추출한 RSSGame → FreeGame
"""

from datetime import datetime, timezone
from typing import Any

from src.config.settings import FALLBACK_GAME_IMAGE
from src.domain.entities.free_game import FreeGame, GameDetail, Screenshot
from src.domain.entities.rss_game import RSSGame
from src.domain.value_objects.time_window import parse_feed_date


def today_iso() -> str:
    return datetime.now(timezone.utc).date().isoformat()


def resolve_thumbnail(*candidates: Any) -> str:
    """첫 번째 유효한 이미지 URL, 없으면 고정 fallback 이미지"""
    for candidate in candidates:
        if isinstance(candidate, str):
            value = candidate.strip()
            if value and value != "undefined":
                return value
    return FALLBACK_GAME_IMAGE


def _text(raw: dict, key: str) -> str:
    value = raw.get(key)
    if value is None:
        return ""
    return str(value).strip()


def giveaway_to_free_game(raw: dict) -> FreeGame:
    """GamerPower 기브어웨이를 FreeGame으로 변환 (필드별 fallback 체인 적용)"""
    worth = _text(raw, "worth")
    description = _text(raw, "description") or "Free giveaway"
    platforms = _text(raw, "platforms")
    publisher = _text(raw, "publisher")
    gamerpower_url = _text(raw, "gamerpower_url")

    return FreeGame(
        id=_text(raw, "id"),
        title=_text(raw, "title"),
        thumbnail=resolve_thumbnail(raw.get("thumbnail"), raw.get("image")),
        short_description=f"Worth {worth} - {description}" if worth else description,
        game_url=_text(raw, "open_giveaway_url") or gamerpower_url,
        genre=_text(raw, "type") or "Giveaway",
        platform=platforms or "PC",
        publisher=publisher or platforms or "Unknown",
        developer=publisher or "Unknown",
        release_date=_text(raw, "published_date") or today_iso(),
        profile_url=gamerpower_url,
    )


def giveaway_to_game_detail(raw: dict) -> GameDetail:
    """상세 API 응답을 GameDetail로 변환"""
    description = _text(raw, "description")
    gamerpower_url = _text(raw, "gamerpower_url")
    image = _text(raw, "image")

    return GameDetail(
        id=_text(raw, "id"),
        title=_text(raw, "title"),
        thumbnail=resolve_thumbnail(raw.get("thumbnail"), raw.get("image")),
        short_description=description or _text(raw, "worth"),
        game_url=_text(raw, "open_giveaway_url") or gamerpower_url,
        genre=_text(raw, "type") or "Game",
        platform=_text(raw, "platforms") or "PC",
        publisher=_text(raw, "publisher") or "Unknown",
        developer=_text(raw, "publisher") or "Unknown",
        release_date=_text(raw, "published_date") or today_iso(),
        profile_url=gamerpower_url,
        description=description or _text(raw, "instructions"),
        screenshots=[Screenshot(id=1, image=image)] if image else [],
    )


def _feed_release_date(pub_date: str) -> str:
    # 파싱 불가한 pubDate는 그대로 두어 기간 필터에서 제외되게 한다
    if not pub_date:
        return today_iso()
    parsed = parse_feed_date(pub_date)
    if parsed is None:
        return pub_date
    return parsed.astimezone(timezone.utc).date().isoformat()


def rss_game_to_free_game(deal: RSSGame) -> FreeGame:
    """RSSGame을 FreeGame으로 변환"""
    return FreeGame(
        id=deal.id,
        title=deal.title,
        thumbnail=resolve_thumbnail(deal.thumbnail),
        short_description=deal.description,
        game_url=deal.url,
        genre=deal.category,
        platform=deal.platform.value,
        publisher=deal.developer,
        developer=deal.developer,
        release_date=_feed_release_date(deal.pub_date),
        profile_url=deal.url,
    )
