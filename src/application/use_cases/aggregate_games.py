import asyncio
import logging
from collections.abc import Awaitable
from datetime import datetime, timezone

from src.domain.entities.free_game import FreeGame, GameDetail
from src.domain.ports.game_fetcher import GiveawayFetcher, MobileDealFetcher
from src.domain.value_objects.fetch_outcome import SourceOutcome
from src.domain.value_objects.platform import PlatformFilter
from src.domain.value_objects.time_window import TimeFilter, TimeWindow, parse_release_date

logger = logging.getLogger(__name__)

GIVEAWAY_SOURCE = "giveaways"
MOBILE_SOURCE = "mobile"

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def sort_by_release_date(games: list[FreeGame]) -> list[FreeGame]:
    """release_date 내림차순 정렬 (안정 정렬, 파싱 불가 날짜는 맨 뒤)"""
    return sorted(games, key=lambda game: parse_release_date(game.release_date) or _OLDEST, reverse=True)


def filter_by_platform(games: list[FreeGame], platform: PlatformFilter) -> list[FreeGame]:
    return [game for game in games if platform.matches(game.platform)]


class AggregateGamesUseCase:
    """PC/콘솔 기브어웨이와 모바일 딜을 합쳐 플랫폼/기간별로 제공하는 Use Case

    어떤 단계가 실패해도 호출자에게 예외를 던지지 않고 (빈) 리스트를 반환한다.
    """

    def __init__(self, giveaway_fetcher: GiveawayFetcher, mobile_fetcher: MobileDealFetcher):
        self.giveaway_fetcher = giveaway_fetcher
        self.mobile_fetcher = mobile_fetcher

    async def collect_by_platform(self, platform: PlatformFilter | str) -> list[SourceOutcome]:
        """소스별 조회 결과를 실패 정보와 함께 반환"""
        platform = PlatformFilter.parse(platform) if isinstance(platform, str) else platform

        if platform.is_mobile():
            return [await self._run(MOBILE_SOURCE, self.mobile_fetcher.fetch_mobile_deals(platform))]

        if platform is PlatformFilter.ALL:
            giveaways, mobile = await asyncio.gather(
                self._run(GIVEAWAY_SOURCE, self.giveaway_fetcher.fetch_all_giveaways()),
                self._run(MOBILE_SOURCE, self.mobile_fetcher.fetch_mobile_deals(PlatformFilter.ALL)),
            )
            return [giveaways, mobile]

        outcome = await self._run(GIVEAWAY_SOURCE, self.giveaway_fetcher.fetch_all_giveaways())
        filtered = filter_by_platform(outcome.games, platform)
        logger.info(f"Found {len(filtered)} games for {platform.value}")
        return [SourceOutcome(source=outcome.source, games=filtered, error=outcome.error)]

    async def games_by_platform(self, platform: PlatformFilter | str) -> list[FreeGame]:
        """플랫폼 필터에 맞는 게임 목록 (ALL은 소스 간 중복 제거 없이 이어 붙임)"""
        try:
            outcomes = await self.collect_by_platform(platform)
        except ValueError as e:
            logger.error(f"Invalid platform filter: {e}")
            return []

        games: list[FreeGame] = []
        for outcome in outcomes:
            if not outcome.ok:
                logger.warning(f"Source {outcome.source} degraded to empty: {outcome.error}")
            games.extend(outcome.games)
        return games

    async def games_by_time(
        self,
        time_filter: TimeFilter | str,
        platform: PlatformFilter | str = PlatformFilter.ALL,
        now: datetime | None = None,
    ) -> list[FreeGame]:
        """최근 7일(weekly) / 30일(monthly) 안에 등록된 게임을 최신순으로 반환"""
        try:
            time_filter = TimeFilter.parse(time_filter) if isinstance(time_filter, str) else time_filter
        except ValueError as e:
            logger.error(f"Invalid time filter: {e}")
            return []

        games = sort_by_release_date(await self.games_by_platform(platform))
        window = TimeWindow.trailing(time_filter, now)
        filtered = [game for game in games if window.contains(game.release_date)]
        logger.info(f"{time_filter.value} filter: {len(filtered)} games from last {time_filter.days} days")
        return filtered

    async def games_by_genre(self, genre: str) -> list[FreeGame]:
        """장르 문자열을 포함하는 기브어웨이 (대소문자 무시)"""
        outcome = await self._run(GIVEAWAY_SOURCE, self.giveaway_fetcher.fetch_all_giveaways())
        token = genre.strip().lower()
        return [game for game in outcome.games if token in game.genre.lower()]

    async def game_details(self, giveaway_id: str) -> GameDetail | None:
        """기브어웨이 상세 (없으면 None)"""
        try:
            return await self.giveaway_fetcher.fetch_giveaway_details(giveaway_id)
        except Exception as e:
            logger.error(f"Failed to fetch giveaway {giveaway_id}: {e}")
            return None

    async def _run(self, source: str, call: Awaitable[list[FreeGame]]) -> SourceOutcome:
        try:
            games = await call
        except Exception as e:
            logger.error(f"Source {source} failed: {e}")
            return SourceOutcome.failed(source, f"{type(e).__name__}: {e}")
        return SourceOutcome(source=source, games=list(games))
