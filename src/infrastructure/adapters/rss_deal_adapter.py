import asyncio
import logging
from contextlib import aclosing

from src.application.normalizer import rss_game_to_free_game
from src.config.settings import APPAGG_FEED_URLS
from src.domain.entities.free_game import FreeGame
from src.domain.entities.rss_game import RSSGame
from src.domain.ports.feed_extractor import FeedExtractor
from src.domain.ports.game_fetcher import MobileDealFetcher
from src.domain.ports.relay_fetcher import RelayFetcher
from src.domain.value_objects.platform import MobilePlatform, PlatformFilter
from src.infrastructure.adapters.proxy_fetcher import ProxyChainFetcher
from src.infrastructure.adapters.rss_feed_extractor import AppAggFeedExtractor

logger = logging.getLogger(__name__)


class RssDealAdapter(MobileDealFetcher):
    """CORS 릴레이 + 피드 추출기를 조합한 모바일 딜 조회 (Android / iOS)"""

    def __init__(
        self,
        relay_fetcher: RelayFetcher | None = None,
        extractor: FeedExtractor | None = None,
        feed_urls: dict[str, str] | None = None,
    ):
        self.relay_fetcher = relay_fetcher or ProxyChainFetcher()
        self.extractor = extractor or AppAggFeedExtractor()
        self.feed_urls = feed_urls or APPAGG_FEED_URLS

    async def fetch_mobile_deals(self, platform: PlatformFilter) -> list[FreeGame]:
        """모바일 딜을 FreeGame으로 변환하여 반환 (ALL이면 두 피드를 동시에 조회)"""
        if platform is PlatformFilter.ALL:
            android, ios = await asyncio.gather(
                self.fetch_feed(MobilePlatform.ANDROID),
                self.fetch_feed(MobilePlatform.IOS),
            )
            deals = android + ios
        else:
            mobile = platform.mobile_platform()
            if mobile is None:
                logger.warning(f"Not a mobile platform filter: {platform.value}")
                return []
            deals = await self.fetch_feed(mobile)

        games = []
        for deal in deals:
            try:
                games.append(rss_game_to_free_game(deal))
            except Exception as e:
                logger.warning(f"Failed to convert {deal.platform.value} deal {deal.id}: {e}")
        return games

    async def fetch_feed(self, platform: MobilePlatform) -> list[RSSGame]:
        """릴레이를 순서대로 시도해 딜이 하나라도 나오는 첫 피드를 파싱"""
        feed_url = self.feed_urls.get(platform.token)
        if not feed_url:
            logger.error(f"No feed configured for {platform.value}")
            return []

        try:
            async with aclosing(self.relay_fetcher.iter_payloads(feed_url)) as payloads:
                async for relay_name, xml_text in payloads:
                    deals = self.extractor.parse_feed(xml_text, platform)
                    if deals:
                        logger.info(f"Found {len(deals)} {platform.value} deals via {relay_name}")
                        return deals
                    logger.warning(f"{relay_name} returned XML but no {platform.value} deals")
        except Exception as e:
            logger.error(f"Failed to fetch {platform.value} deals: {e}")
            return []

        logger.error(f"No {platform.value} deals from any relay")
        return []
