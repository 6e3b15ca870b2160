from src.domain.ports.feed_extractor import FeedExtractor
from src.domain.ports.game_fetcher import GiveawayFetcher, MobileDealFetcher
from src.domain.ports.relay_fetcher import RelayFetcher

__all__ = ["FeedExtractor", "GiveawayFetcher", "MobileDealFetcher", "RelayFetcher"]
