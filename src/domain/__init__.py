from src.domain.entities import FreeGame, GameDetail, RSSGame
from src.domain.ports import FeedExtractor, GiveawayFetcher, MobileDealFetcher, RelayFetcher
from src.domain.value_objects import MobilePlatform, PlatformFilter, SourceOutcome, TimeFilter, TimeWindow

__all__ = [
    "FreeGame",
    "GameDetail",
    "RSSGame",
    "FeedExtractor",
    "GiveawayFetcher",
    "MobileDealFetcher",
    "RelayFetcher",
    "MobilePlatform",
    "PlatformFilter",
    "SourceOutcome",
    "TimeFilter",
    "TimeWindow",
]
