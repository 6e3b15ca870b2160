from src.infrastructure.adapters.gamerpower_api_adapter import GamerPowerApiAdapter
from src.infrastructure.adapters.proxy_fetcher import ProxyChainFetcher
from src.infrastructure.adapters.rss_deal_adapter import RssDealAdapter
from src.infrastructure.adapters.rss_feed_extractor import AppAggFeedExtractor

__all__ = ["AppAggFeedExtractor", "GamerPowerApiAdapter", "ProxyChainFetcher", "RssDealAdapter"]
