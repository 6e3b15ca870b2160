from src.domain.entities.free_game import FreeGame, GameDetail, Screenshot
from src.domain.entities.rss_game import RSSGame

__all__ = ["FreeGame", "GameDetail", "Screenshot", "RSSGame"]
