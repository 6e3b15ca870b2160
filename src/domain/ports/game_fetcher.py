from abc import ABC, abstractmethod

from src.domain.entities.free_game import FreeGame, GameDetail
from src.domain.value_objects.platform import PlatformFilter


class GiveawayFetcher(ABC):
    """PC/콘솔 기브어웨이 목록을 가져오는 Port"""

    @abstractmethod
    async def fetch_all_giveaways(self) -> list[FreeGame]:
        """전체 게임 기브어웨이 조회 (실패 시 빈 리스트)"""
        pass

    @abstractmethod
    async def fetch_giveaway_details(self, giveaway_id: str) -> GameDetail | None:
        """기브어웨이 상세 조회 (없거나 실패하면 None)"""
        pass


class MobileDealFetcher(ABC):
    """모바일 무료 게임 딜을 가져오는 Port"""

    @abstractmethod
    async def fetch_mobile_deals(self, platform: PlatformFilter) -> list[FreeGame]:
        """ANDROID, IOS 또는 ALL (두 피드 동시 조회)"""
        pass
