from abc import ABC, abstractmethod

from src.domain.entities.rss_game import RSSGame
from src.domain.value_objects.platform import MobilePlatform


class FeedExtractor(ABC):
    """피드 원문에서 게임 레코드를 추출하는 Port (피드 형식별 구현)"""

    @abstractmethod
    def parse_feed(self, xml_text: str, platform: MobilePlatform) -> list[RSSGame]:
        """아이템 단위 파싱 실패는 건너뛰고 부분 결과를 반환"""
        pass
