from abc import ABC, abstractmethod
from collections.abc import AsyncIterator


class RelayFetcher(ABC):
    """CORS 릴레이를 통해 피드 원문을 가져오는 Port"""

    @abstractmethod
    async def fetch(self, feed_url: str) -> str | None:
        """XML 본문 또는 None (모든 릴레이 실패)"""
        pass

    @abstractmethod
    def iter_payloads(self, feed_url: str) -> AsyncIterator[tuple[str, str]]:
        """성공한 릴레이의 (이름, 본문)을 순서대로 생성"""
        pass
