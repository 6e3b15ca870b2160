from dataclasses import dataclass

from src.domain.value_objects.platform import MobilePlatform

FREE_PRICE = "Free"


@dataclass(frozen=True)
class RSSGame:
    """RSS 피드 아이템에서 추출한 모바일 무료 게임 (중간 표현)"""

    id: str  # "<source>-<platform>-<index>", 요청마다 달라질 수 있음
    title: str
    thumbnail: str
    description: str
    url: str
    developer: str
    category: str
    original_price: str
    discount: str
    platform: MobilePlatform
    pub_date: str
    current_price: str = FREE_PRICE

    def __post_init__(self):
        if self.current_price != FREE_PRICE:
            raise ValueError(f"current_price must be {FREE_PRICE!r}: {self.current_price}")
