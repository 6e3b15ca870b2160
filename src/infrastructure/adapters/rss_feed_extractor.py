"""RSS 피드 원문에서 모바일 무료 게임 레코드를 추출하는 어댑터

피드 설명은 CDATA로 감싼 HTML이라 XML 파서 대신 패턴 매칭으로 필드를 뽑는다.
피드 형식이 바뀌면 RegexFeedExtractor를 상속한 새 구현을 추가한다.
"""

import html
import logging
import re
from abc import abstractmethod
from collections.abc import Iterator
from datetime import datetime, timezone

from src.config.settings import FALLBACK_GAME_IMAGE
from src.domain.entities.rss_game import RSSGame
from src.domain.ports.feed_extractor import FeedExtractor
from src.domain.value_objects.platform import MobilePlatform

logger = logging.getLogger(__name__)

ITEM_PATTERN = re.compile(r"<item[^>]*>([\s\S]*?)</item>", re.IGNORECASE)


class RegexFeedExtractor(FeedExtractor):
    """<item> 블록 단위로 필드를 추출하는 공통 구현"""

    source = "rss"

    def parse_feed(self, xml_text: str, platform: MobilePlatform) -> list[RSSGame]:
        """피드 원문 → RSSGame 목록 (아이템 파싱 실패는 건너뜀)"""
        items = list(self.iter_items(xml_text))
        logger.info(f"Found {len(items)} items in {platform.value} feed")

        deals = []
        for index, item_xml in enumerate(items):
            try:
                deal = self.build_game(item_xml, platform, index)
            except Exception as e:
                logger.warning(f"Failed to parse {platform.value} feed item {index}: {e}")
                continue
            if deal:
                deals.append(deal)

        return deals

    def iter_items(self, xml_text: str) -> Iterator[str]:
        """닫는 태그가 없는 아이템은 매칭되지 않으므로 자연히 버려진다"""
        for match in ITEM_PATTERN.finditer(xml_text or ""):
            yield match.group(1)

    def extract_text(self, item_xml: str, tag: str) -> str:
        """태그 내용 추출 (CDATA 우선, 없으면 일반 텍스트, 둘 다 없으면 빈 문자열)"""
        escaped = re.escape(tag)
        cdata = re.search(
            rf"<{escaped}[^>]*>\s*<!\[CDATA\[([\s\S]*?)\]\]>\s*</{escaped}>",
            item_xml,
            re.IGNORECASE,
        )
        if cdata:
            return cdata.group(1).strip()

        plain = re.search(rf"<{escaped}[^>]*>([\s\S]*?)</{escaped}>", item_xml, re.IGNORECASE)
        if plain:
            return html.unescape(plain.group(1).strip())

        return ""

    @abstractmethod
    def build_game(self, item_xml: str, platform: MobilePlatform, index: int) -> RSSGame | None:
        """아이템 하나를 RSSGame으로 변환 (유효하지 않으면 None)"""
        pass


class AppAggFeedExtractor(RegexFeedExtractor):
    """AppAgg 모바일 세일 피드 형식

    제목: "[100%] Game Name – Platform"
    설명: <b>Price:</b> $4.99 / <b>By:</b> <a>Developer</a> / <img src="..."> / 스토어 링크
    """

    source = "appagg"

    TITLE_PATTERN = re.compile(r"\[(-?\d+%)\]\s*(.+?)\s*[–-]")
    BRACKETS_PATTERN = re.compile(r"\[.*?\]|\(.*?\)")
    PRICE_PATTERN = re.compile(r"<b>Price:</b>\s*\$?([\d.]+)", re.IGNORECASE)
    DEVELOPER_PATTERN = re.compile(r"<b>By:</b>\s*<a[^>]*>([^<]+)</a>", re.IGNORECASE)
    IMAGE_PATTERN = re.compile(r'src="([^"]+)"', re.IGNORECASE)
    STORE_PATTERNS = {
        MobilePlatform.ANDROID: re.compile(
            r'href="(https?://play\.google\.com/store/apps/details\?id=[^"]+)"', re.IGNORECASE
        ),
        MobilePlatform.IOS: re.compile(
            r'href="(https?://(?:apps\.apple\.com|itunes\.apple\.com)[^"]+)"', re.IGNORECASE
        ),
    }

    DEFAULT_DISCOUNT = "100%"
    DEFAULT_PRICE = "$4.99"
    DEFAULT_DEVELOPER = "Unknown"
    DEFAULT_CATEGORY = "Game"

    def build_game(self, item_xml: str, platform: MobilePlatform, index: int) -> RSSGame | None:
        title = self.extract_text(item_xml, "title")
        link = self.extract_text(item_xml, "link")
        description = self.extract_text(item_xml, "description")
        category = self.extract_text(item_xml, "category") or self.DEFAULT_CATEGORY
        pub_date = self.extract_text(item_xml, "pubDate") or datetime.now(timezone.utc).isoformat()

        name, discount = self.parse_title(title)
        original_price = self.extract_price(description)
        url = self.extract_store_url(description, platform) or link

        # 이름과 링크가 모두 있어야 유효한 딜
        if not name or not url:
            logger.debug(f"Skipping {platform.value} item {index}: missing name or url")
            return None

        return RSSGame(
            id=f"{self.source}-{platform.token}-{index}",
            title=name,
            thumbnail=self.extract_thumbnail(description),
            description=f"Originally {original_price} - Now FREE! {discount} discount",
            url=url,
            developer=self.extract_developer(description),
            category=category,
            original_price=original_price,
            discount=discount,
            platform=platform,
            pub_date=pub_date,
        )

    def parse_title(self, title: str) -> tuple[str, str]:
        """제목을 (게임 이름, 할인율)로 분리"""
        match = self.TITLE_PATTERN.search(title)
        if match:
            return match.group(2).strip(), match.group(1)
        return self.BRACKETS_PATTERN.sub("", title).strip(), self.DEFAULT_DISCOUNT

    def extract_price(self, description: str) -> str:
        match = self.PRICE_PATTERN.search(description)
        return f"${match.group(1)}" if match else self.DEFAULT_PRICE

    def extract_developer(self, description: str) -> str:
        match = self.DEVELOPER_PATTERN.search(description)
        return match.group(1).strip() if match else self.DEFAULT_DEVELOPER

    def extract_thumbnail(self, description: str) -> str:
        match = self.IMAGE_PATTERN.search(description)
        thumbnail = match.group(1).strip() if match else ""
        if not thumbnail or thumbnail == "undefined":
            return FALLBACK_GAME_IMAGE
        return thumbnail

    def extract_store_url(self, description: str, platform: MobilePlatform) -> str:
        """설명 안의 Play 스토어 / App Store 링크 (없으면 빈 문자열)"""
        pattern = self.STORE_PATTERNS.get(platform)
        if pattern is None:
            return ""
        match = pattern.search(description)
        return html.unescape(match.group(1)) if match else ""
