"""엔티티 테스트"""

import pytest

from src.domain.entities.free_game import GameDetail, Screenshot
from src.domain.entities.rss_game import RSSGame
from src.domain.value_objects.platform import MobilePlatform


def make_rss_game(**overrides) -> RSSGame:
    fields = {
        "id": "appagg-android-0",
        "title": "Mystic Quest",
        "thumbnail": "https://x/t.png",
        "description": "Originally $2.99 - Now FREE! 100% discount",
        "url": "https://play.google.com/store/apps/details?id=a",
        "developer": "Quest Studio",
        "category": "Game",
        "original_price": "$2.99",
        "discount": "100%",
        "platform": MobilePlatform.ANDROID,
        "pub_date": "Sat, 17 Oct 2026 08:30:00 +0000",
    }
    fields.update(overrides)
    return RSSGame(**fields)


class TestRSSGame:
    """RSSGame 엔티티 테스트"""

    def test_current_price_is_free(self):
        """현재 가격은 항상 Free"""
        assert make_rss_game().current_price == "Free"

    def test_non_free_price_rejected(self):
        """Free가 아닌 현재 가격은 예외"""
        with pytest.raises(ValueError, match="current_price must be"):
            make_rss_game(current_price="$1.99")


class TestFreeGame:
    """FreeGame / GameDetail 직렬화 테스트"""

    def test_to_dict_includes_detail_fields(self, game_factory):
        """상세 필드까지 딕셔너리로 변환"""
        base = game_factory("1")
        detail = GameDetail(**base.to_dict(), description="Long text", screenshots=[Screenshot(id=1, image="i")])

        data = detail.to_dict()

        assert data["id"] == "1"
        assert data["profile_url"] == "https://example.com/1"
        assert data["description"] == "Long text"
        assert data["screenshots"] == [{"id": 1, "image": "i"}]

    def test_free_game_keys(self, game_factory):
        """공통 스키마 필드 이름"""
        assert set(game_factory("1").to_dict()) == {
            "id",
            "title",
            "thumbnail",
            "short_description",
            "game_url",
            "genre",
            "platform",
            "publisher",
            "developer",
            "release_date",
            "profile_url",
        }
