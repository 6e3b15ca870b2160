"""PlatformFilter Value Object 테스트"""

import pytest

from src.domain.value_objects.platform import MobilePlatform, PlatformFilter


class TestParse:
    """토큰 파싱 테스트"""

    def test_case_insensitive(self):
        """대소문자/공백 무시"""
        assert PlatformFilter.parse(" Steam ") is PlatformFilter.STEAM
        assert PlatformFilter.parse("IOS") is PlatformFilter.IOS

    def test_unknown_token(self):
        """알 수 없는 토큰은 예외"""
        with pytest.raises(ValueError, match="unknown platform filter"):
            PlatformFilter.parse("switch")


class TestMatches:
    """부분 문자열 매칭 테스트"""

    def test_combined_label_matches_steam_not_consoles(self):
        """"Steam, PC"는 steam에만 매칭"""
        label = "Steam, PC"

        assert PlatformFilter.STEAM.matches(label)
        assert not PlatformFilter.PLAYSTATION.matches(label)
        assert not PlatformFilter.XBOX.matches(label)
        assert not PlatformFilter.GOG.matches(label)

    def test_windows_counts_as_steam(self):
        """Windows 라벨은 steam 필터에 포함"""
        assert PlatformFilter.STEAM.matches("Windows")

    def test_playstation_aliases(self):
        """PS3/PS4/PS5 표기"""
        for label in ("PS5", "ps4", "PlayStation 3"):
            assert PlatformFilter.PLAYSTATION.matches(label)

    def test_drm_free_matches_gog(self):
        """DRM-Free 라벨도 gog에 매칭 (허용된 오탐)"""
        assert PlatformFilter.GOG.matches("DRM-Free")

    def test_multi_platform_label_matches_several(self):
        """복합 라벨은 여러 필터에 동시에 매칭"""
        label = "Steam, PC, Xbox"

        assert PlatformFilter.STEAM.matches(label)
        assert PlatformFilter.XBOX.matches(label)

    def test_all_matches_everything(self):
        """all은 항상 매칭"""
        assert PlatformFilter.ALL.matches("")
        assert PlatformFilter.ALL.matches("Nintendo Switch")


class TestMobile:
    """모바일 필터 변환 테스트"""

    def test_mobile_platforms(self):
        """android/ios만 모바일"""
        assert PlatformFilter.ANDROID.mobile_platform() is MobilePlatform.ANDROID
        assert PlatformFilter.IOS.mobile_platform() is MobilePlatform.IOS
        assert PlatformFilter.STEAM.mobile_platform() is None
        assert PlatformFilter.ALL.is_mobile() is False

    def test_mobile_token(self):
        """피드 키로 쓰는 소문자 토큰"""
        assert MobilePlatform.IOS.token == "ios"
        assert MobilePlatform.ANDROID.value == "Android"
