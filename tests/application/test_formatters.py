"""표시용 포맷 함수 테스트"""

from src.application.formatters import format_release_date, platform_icon


class TestPlatformIcon:
    """platform_icon 함수 테스트"""

    def test_icons(self):
        """플랫폼 계열별 아이콘"""
        assert platform_icon("Android") == "🤖"
        assert platform_icon("iOS") == "🍎"
        assert platform_icon("PC, Steam") == "🖥️"
        assert platform_icon("Web Browser") == "🌐"
        assert platform_icon("Playstation 5") == "🎮"
        assert platform_icon("") == "🎮"


class TestFormatReleaseDate:
    """format_release_date 함수 테스트"""

    def test_format_date(self):
        """ISO 날짜를 표시용으로 변환"""
        assert format_release_date("2026-10-19") == "Oct 19, 2026"
        assert format_release_date("2026-01-05 23:59:00") == "Jan 5, 2026"

    def test_invalid_date_returned_as_is(self):
        """파싱 실패 시 원문"""
        assert format_release_date("soon") == "soon"
