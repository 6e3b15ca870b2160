from enum import Enum


class MobilePlatform(str, Enum):
    """RSS 피드가 다루는 모바일 플랫폼"""

    ANDROID = "Android"
    IOS = "iOS"

    @property
    def token(self) -> str:
        return self.value.lower()


class PlatformFilter(str, Enum):
    """플랫폼 필터 토큰 (소문자 정규 토큰)"""

    ALL = "all"
    STEAM = "steam"
    PLAYSTATION = "playstation"
    XBOX = "xbox"
    GOG = "gog"
    ANDROID = "android"
    IOS = "ios"

    @classmethod
    def parse(cls, token: str) -> "PlatformFilter":
        """대소문자 구분 없이 토큰을 필터로 변환"""
        try:
            return cls(token.strip().lower())
        except ValueError:
            raise ValueError(f"unknown platform filter: {token!r}") from None

    def is_mobile(self) -> bool:
        return self in (PlatformFilter.ANDROID, PlatformFilter.IOS)

    def mobile_platform(self) -> MobilePlatform | None:
        if self is PlatformFilter.ANDROID:
            return MobilePlatform.ANDROID
        if self is PlatformFilter.IOS:
            return MobilePlatform.IOS
        return None

    def matches(self, platform_label: str) -> bool:
        """소스 플랫폼 라벨이 이 필터에 해당하는지 확인

        동등 비교가 아니라 대소문자 무시 부분 문자열 포함 여부로 판단한다.
        "Steam, PC, Xbox" 같은 복합 라벨은 여러 필터에 동시에 걸린다.
        """
        keywords = PLATFORM_KEYWORDS.get(self)
        if keywords is None:
            return True
        label = platform_label.lower()
        return any(keyword in label for keyword in keywords)


# PC/콘솔 필터별 매칭 키워드
PLATFORM_KEYWORDS: dict[PlatformFilter, tuple[str, ...]] = {
    PlatformFilter.STEAM: ("steam", "pc", "windows"),
    PlatformFilter.PLAYSTATION: ("playstation", "ps5", "ps4", "ps3"),
    PlatformFilter.XBOX: ("xbox",),
    PlatformFilter.GOG: ("gog", "drm-free"),
    PlatformFilter.ANDROID: ("android",),
    PlatformFilter.IOS: ("ios",),
}
