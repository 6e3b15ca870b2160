from dataclasses import asdict, dataclass, field


@dataclass
class FreeGame:
    """화면에 노출되는 임시 무료 게임 (모든 소스의 공통 스키마)"""

    id: str  # 소스 범위에서만 유일 (소스 간 중복 가능)
    title: str
    thumbnail: str
    short_description: str
    game_url: str
    genre: str
    platform: str  # 자유 형식 라벨 ("Steam, PC" 등)
    publisher: str
    developer: str
    release_date: str  # ISO 날짜 문자열, 정렬/필터용
    profile_url: str

    def to_dict(self) -> dict:
        """표시 계층으로 전달할 딕셔너리로 변환"""
        return asdict(self)


@dataclass
class Screenshot:
    id: int
    image: str


@dataclass
class GameDetail(FreeGame):
    """기브어웨이 상세 정보"""

    description: str = ""
    screenshots: list[Screenshot] = field(default_factory=list)
