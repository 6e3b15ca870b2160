from dataclasses import dataclass, field

from src.domain.entities.free_game import FreeGame


@dataclass(frozen=True)
class SourceOutcome:
    """소스 하나의 조회 결과 (실패도 값으로 전달)"""

    source: str
    games: list[FreeGame] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failed(cls, source: str, error: str) -> "SourceOutcome":
        return cls(source=source, games=[], error=error)
