"""임시 무료 게임 딜 조회 메인 스크립트"""

import argparse
import asyncio
import json
import logging
import sys

from src.application.formatters import format_release_date, platform_icon
from src.application.use_cases.aggregate_games import AggregateGamesUseCase
from src.config.settings import LOG_LEVEL
from src.domain.entities.free_game import FreeGame
from src.domain.value_objects.platform import PlatformFilter
from src.domain.value_objects.time_window import TimeFilter
from src.infrastructure.adapters.gamerpower_api_adapter import GamerPowerApiAdapter
from src.infrastructure.adapters.rss_deal_adapter import RssDealAdapter


def create_use_case() -> AggregateGamesUseCase:
    """의존성 생성"""
    return AggregateGamesUseCase(
        giveaway_fetcher=GamerPowerApiAdapter(),
        mobile_fetcher=RssDealAdapter(),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fetch temporarily free game deals")
    parser.add_argument(
        "--platform",
        choices=[p.value for p in PlatformFilter],
        default=PlatformFilter.ALL.value,
    )
    parser.add_argument("--time", choices=[t.value for t in TimeFilter], help="weekly / monthly 기간 필터")
    parser.add_argument("--genre", help="장르 부분 문자열 필터 (기브어웨이만)")
    parser.add_argument("--detail", metavar="ID", help="기브어웨이 상세 조회")
    parser.add_argument("--json", action="store_true", help="JSON 배열로 출력")
    return parser


def print_games(games: list[FreeGame]) -> None:
    if not games:
        print("⚠️  조회된 게임이 없습니다.")
        return
    for index, game in enumerate(games, start=1):
        print(f"{index:3}. {platform_icon(game.platform)} {game.title} [{game.platform}]")
        print(f"     {game.short_description}")
        print(f"     {format_release_date(game.release_date)} | {game.game_url}")
    print(f"\n✓ 총 {len(games)}개")


async def run(args: argparse.Namespace) -> int:
    use_case = create_use_case()

    if args.detail:
        detail = await use_case.game_details(args.detail)
        if detail is None:
            print(f"⚠️  기브어웨이 {args.detail}을(를) 찾을 수 없습니다.")
            return 1
        if args.json:
            print(json.dumps(detail.to_dict(), indent=2, ensure_ascii=False))
        else:
            print_games([detail])
            print(detail.description)
        return 0

    if args.genre:
        games = await use_case.games_by_genre(args.genre)
    elif args.time:
        games = await use_case.games_by_time(args.time, args.platform)
    else:
        games = await use_case.games_by_platform(args.platform)

    if args.json:
        print(json.dumps([game.to_dict() for game in games], indent=2, ensure_ascii=False))
    else:
        print_games(games)
    return 0


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    args = build_parser().parse_args(argv)
    return asyncio.run(run(args))


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n⚠️  사용자에 의해 중단되었습니다.")
        sys.exit(1)
    except Exception as e:
        print(f"\n❌ 오류 발생: {e}", file=sys.stderr)
        sys.exit(1)
