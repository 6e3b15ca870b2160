"""GamerPower 기브어웨이 API 어댑터

- 목록 API: /giveaways → 게임 타입만 남겨 FreeGame으로 변환
- 상세 API: /giveaway?id=<id> → GameDetail
RapidAPI 헤더 두 개(Key, Host)로 인증한다.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from src.application.normalizer import giveaway_to_free_game, giveaway_to_game_detail
from src.config.settings import (
    GAMERPOWER_API_BASE_URL,
    GAMERPOWER_API_HOST,
    GAMERPOWER_API_KEY,
    HTTP_TIMEOUT_SECONDS,
)
from src.domain.entities.free_game import FreeGame, GameDetail
from src.domain.ports.game_fetcher import GiveawayFetcher

logger = logging.getLogger(__name__)

# DLC, Loot, Beta 등은 제외하고 정식 게임만 유지
GAME_TYPES = {"game"}


def is_full_game(raw: dict) -> bool:
    """type이 "Game"이거나 지정되지 않은 항목만 게임으로 간주"""
    giveaway_type = raw.get("type")
    if not giveaway_type:
        return True
    return str(giveaway_type).strip().lower() in GAME_TYPES


class GamerPowerApiAdapter(GiveawayFetcher):
    """GamerPower API (RapidAPI 경유)를 통한 GiveawayFetcher 구현"""

    def __init__(
        self,
        base_url: str = GAMERPOWER_API_BASE_URL,
        api_key: str = GAMERPOWER_API_KEY,
        api_host: str = GAMERPOWER_API_HOST,
        timeout: float = HTTP_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.api_host = api_host
        self.timeout = timeout
        self.transport = transport

    @property
    def headers(self) -> dict[str, str]:
        return {
            "X-RapidAPI-Key": self.api_key,
            "X-RapidAPI-Host": self.api_host,
        }

    async def fetch_all_giveaways(self) -> list[FreeGame]:
        """전체 기브어웨이 중 게임만 FreeGame으로 변환 (실패 시 빈 리스트)"""
        data = await self._get_json("/giveaways")
        if data is None:
            return []
        if not isinstance(data, list):
            logger.error(f"Unexpected giveaways payload: {type(data).__name__}")
            return []

        platforms = sorted({str(raw.get("platforms")) for raw in data if isinstance(raw, dict) and raw.get("platforms")})
        logger.info(f"Received {len(data)} giveaways across {len(platforms)} platform labels")
        logger.debug(f"Platform labels: {platforms}")

        games = []
        for raw in data:
            if not isinstance(raw, dict) or not is_full_game(raw):
                continue
            try:
                games.append(giveaway_to_free_game(raw))
            except Exception as e:
                logger.warning(f"Failed to convert giveaway {raw.get('id')}: {e}")

        logger.info(f"Kept {len(games)} game giveaways")
        return games

    async def fetch_giveaway_details(self, giveaway_id: str) -> GameDetail | None:
        """기브어웨이 상세 조회 (없거나 실패하면 None)"""
        data = await self._get_json("/giveaway", params={"id": giveaway_id})
        if not isinstance(data, dict) or not data.get("id"):
            logger.info(f"Giveaway {giveaway_id} not found")
            return None
        return giveaway_to_game_detail(data)

    async def _get_json(self, path: str, params: dict[str, Any] | None = None) -> Any | None:
        """GET 요청 후 JSON 반환 (전송 실패, 비정상 상태, 잘못된 JSON은 None)"""
        url = f"{self.base_url}{path}"
        try:
            response = await asyncio.wait_for(self._get(url, params), self.timeout)
            if not response.is_success:
                logger.error(f"GamerPower API failed with status {response.status_code}: {url}")
                return None
            return response.json()
        except asyncio.TimeoutError:
            logger.error(f"GamerPower API request timed out after {self.timeout}s: {url}")
            return None
        except httpx.HTTPError as e:
            logger.error(f"GamerPower API request failed for {url}: {type(e).__name__}: {e}")
            return None
        except ValueError as e:
            logger.error(f"Invalid JSON from {url}: {e}")
            return None

    async def _get(self, url: str, params: dict[str, Any] | None) -> httpx.Response:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            return await client.get(url, headers=self.headers, params=params)
