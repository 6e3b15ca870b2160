"""CORS 릴레이 체인을 통한 피드 조회 어댑터

피드는 교차 출처 요청만 가능하므로 여러 공개 릴레이를 순서대로 시도한다.
- 릴레이마다 1회만 시도 (같은 릴레이 재시도 없음)
- HTTP 성공 + XML/RSS 마커가 있어야 성공으로 인정
- 첫 성공에서 즉시 중단 (이후 릴레이는 호출하지 않음)
- 연속 실패한 릴레이는 cooldown 동안 건너뜀
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import AsyncIterator, Callable
from contextlib import aclosing
from dataclasses import dataclass
from urllib.parse import quote

import httpx

from src.config.settings import (
    CORS_PROXIES,
    HTTP_TIMEOUT_SECONDS,
    RELAY_COOLDOWN_SECONDS,
    RELAY_FAILURE_THRESHOLD,
    RSS_ACCEPT_HEADER,
)
from src.domain.ports.relay_fetcher import RelayFetcher

logger = logging.getLogger(__name__)

XML_MARKERS = ("<rss", "<?xml")


@dataclass(frozen=True)
class Relay:
    name: str
    prefix: str

    def build_url(self, target_url: str) -> str:
        """대상 URL을 percent-encoding 하여 릴레이 접두사 뒤에 붙임"""
        return f"{self.prefix}{quote(target_url, safe='')}"


@dataclass
class RelayHealth:
    """릴레이별 최근 실패 상태 (간단한 circuit breaker)"""

    consecutive_failures: int = 0
    open_until: float = 0.0

    def is_open(self, now: float) -> bool:
        return now < self.open_until

    def record_success(self) -> None:
        self.consecutive_failures = 0
        self.open_until = 0.0

    def record_failure(self, now: float, threshold: int, cooldown: float) -> None:
        self.consecutive_failures += 1
        if self.consecutive_failures >= threshold:
            self.open_until = now + cooldown


def looks_like_xml(body: str) -> bool:
    return any(marker in body for marker in XML_MARKERS)


class ProxyChainFetcher(RelayFetcher):
    """릴레이 목록을 순서대로 시도하여 첫 번째 유효한 XML 본문을 반환"""

    def __init__(
        self,
        relays: list[tuple[str, str]] | None = None,
        timeout: float = HTTP_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
        failure_threshold: int = RELAY_FAILURE_THRESHOLD,
        cooldown: float = RELAY_COOLDOWN_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.relays = [Relay(name, prefix) for name, prefix in (relays if relays is not None else CORS_PROXIES)]
        self.timeout = timeout
        self.transport = transport
        self.failure_threshold = failure_threshold
        self.cooldown = cooldown
        self._clock = clock
        self._health: dict[str, RelayHealth] = {relay.name: RelayHealth() for relay in self.relays}

    def health(self, relay_name: str) -> RelayHealth:
        return self._health[relay_name]

    def ordered_relays(self) -> list[Relay]:
        """cooldown 중이 아닌 릴레이 (모두 cooldown이면 전체 목록)"""
        now = self._clock()
        available = [relay for relay in self.relays if not self._health[relay.name].is_open(now)]
        if not available:
            logger.warning("All relays are cooling down, trying the full list")
            return list(self.relays)
        return available

    async def fetch(self, feed_url: str) -> str | None:
        """첫 번째로 성공한 릴레이의 XML 본문 (모두 실패하면 None)"""
        async with aclosing(self.iter_payloads(feed_url)) as payloads:
            async for _, body in payloads:
                return body
        return None

    async def iter_payloads(self, feed_url: str) -> AsyncIterator[tuple[str, str]]:
        """성공한 릴레이의 (이름, 본문)을 순서대로 하나씩 생성

        소비자가 중단하면 이후 릴레이는 호출되지 않는다.
        """
        relays = self.ordered_relays()
        logger.info(f"Fetching {feed_url} through {len(relays)} relays")

        succeeded = 0
        for relay in relays:
            body = await self._fetch_via(relay, feed_url)
            if body is None:
                self._health[relay.name].record_failure(self._clock(), self.failure_threshold, self.cooldown)
                continue
            self._health[relay.name].record_success()
            succeeded += 1
            yield relay.name, body

        if not succeeded:
            logger.error(f"All {len(relays)} relays failed for {feed_url}")

    async def _fetch_via(self, relay: Relay, feed_url: str) -> str | None:
        """릴레이 하나로 1회 요청 (실패 시 None)"""
        logger.debug(f"Trying relay {relay.name}")
        try:
            # 연결부터 본문 수신까지 전체에 대한 deadline
            body = await asyncio.wait_for(self._download(relay, feed_url), self.timeout)
        except asyncio.TimeoutError:
            logger.warning(f"Relay {relay.name} failed: exceeded {self.timeout}s deadline")
            return None
        except httpx.HTTPError as e:
            logger.warning(f"Relay {relay.name} failed: {type(e).__name__}: {e}")
            return None

        if not looks_like_xml(body):
            logger.warning(f"Relay {relay.name} returned a non-XML payload")
            return None

        logger.info(f"Relay {relay.name} succeeded ({len(body)} chars)")
        return body

    async def _download(self, relay: Relay, feed_url: str) -> str:
        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self.transport, follow_redirects=True
        ) as client:
            response = await client.get(
                relay.build_url(feed_url),
                headers={"Accept": RSS_ACCEPT_HEADER},
            )
            response.raise_for_status()
            return response.text
