"""pytest 공통 픽스처 정의"""

from typing import Any

import pytest

from src.domain.entities.free_game import FreeGame


ANDROID_FEED = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
<channel>
<title>AppAgg - Free Android games</title>
<item>
<title><![CDATA[[100%] Mystic Quest – Android]]></title>
<link>https://appagg.com/android/mystic-quest.html</link>
<description><![CDATA[<img src="https://img.appagg.com/mystic.png"><b>Price:</b> $2.99<br><b>By:</b> <a href="https://appagg.com/dev/1">Quest Studio</a><br><a href="https://play.google.com/store/apps/details?id=com.quest.mystic">Get it</a>]]></description>
<category><![CDATA[Role Playing]]></category>
<pubDate>Sat, 17 Oct 2026 08:30:00 +0000</pubDate>
</item>
<item>
<title>Cool Game (Limited)</title>
<link>https://appagg.com/android/cool-game.html</link>
<description><![CDATA[<p>No image here</p>]]></description>
<pubDate>Fri, 02 Oct 2026 10:00:00 +0000</pubDate>
</item>
<item>
<title><![CDATA[[50%] Orphan Item – Android]]></title>
<link>https://appagg.com/android/orphan.html</link>
</channel>
</rss>
"""

IOS_FEED = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
<channel>
<item>
<title><![CDATA[[-100%] Star Drift – iOS]]></title>
<link>https://appagg.com/ios/star-drift.html</link>
<description><![CDATA[<img src="undefined"><b>Price:</b> $0.99 <a href="https://apps.apple.com/us/app/star-drift/id123">App Store</a>]]></description>
<category>Arcade</category>
<pubDate>Sun, 18 Oct 2026 12:00:00 +0000</pubDate>
</item>
</channel>
</rss>
"""


@pytest.fixture
def android_feed() -> str:
    """Android 샘플 RSS 피드"""
    return ANDROID_FEED


@pytest.fixture
def ios_feed() -> str:
    """iOS 샘플 RSS 피드"""
    return IOS_FEED


@pytest.fixture
def sample_giveaways() -> list[dict[str, Any]]:
    """GamerPower /giveaways 응답 픽스처"""
    return [
        {
            "id": 3011,
            "title": "Hollow Keep (Steam) Giveaway",
            "worth": "$19.99",
            "thumbnail": "https://www.gamerpower.com/offers/1/hollow-keep.jpg",
            "image": "https://www.gamerpower.com/offers/1b/hollow-keep.jpg",
            "description": "Claim Hollow Keep for free on Steam!",
            "open_giveaway_url": "https://www.gamerpower.com/open/hollow-keep",
            "published_date": "2026-10-15 12:00:00",
            "type": "Game",
            "platforms": "PC, Steam",
            "gamerpower_url": "https://www.gamerpower.com/hollow-keep",
        },
        {
            "id": 3012,
            "title": "Space Raiders DLC",
            "worth": "N/A",
            "thumbnail": "https://www.gamerpower.com/offers/1/raiders.jpg",
            "description": "Bonus skin pack",
            "open_giveaway_url": "https://www.gamerpower.com/open/raiders",
            "published_date": "2026-10-16 12:00:00",
            "type": "DLC",
            "platforms": "PC, Epic Games Store",
            "gamerpower_url": "https://www.gamerpower.com/raiders",
        },
        {
            "id": 3013,
            "title": "Pixel Kart (PS4)",
            "worth": "",
            "thumbnail": "",
            "image": "",
            "description": "",
            "open_giveaway_url": "",
            "published_date": "2026-09-01 09:00:00",
            "type": "Game",
            "platforms": "Playstation 4",
            "publisher": "Kart Works",
            "gamerpower_url": "https://www.gamerpower.com/pixel-kart",
        },
        {
            "id": 3014,
            "title": "Retro Vault",
            "worth": "$9.99",
            "thumbnail": "https://www.gamerpower.com/offers/1/retro.jpg",
            "description": "DRM-free classic",
            "open_giveaway_url": "https://www.gamerpower.com/open/retro",
            "published_date": "not a date",
            "platforms": "DRM-Free",
            "gamerpower_url": "https://www.gamerpower.com/retro",
        },
    ]


def make_game(
    game_id: str,
    platform: str = "PC",
    release_date: str = "2026-10-15",
    genre: str = "Game",
) -> FreeGame:
    return FreeGame(
        id=game_id,
        title=f"Game {game_id}",
        thumbnail="https://example.com/thumbnail.jpg",
        short_description="Free giveaway",
        game_url=f"https://example.com/{game_id}",
        genre=genre,
        platform=platform,
        publisher="Unknown",
        developer="Unknown",
        release_date=release_date,
        profile_url=f"https://example.com/{game_id}",
    )


@pytest.fixture
def game_factory():
    """FreeGame 생성 헬퍼 픽스처"""
    return make_game
