import os

# 로그 레벨 (CLI에서만 설정)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# 모든 네트워크 호출의 기본 타임아웃 (초)
HTTP_TIMEOUT_SECONDS = float(os.getenv("HTTP_TIMEOUT_SECONDS", "10"))

# GamerPower 기브어웨이 API (RapidAPI 경유)
GAMERPOWER_API_BASE_URL = "https://gamerpower.p.rapidapi.com/api"
GAMERPOWER_API_HOST = os.getenv("GAMERPOWER_API_HOST", "gamerpower.p.rapidapi.com")
GAMERPOWER_API_KEY = os.getenv("GAMERPOWER_API_KEY", "")

# AppAgg 모바일 무료 게임 RSS 피드
APPAGG_FEED_URLS = {
    "android": "https://appagg.com/rss/sale/android-games/free/?hl=en",
    "ios": "https://appagg.com/rss/sale/ios-games/free/?hl=en",
}

RSS_ACCEPT_HEADER = "application/rss+xml, application/xml, text/xml, */*"

# CORS 릴레이 목록 (순서대로 시도, 대상 URL은 percent-encoding 후 접미사로 붙음)
CORS_PROXIES: list[tuple[str, str]] = [
    ("corsproxy.io", "https://corsproxy.io/?"),
    ("allorigins", "https://api.allorigins.win/raw?url="),
    ("thingproxy", "https://thingproxy.freeboard.io/fetch/"),
    ("cors.eu.org", "https://cors.eu.org/"),
]

# 연속 실패 N회 후 릴레이를 일정 시간 제외
RELAY_FAILURE_THRESHOLD = 3
RELAY_COOLDOWN_SECONDS = 300.0

# 썸네일이 없는 게임에 사용하는 고정 이미지
FALLBACK_GAME_IMAGE = "https://images.unsplash.com/photo-1550745165-9bc0b252726f?w=800&h=450&fit=crop&q=80"
