from src.domain.value_objects.time_window import parse_release_date


def platform_icon(platform: str) -> str:
    """플랫폼 라벨에 맞는 아이콘"""
    label = platform.lower()
    if "android" in label:
        return "🤖"
    if "ios" in label or "iphone" in label or "ipad" in label:
        return "🍎"
    if "windows" in label or "pc" in label:
        return "🖥️"
    if "browser" in label or "web" in label:
        return "🌐"
    return "🎮"


def format_release_date(value: str) -> str:
    """"2026-10-19" → "Oct 19, 2026" (파싱 실패 시 원문 그대로)"""
    parsed = parse_release_date(value)
    if parsed is None:
        return value
    return f"{parsed:%b} {parsed.day}, {parsed.year}"
