from src.domain.value_objects.fetch_outcome import SourceOutcome
from src.domain.value_objects.platform import MobilePlatform, PlatformFilter
from src.domain.value_objects.time_window import TimeFilter, TimeWindow

__all__ = ["MobilePlatform", "PlatformFilter", "SourceOutcome", "TimeFilter", "TimeWindow"]
