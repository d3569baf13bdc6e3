"""Render configuration parsed from tag attributes."""

from dataclasses import dataclass, field
from typing import Any, FrozenSet, Mapping, Optional

from .utils.text_processing import parse_int, parse_name_list

DEFAULT_MIN_COUNT = 1
DEFAULT_MAX_RESULTS = 0
DEFAULT_MIN_FONT_PERCENT = 80
DEFAULT_MAX_FONT_PERCENT = 200
DEFAULT_CACHE_TTL_SECONDS = 3600

# Lower bound keeps the smallest entries legible
MIN_FONT_PERCENT_FLOOR = 50

LIST_DELIMITER = ","


@dataclass(frozen=True)
class RenderConfig:
    """Validated settings for a single tag cloud render."""

    min_count: int = DEFAULT_MIN_COUNT
    max_results: int = DEFAULT_MAX_RESULTS
    min_font_percent: int = DEFAULT_MIN_FONT_PERCENT
    max_font_percent: int = DEFAULT_MAX_FONT_PERCENT
    cache_ttl_seconds: int = DEFAULT_CACHE_TTL_SECONDS
    exclude: FrozenSet[str] = field(default_factory=frozenset)
    only: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self):
        min_font = max(MIN_FONT_PERCENT_FLOOR, int(self.min_font_percent))
        object.__setattr__(self, 'min_count', max(1, int(self.min_count)))
        object.__setattr__(self, 'max_results', max(0, int(self.max_results)))
        object.__setattr__(self, 'min_font_percent', min_font)
        object.__setattr__(self, 'max_font_percent', max(min_font, int(self.max_font_percent)))
        object.__setattr__(self, 'cache_ttl_seconds', max(0, int(self.cache_ttl_seconds)))
        object.__setattr__(self, 'exclude', frozenset(self.exclude))
        object.__setattr__(self, 'only', frozenset(self.only))

    @property
    def is_limited(self) -> bool:
        return self.max_results > 0


def parse_render_config(attrs: Optional[Mapping[str, Any]] = None) -> RenderConfig:
    """Build a RenderConfig from raw tag attributes.

    Recognised attributes are ``min``, ``max``, ``minsize``, ``maxsize``,
    ``refresh``, ``exclude`` and ``only``. Keys are matched case-insensitively,
    unknown keys are ignored and malformed numbers fall back to the defaults.

    Args:
        attrs: Mapping of attribute name to raw string value

    Returns:
        Clamped, validated configuration
    """
    raw = {str(key).strip().lower(): value for key, value in (attrs or {}).items()}

    return RenderConfig(
        min_count=parse_int(raw.get('min'), DEFAULT_MIN_COUNT),
        max_results=parse_int(raw.get('max'), DEFAULT_MAX_RESULTS),
        min_font_percent=parse_int(raw.get('minsize'), DEFAULT_MIN_FONT_PERCENT),
        max_font_percent=parse_int(raw.get('maxsize'), DEFAULT_MAX_FONT_PERCENT),
        cache_ttl_seconds=parse_int(raw.get('refresh'), DEFAULT_CACHE_TTL_SECONDS),
        exclude=parse_name_list(raw.get('exclude'), LIST_DELIMITER),
        only=parse_name_list(raw.get('only'), LIST_DELIMITER),
    )
