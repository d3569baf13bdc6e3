"""Tag cloud renderer tying configuration, data fetch and markup together."""

import logging
import random
from typing import Any, List, Mapping, Optional, Protocol

from .config import RenderConfig, parse_render_config
from .data_source import CategoryCount, CategorySource, fetch_categories
from .titles import TitleResolver
from .visualization.tag_cloud import (
    CloudItem,
    build_cloud_items,
    render_cloud_html,
    render_empty_html
)

logger = logging.getLogger(__name__)


class OutputCache(Protocol):
    """Host output cache that accepts a requested expiry for the rendered page."""

    def update_cache_expiry(self, seconds: int) -> None:
        ...


class TagCloudRenderer:
    """Render category tag clouds from tag attributes."""

    def __init__(self, source: CategorySource, resolver: TitleResolver,
                 cache: Optional[OutputCache] = None,
                 rng: Optional[random.Random] = None,
                 messages: Optional[Mapping[str, str]] = None):
        """Initialize the renderer with its collaborators.

        Args:
            source: Category count data source
            resolver: Resolves category names to link targets
            cache: Optional output cache that receives the refresh hint
            rng: Random source used for shuffling; seed it for repeatable output
            messages: Overrides for the user-visible message strings
        """
        self.source = source
        self.resolver = resolver
        self.cache = cache
        self.rng = rng if rng is not None else random.Random()
        self.messages = dict(messages or {})

    def _fetch(self, config: RenderConfig) -> List[CategoryCount]:
        return fetch_categories(
            self.source,
            min_count=config.min_count,
            max_results=config.max_results,
            exclude=config.exclude,
            only=config.only,
        )

    def _arrange(self, categories: List[CategoryCount], config: RenderConfig) -> List[CloudItem]:
        self.rng.shuffle(categories)
        return build_cloud_items(
            categories,
            self.resolver,
            config.min_font_percent,
            config.max_font_percent,
            self.messages,
        )

    def build_items(self, config: RenderConfig) -> List[CloudItem]:
        """Fetch, shuffle and size the categories for a configuration."""
        return self._arrange(self._fetch(config), config)

    def render(self, attrs: Optional[Mapping[str, Any]] = None) -> str:
        """Render the cloud markup for a set of raw tag attributes.

        Args:
            attrs: Raw tag attributes (``min``, ``max``, ``exclude``, ``only``,
                ``minsize``, ``maxsize``, ``refresh``)

        Returns:
            HTML fragment: the populated cloud, or the empty-state placeholder
        """
        config = parse_render_config(attrs)

        if config.cache_ttl_seconds > 0 and self.cache is not None:
            self.cache.update_cache_expiry(config.cache_ttl_seconds)

        categories = self._fetch(config)
        if not categories:
            logger.info("No categories matched, rendering empty state")
            return render_empty_html(self.messages)

        items = self._arrange(categories, config)
        skipped = len(categories) - len(items)
        if skipped:
            logger.info(f"Skipped {skipped} categories with invalid titles")
        return render_cloud_html(items)


def render_tag_cloud(attrs: Optional[Mapping[str, Any]],
                     source: CategorySource,
                     resolver: TitleResolver,
                     **kwargs) -> str:
    """Render a tag cloud in one call.

    Args:
        attrs: Raw tag attributes
        source: Category count data source
        resolver: Title resolver
        **kwargs: Passed through to TagCloudRenderer (cache, rng, messages)

    Returns:
        HTML fragment
    """
    return TagCloudRenderer(source, resolver, **kwargs).render(attrs)
