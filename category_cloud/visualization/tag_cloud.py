"""HTML tag cloud markup for category page counts."""
import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Sequence

from jinja2 import Template
from markupsafe import Markup

from ..data_source import CategoryCount
from ..titles import TitleResolver
from ..utils.text_processing import display_name

logger = logging.getLogger(__name__)

DEFAULT_MESSAGES: Dict[str, str] = {
    'empty': 'No categories found.',
    'tooltip': '{name}: {count} pages',
    'tooltip_singular': '{name}: {count} page',
}

CLOUD_TEMPLATE = Template(
    '<div class="category-cloud">'
    '{% for item in items %}{% if not loop.first %}\n{% endif %}'
    '<a href="{{ item.url }}" class="category-cloud-item"'
    ' style="font-size:{{ item.font_size }}%"'
    ' title="{{ item.tooltip }}">{{ item.display_name }}</a>'
    '{% endfor %}'
    '</div>',
    autoescape=True,
)

EMPTY_TEMPLATE = Template(
    '<div class="category-cloud category-cloud-empty">{{ message }}</div>',
    autoescape=True,
)

# Standalone page used when the cloud is rendered outside a wiki
PAGE_TEMPLATE = Template("""<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>{{ title }}</title>
    <style>
        body { font-family: Arial, sans-serif; margin: 20px; }
        .category-cloud {
            max-width: 1200px;
            margin: 0 auto;
            padding: 16px;
            line-height: 1.8;
            text-align: center;
            border: 1px solid #ddd;
            border-radius: 8px;
        }
        .category-cloud-item {
            display: inline-block;
            margin: 0 0.4em;
            color: #1f4e79;
            text-decoration: none;
            transition: all 0.2s;
        }
        .category-cloud-item:hover {
            color: #1f77b4;
            text-decoration: underline;
        }
        .category-cloud-empty {
            color: #777;
            font-style: italic;
        }
    </style>
</head>
<body>
    <h1 style="text-align: center;">{{ title }}</h1>
    {{ fragment }}
</body>
</html>
""", autoescape=True)


@dataclass(frozen=True)
class CloudItem:
    """A single rendered entry of the cloud."""

    name: str
    display_name: str
    count: int
    font_size: int
    url: str
    tooltip: str


def compute_font_size(count: int, min_count: int, max_count: int,
                      min_font: int, max_font: int) -> int:
    """Map a page count linearly onto the font-size percentage scale.

    Args:
        count: Page count of the entry
        min_count: Smallest count among the displayed entries
        max_count: Largest count among the displayed entries
        min_font: Font size (percent) for the smallest count
        max_font: Font size (percent) for the largest count

    Returns:
        Font size in percent, rounded half up. When all counts are equal
        every entry gets the midpoint size.
    """
    count_range = max_count - min_count
    if count_range > 0:
        ratio = (count - min_count) / count_range
    else:
        ratio = 0.5
    return int(math.floor(min_font + (max_font - min_font) * ratio + 0.5))


def format_tooltip(name: str, count: int, messages: Optional[Mapping[str, str]] = None) -> str:
    """Format the hover label for an entry."""
    messages = {**DEFAULT_MESSAGES, **(messages or {})}
    key = 'tooltip_singular' if count == 1 else 'tooltip'
    return messages[key].format(name=name, count=f"{count:,}")


def build_cloud_items(categories: Sequence[CategoryCount],
                      resolver: TitleResolver,
                      min_font: int,
                      max_font: int,
                      messages: Optional[Mapping[str, str]] = None) -> List[CloudItem]:
    """Turn categories into cloud items, keeping their order.

    Sizes are scaled over the counts of all given categories. Entries whose
    name does not resolve to a target are left out.
    """
    if not categories:
        return []

    counts = [cat.count for cat in categories]
    min_count, max_count = min(counts), max(counts)

    items = []
    for cat in categories:
        target = resolver.resolve(cat.name)
        if target is None:
            logger.debug(f"Skipping category with invalid title: {cat.name!r}")
            continue

        label = display_name(cat.name)
        items.append(CloudItem(
            name=cat.name,
            display_name=label,
            count=cat.count,
            font_size=compute_font_size(cat.count, min_count, max_count, min_font, max_font),
            url=target.url,
            tooltip=format_tooltip(label, cat.count, messages),
        ))
    return items


def render_cloud_html(items: Sequence[CloudItem]) -> str:
    """Render the populated cloud container."""
    return CLOUD_TEMPLATE.render(items=items)


def render_empty_html(messages: Optional[Mapping[str, str]] = None) -> str:
    """Render the placeholder shown when no category qualifies."""
    messages = {**DEFAULT_MESSAGES, **(messages or {})}
    return EMPTY_TEMPLATE.render(message=messages['empty'])


def render_page(fragment: str, title: str = 'Category Cloud') -> str:
    """Wrap a cloud fragment in a standalone HTML page.

    Args:
        fragment: Markup produced by the renderer (already escaped)
        title: Page title

    Returns:
        Complete HTML document
    """
    return PAGE_TEMPLATE.render(title=title, fragment=Markup(fragment))
