"""
Visualization module for Category Cloud.
"""
from .tag_cloud import (
    CloudItem,
    DEFAULT_MESSAGES,
    build_cloud_items,
    compute_font_size,
    format_tooltip,
    render_cloud_html,
    render_empty_html,
    render_page
)

__all__ = [
    'CloudItem',
    'DEFAULT_MESSAGES',
    'build_cloud_items',
    'compute_font_size',
    'format_tooltip',
    'render_cloud_html',
    'render_empty_html',
    'render_page'
]
