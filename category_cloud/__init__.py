"""
Category Cloud - Render wiki category popularity as an HTML tag cloud.
"""

from .config import RenderConfig, parse_render_config
from .data_source import CategoryCount, DataFrameCategorySource, fetch_categories
from .titles import CategoryTarget, WikiTitleResolver
from .renderer import TagCloudRenderer, render_tag_cloud
from .visualization import compute_font_size, render_page

__version__ = "0.1.0"
__all__ = [
    'RenderConfig',
    'parse_render_config',
    'CategoryCount',
    'DataFrameCategorySource',
    'fetch_categories',
    'CategoryTarget',
    'WikiTitleResolver',
    'TagCloudRenderer',
    'render_tag_cloud',
    'compute_font_size',
    'render_page'
]
