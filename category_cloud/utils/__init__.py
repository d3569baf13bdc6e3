"""Utility functions for Category Cloud."""

from .file_io import read_csv_with_fallback, save_html, ensure_directory_exists
from .text_processing import normalize_name, display_name, parse_name_list, parse_int

__all__ = [
    'read_csv_with_fallback',
    'save_html',
    'ensure_directory_exists',
    'normalize_name',
    'display_name',
    'parse_name_list',
    'parse_int'
]
