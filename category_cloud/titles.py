"""Resolution of category names to navigable wiki targets."""

import re
from typing import NamedTuple, Optional, Protocol
from urllib.parse import quote

DEFAULT_BASE_URL = '/wiki/'
DEFAULT_NAMESPACE = 'Category'

# Titles are stored in a 255-byte column
MAX_TITLE_BYTES = 255

_ILLEGAL_CHARS = re.compile(r'[#<>\[\]|{}\x00-\x1f\x7f]')
_PERCENT_ESCAPE = re.compile(r'%[0-9A-Fa-f]{2}')
_RELATIVE_PATH = re.compile(r'(^\.\.?$)|(^\.\.?/)|(/\.\.?/)|(/\.\.?$)')


class CategoryTarget(NamedTuple):
    """A resolved category page."""

    name: str
    url: str


class TitleResolver(Protocol):
    """Maps a normalized category name to a target, or None if it is invalid."""

    def resolve(self, name: str) -> Optional[CategoryTarget]:
        ...


class WikiTitleResolver:
    """Builds wiki-style category URLs and rejects names that are not valid titles."""

    def __init__(self, base_url: str = DEFAULT_BASE_URL, namespace: str = DEFAULT_NAMESPACE):
        self.base_url = base_url if base_url.endswith('/') else base_url + '/'
        self.namespace = namespace

    def is_valid(self, name: str) -> bool:
        """Check whether a normalized name can be used as a page title."""
        if not name or not name.strip('_'):
            return False
        if len(name.encode('utf-8')) > MAX_TITLE_BYTES:
            return False
        if name.startswith(':'):
            return False
        if _ILLEGAL_CHARS.search(name) or _PERCENT_ESCAPE.search(name):
            return False
        if _RELATIVE_PATH.search(name):
            return False
        return True

    def resolve(self, name: str) -> Optional[CategoryTarget]:
        if not self.is_valid(name):
            return None

        title = name[0].upper() + name[1:]
        prefix = f"{self.namespace}:" if self.namespace else ''
        url = self.base_url + quote(prefix + title, safe='/:')
        return CategoryTarget(title, url)
