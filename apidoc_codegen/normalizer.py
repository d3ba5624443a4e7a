"""
Fragment normalizer: one line of markup in, plain text out.

Anchors can be kept as link markup ("[text](url)") so notes and descriptions
keep their references; titles, field names and type cells are link-stripped.

Design principle: NEVER FAIL on bad markup. Whatever text survives the
stripping is the result.
"""

import re
from typing import Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from .logger import get_module_logger

logger = get_module_logger("normalizer")

# Last-resort tag stripper for fragments the parser rejects outright.
TAG_PATTERN = re.compile(r'<[^>]+>')

ABSOLUTE_LINK_PREFIXES = ('http://', 'https://')


class FragmentNormalizer:
    """Strips markup from single lines of the reference document."""

    def __init__(self, base_url: Optional[str] = None):
        """
        Args:
            base_url: When set, relative anchor targets (e.g. "#message") are
                      resolved against it. Otherwise they degrade to plain text.
        """
        self.base_url = base_url

    def _resolve_href(self, href: Optional[str]) -> Optional[str]:
        if not href:
            return None
        href = href.strip()
        if href.startswith(ABSOLUTE_LINK_PREFIXES):
            return href
        if self.base_url:
            return urljoin(self.base_url, href)
        return None

    def normalize(self, fragment: str, keep_links: bool = True) -> str:
        """
        Convert a markup fragment to text.

        Args:
            fragment: One line of HTML
            keep_links: Rewrite anchors with a resolvable href to "[text](url)"

        Returns:
            The fragment's text with all tags removed and entities decoded
        """
        try:
            # html.parser keeps stray cells and unclosed tags as-is, which is
            # what a line-at-a-time caller wants (no <html><body> wrapping).
            soup = BeautifulSoup(fragment, 'html.parser')
        except ParserRejectedMarkup as e:
            logger.debug(f"Parser rejected fragment, stripping tags by pattern: {e}")
            return TAG_PATTERN.sub('', fragment).strip()

        if keep_links:
            for anchor in soup.find_all('a'):
                text = anchor.get_text()
                target = self._resolve_href(anchor.get('href'))
                if target:
                    anchor.replace_with(f"[{text}]({target})")
                else:
                    anchor.replace_with(text)

        return soup.get_text().strip()


def normalize_fragment(fragment: str, keep_links: bool = True,
                       base_url: Optional[str] = None) -> str:
    """Convenience function to normalize one fragment."""
    return FragmentNormalizer(base_url=base_url).normalize(fragment, keep_links=keep_links)
