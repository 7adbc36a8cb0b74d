"""
Talent string extraction from Archon build pages.
The page links its build to the Wowhead talent calculator; the part of that
link after the calculator prefix is the talent string.
"""

from bs4 import BeautifulSoup
from typing import Optional

WOWHEAD_PREFIX = "https://www.wowhead.com/talent-calc/blizzard/"

# Selection is looser than the prefix check below
TALENT_LINK_SELECTOR = 'a[href*="wowhead.com/talent-calc/blizzard/"]'


def extract_talent_string(html: str) -> Optional[str]:
    """
    Return the talent string from the first Wowhead talent-calc link in the page.

    Returns None when no link matches, or when the first matching link does
    not start with WOWHEAD_PREFIX. Later links are never consulted.
    The remainder after the prefix is returned verbatim, even when empty.
    """
    # html5lib follows the HTML5 tree rules, so <title>/<textarea> content stays text
    soup = BeautifulSoup(html, "html5lib")

    link = soup.select_one(TALENT_LINK_SELECTOR)
    if link is None:
        return None

    href = link.get("href")
    if not href or not href.startswith(WOWHEAD_PREFIX):
        return None

    return href[len(WOWHEAD_PREFIX):]
