import httpx
import pytest
from archon_talents.fetch.fetcher import ArchonFetcher

FROST_MAGE_PAGE = """
<html>
    <body>
        <div>
            <a href="https://www.wowhead.com/talent-calc/blizzard/mage/frost/DABCabc123XYZ">Frost Mage Build</a>
        </div>
    </body>
</html>
"""

NO_LINK_PAGE = """
<html>
    <body>
        <div>No talent links here</div>
    </body>
</html>
"""

@pytest.fixture
def frost_mage_page():
    return FROST_MAGE_PAGE

@pytest.fixture
def no_link_page():
    return NO_LINK_PAGE

@pytest.fixture
def make_fetcher():
    """Build an ArchonFetcher whose requests are answered by `handler` instead of the network"""
    def _make(handler):
        return ArchonFetcher(transport=httpx.MockTransport(handler))
    return _make
