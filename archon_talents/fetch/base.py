from archon_talents.schemas import FetchOutcome

class FetcherClosedError(RuntimeError):
    """Raised into Failed outcomes when the request gate has been shut."""

class BaseFetcher:
    async def fetch(self, url: str) -> FetchOutcome:
        raise NotImplementedError
