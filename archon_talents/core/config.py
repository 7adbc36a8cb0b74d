class Settings:
    # Fetch policy (fixed, not read from the environment)
    REQUEST_TIMEOUT: int = 180  # seconds
    MAX_CONCURRENT_REQUESTS: int = 5
    POOL_MAX_IDLE_PER_HOST: int = 10
    FOLLOW_REDIRECTS: bool = True

    # Identification sent on every request
    USER_AGENT: str = "ArchonConfigUpdater/1.0"

settings = Settings()
