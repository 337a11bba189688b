"""Error taxonomy for market-data aggregation."""


class InvalidRequest(ValueError):
    """Malformed batch input; rejected before any provider is contacted."""


class ProviderUnavailable(Exception):
    """A provider timed out, failed, or returned a malformed payload."""

    def __init__(self, provider: str, reason: str):
        self.provider = provider
        self.reason = reason
        super().__init__(f"{provider} unavailable: {reason}")
