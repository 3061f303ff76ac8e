class StoreError(RuntimeError):
    """Base class for backing-store failures."""
    pass


class StoreUpstreamError(StoreError):
    """Raised when the backing store fails (timeouts, network errors, error status)."""
    pass


class StoreContractError(StoreError):
    """Raised when the backing store answers with an unexpected shape."""
    pass
