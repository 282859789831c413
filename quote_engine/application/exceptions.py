class GeocoderUpstreamError(RuntimeError):
    """Raised when the geocoding proxy is unreachable (timeouts, connection errors)."""
    pass


class GeocoderContractError(RuntimeError):
    """Raised when the geocoding proxy answers with a payload we cannot read."""
    pass


class ChefDirectoryError(RuntimeError):
    """Raised when the chef directory cannot be listed."""
    pass
