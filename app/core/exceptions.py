class UpstreamDataError(Exception):
    """Raised when Twitch or IGDB answer with something we cannot use."""
