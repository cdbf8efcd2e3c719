"""Error taxonomy for SteamID construction and parsing."""


class MalformedIdentifierError(ValueError):
    """Raised when a raw value or text does not encode a valid SteamID."""

    pass
