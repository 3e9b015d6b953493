"""GPX engine errors."""


class GpxError(ValueError):
    """Base GPX error."""
    pass


class InvalidDocument(GpxError):
    """Text is not XML or its root element is not <gpx>."""
    pass


class UnsupportedInput(GpxError):
    """No text content could be read from the given input."""
    pass
