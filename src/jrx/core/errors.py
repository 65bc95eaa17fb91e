"""Exception hierarchy for the jrx compiler."""


class JrxError(Exception):
    """Base class for all jrx errors."""

    pass


class RenderError(JrxError):
    """A component tree could not be compiled into a Spec."""

    pass


class InvalidInputError(RenderError):
    """render() received something that is not a Node."""

    pass


class InvalidRootError(RenderError):
    """The root node is a Fragment instead of a concrete element."""

    pass


class DuplicateKeyError(RenderError):
    """Two elements resolved to the same key within one render() call."""

    def __init__(self, key: str) -> None:
        super().__init__(
            f'Duplicate element key "{key}". Keys must be unique within a single render() call.'
        )
        self.key = key


class JSONParseError(JrxError):
    """JSON parsing failed."""

    def __init__(self, message: str, original: Exception | None = None) -> None:
        super().__init__(message)
        self.original = original


class ValidationError(JrxError):
    """Spec validation failed."""

    pass
