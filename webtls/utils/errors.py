import kopf


class WebConfigError(kopf.PermanentError):
    """Base class for web config errors.

    Every error raised here is permanent: retrying the same desired
    state produces the same failure.
    """


class MissingTLSKeyError(WebConfigError):
    """TLS is enabled but no private key selector is configured."""

    def __init__(self, message: str = "TLS is enabled but no keySecret is configured"):
        super().__init__(message)


class WebConfigSerializationError(WebConfigError):
    """The web config document could not be serialized."""
