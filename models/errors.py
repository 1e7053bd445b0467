class InvalidStateError(RuntimeError):
    """Raised when an operation needs an image but none has been set."""
