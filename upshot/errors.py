from typing import Any


class UnwrapError(RuntimeError):
    """
    Raised when a value is extracted from the wrong variant of a
    Result or Option.
    """

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value
