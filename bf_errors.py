class SbfiError(Exception):
    label = "Error"

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def report(self):
        return f"{self.label}: {self.message}"


class ConfigurationError(SbfiError):
    label = "OptionsError"


class AllocationError(SbfiError):
    label = "AllocationError"


class BoundaryError(SbfiError):
    """Cursor moved past either end of the tape."""
    label = "ParsingError"


class UnmatchedBracketError(SbfiError):
    """A ']' with no open loop, or a '[' that is never closed."""
    label = "ParsingError"
