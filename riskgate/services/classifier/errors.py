"""Classifier error types."""


class ConfigurationError(ValueError):
    """Raised when a classifier configuration source cannot be loaded."""


class UnknownPresetError(KeyError):
    """Raised when a preset name is not registered."""

    def __init__(self, name: str, known: list[str]):
        self.name = name
        self.known = known
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown preset '{self.name}'. Known presets: {', '.join(self.known)}"


class InputTooLarge(ValueError):
    """Raised when input text exceeds the configured size cap."""

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(f"Input of {size} characters exceeds the limit of {limit}")
