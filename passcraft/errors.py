"""
passcraft.errors
Exceptions raised by the generator, scorer and configuration layer.
"""


class PassCraftError(Exception):
    """Base class for all PassCraft errors."""


class ConfigError(PassCraftError, ValueError):
    """Generation settings are outside what the generator accepts."""


class EmptyAlphabet(ConfigError):
    """Every character class is disabled, so there is nothing to draw from."""

    def __init__(self, message: str = "At least one character set must be enabled"):
        super().__init__(message)


class UnknownPolicy(PassCraftError, ValueError):
    def __init__(self, name: str):
        super().__init__(f"Unknown strength policy: {name!r}")
        self.name = name
