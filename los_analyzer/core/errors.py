"""Exceptions raised by the analysis engine and terrain providers.

InvalidInputError: inputs the engine cannot evaluate (would produce NaN/Infinity).
ProfileFetchError: the terrain provider failed; never means "path is clear".
"""


class InvalidInputError(ValueError):
    """Analysis inputs are outside what the engine can evaluate."""


class ProfileFetchError(RuntimeError):
    """The terrain profile provider could not deliver a usable profile."""
