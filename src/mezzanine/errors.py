"""
Failure taxonomy of the mezzanine command.

Abandonment (too few points, cancelled height prompt) is not an error and has
no exception; the command reports it as a cancelled result.
"""


class MezzanineError(Exception):
    """Base class for failures reported to the operator."""


class ProfileNotClosedError(MezzanineError):
    def __init__(self, message: str = "The sketched outline is not closed.") -> None:
        super().__init__(message)


class UnresolvedLevelError(MezzanineError):
    def __init__(
        self,
        message: str = "Cannot determine the current level. Work in a plan view or in a model with levels."
    ) -> None:
        super().__init__(message)


class MissingConstructionTypesError(MezzanineError):
    def __init__(
        self,
        message: str = "Missing required construction types: the model needs a floor type and a basic wall type."
    ) -> None:
        super().__init__(message)


class GenerationError(MezzanineError):
    """Creating or committing the floor and walls failed; the model was rolled back."""


class HostError(Exception):
    """Raised by a host document when a modeling operation is rejected."""
