"""Exceptions raised by the learning module workflow."""

GENERATION_FAILED_MESSAGE = "Failed to generate learning module. Please try again."
EMPTY_SOURCE_MESSAGE = "Please paste some code first!"


class CodeMasterError(Exception):
    """Base class for errors surfaced to the user."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InputError(CodeMasterError):
    """The user submitted blank source code; never reaches the network."""

    def __init__(self, message: str = EMPTY_SOURCE_MESSAGE):
        super().__init__(message)


class GenerationError(CodeMasterError):
    """Module generation failed upstream or returned an unusable payload."""

    def __init__(self, message: str = GENERATION_FAILED_MESSAGE):
        super().__init__(message)
