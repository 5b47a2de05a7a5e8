"""Exit codes and fatal parameter errors."""

from enum import IntEnum


class AppResult(IntEnum):
    """Process exit codes."""

    OK_SUCCESS = 0
    TOO_FEW_PARAMETERS = 1
    MISSING_MANDATORY_PARAMETER = 2
    # Reserved, nothing raises it yet
    INVALID_PARAMETER_VALUE = 3
    FILE_DOES_NOT_EXIST = 4
    # Reserved, a missing batch folder is reported per run instead
    FOLDER_DOES_NOT_EXIST = 5


class ParameterError(ValueError):
    """Base class for command line validation failures.

    Each subclass maps to the exit code the process terminates with.
    """

    result: AppResult = AppResult.INVALID_PARAMETER_VALUE

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def exit_code(self) -> int:
        return int(self.result)


class TooFewParametersError(ParameterError):
    result = AppResult.TOO_FEW_PARAMETERS


class MissingMandatoryParameterError(ParameterError):
    result = AppResult.MISSING_MANDATORY_PARAMETER
