"""Process exit codes and the setup failures that map onto them."""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    OK = 0
    UNSPECIFIED = 1
    CONFIGURATION = 2
    REQUIREMENTS = 3


class SetupError(Exception):
    """A failure while preparing the host; ends the process."""

    exit_code: ExitCode = ExitCode.UNSPECIFIED


class ConfigurationError(SetupError):
    """The environment cannot be used as configured."""

    exit_code = ExitCode.CONFIGURATION


class RequirementDeclined(SetupError):
    """The operator refused a remediation the tool cannot run without."""

    exit_code = ExitCode.REQUIREMENTS


class RemediationFailed(SetupError):
    """A remediation was attempted but did not pass its post-check."""

    exit_code = ExitCode.UNSPECIFIED


class OperatorExit(Exception):
    """Raised when the operator picks Abort or Exit."""
