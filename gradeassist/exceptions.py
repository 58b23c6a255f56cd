"""
Error types raised by the grading session.
"""


class GradeAssistError(Exception):
    """Base class for all grading session errors."""


class ConfigurationError(GradeAssistError, ValueError):
    """The assignment or session configuration cannot be used."""


class RosterError(GradeAssistError):
    """The roster spreadsheet could not be read."""


class ToolchainError(GradeAssistError, RuntimeError):
    """An external viewer, compiler or version-control tool could not be started."""
