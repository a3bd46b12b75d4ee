"""
Error types raised by the analysis engine.

Every error carries a short, user-facing message. The service layer
turns them into the single message shown by the dashboard; the engine
itself never swallows them.
"""


class AnalysisError(Exception):
    """Base class for every failure the engine reports."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidFileType(AnalysisError):
    """Upload is not a CSV file. Raised before any parsing happens."""


class MalformedInputError(AnalysisError):
    """Input is empty, undecodable or has no header line."""


class ComputationError(AnalysisError):
    """A numeric step produced an unusable value (NaN / inf)."""


class ConfigError(ValueError):
    """Invalid analysis options or configuration file content."""
