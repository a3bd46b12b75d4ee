"""
Service boundary between the engine and its hosts (CLI, dashboard).

Two entry points mirror the dashboard: an uploaded CSV file, checked
for the ``text/csv`` MIME type before anything is parsed, and a named
built-in sample. Both return an AnalysisOutcome carrying either a
complete result or one user-facing error message, never both.
"""

import logging
import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from tabscope.config.options import AnalysisOptions
from tabscope.core.engine import analyze
from tabscope.core.models import AnalysisResult
from tabscope.errors import (
    AnalysisError,
    ConfigError,
    InvalidFileType,
    MalformedInputError,
)
from tabscope.samples import UnknownSampleError, get_sample

logger = logging.getLogger(__name__)

CSV_MIME_TYPE = "text/csv"
INVALID_FILE_MESSAGE = "Please upload a valid CSV file"

# built-in extension map only, so results do not depend on the host mime.types
_MIME_TYPES = mimetypes.MimeTypes()


@dataclass(frozen=True)
class AnalysisOutcome:
    source: str
    result: Optional[AnalysisResult] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.result is not None


# -------------------------------------------------
# INPUT CHECKS
# -------------------------------------------------
def detect_content_type(
    filename: Optional[str] = None,
    content_type: Optional[str] = None,
) -> Optional[str]:
    """
    Declared MIME type wins; otherwise guess from the file name.
    Parameters such as ``; charset=utf-8`` are ignored.
    """
    if content_type:
        return content_type.split(";", 1)[0].strip().lower()
    if filename:
        guessed, _ = _MIME_TYPES.guess_type(filename)
        return guessed
    return None


def ensure_csv(filename: Optional[str] = None, content_type: Optional[str] = None) -> None:
    mime = detect_content_type(filename, content_type)
    if mime != CSV_MIME_TYPE:
        logger.warning("Rejected upload %r (type %s)", filename, mime)
        raise InvalidFileType(INVALID_FILE_MESSAGE)


def decode_content(content: Union[bytes, str]) -> str:
    """UTF-8 text from an upload; a leading BOM is dropped."""
    if isinstance(content, str):
        return content.lstrip("\ufeff")
    try:
        return content.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise MalformedInputError("File is not valid UTF-8 text") from exc


def _failure(source: str, exc: Exception) -> AnalysisOutcome:
    if isinstance(exc, (InvalidFileType, UnknownSampleError)):
        message = exc.message
    elif isinstance(exc, AnalysisError):
        message = f"Failed to analyze data: {exc.message}"
    else:
        message = f"Failed to analyze data: {exc}"

    logger.warning("Analysis of %s failed: %s", source, message)
    return AnalysisOutcome(source=source, error=message)


# -------------------------------------------------
# ENTRY POINTS
# -------------------------------------------------
def analyze_upload(
    content: Union[bytes, str],
    filename: Optional[str] = None,
    content_type: Optional[str] = None,
    options: Optional[AnalysisOptions] = None,
) -> AnalysisOutcome:
    """
    Analyze uploaded file content.

    Non-CSV uploads are rejected before parsing. Every failure becomes
    the outcome's ``error`` message; nothing is raised.
    """
    source = filename or "upload"

    try:
        ensure_csv(filename, content_type)
        result = analyze(decode_content(content), options)
    except (AnalysisError, ConfigError) as exc:
        return _failure(source, exc)

    logger.info("Analyzed %s: %s rows, %s columns", source, result.row_count, result.column_count)
    return AnalysisOutcome(source=source, result=result)


def analyze_sample(
    name: str,
    options: Optional[AnalysisOptions] = None,
) -> AnalysisOutcome:
    """Analyze one of the built-in sample datasets."""
    source = f"Sample: {name}"

    try:
        result = analyze(get_sample(name), options)
    except (AnalysisError, ConfigError) as exc:
        return _failure(source, exc)

    logger.info("Analyzed %s: %s rows, %s columns", source, result.row_count, result.column_count)
    return AnalysisOutcome(source=source, result=result)


def analyze_file(
    path: Union[str, Path],
    options: Optional[AnalysisOptions] = None,
) -> AnalysisOutcome:
    """Analyze a CSV file on disk; the MIME type is guessed from its name."""
    path = Path(path)

    try:
        ensure_csv(path.name)
        content = path.read_bytes()
    except InvalidFileType as exc:
        return _failure(path.name, exc)
    except OSError as exc:
        logger.warning("Could not read %s: %s", path, exc)
        return AnalysisOutcome(source=path.name, error=f"Could not read file: {path}")

    return analyze_upload(content, filename=path.name, options=options)
