from typing import Any, Dict, Optional

from tabscope.config.options import AnalysisOptions
from tabscope.samples import list_samples
from tabscope.service import AnalysisOutcome, analyze_sample, analyze_upload
from tabscope.utils.logger import get_logger

log = get_logger("dashboard")


def _contract(outcome: AnalysisOutcome) -> Dict[str, Any]:
    """
    Stable contract for Streamlit:
    exactly one of ``result`` / ``error`` is set.
    """
    if outcome.ok:
        log.info("Analysis ready: %s", outcome.source)
    else:
        log.info("Analysis rejected: %s (%s)", outcome.source, outcome.error)

    return {
        "source": outcome.source,
        "result": outcome.result,
        "payload": outcome.result.to_dict() if outcome.ok else None,
        "error": outcome.error,
    }


def run_analysis_from_upload(
    filename: str,
    data: bytes,
    mime_type: Optional[str] = None,
    options: Optional[AnalysisOptions] = None,
) -> Dict[str, Any]:
    """UI-safe wrapper around the upload entry point. Never raises."""
    return _contract(
        analyze_upload(data, filename=filename, content_type=mime_type, options=options)
    )


def run_analysis_from_sample(
    name: str,
    options: Optional[AnalysisOptions] = None,
) -> Dict[str, Any]:
    """UI-safe wrapper around the sample entry point. Never raises."""
    return _contract(analyze_sample(name, options))


def available_samples():
    return list_samples()
