"""JSON schemas for diagnostic summaries."""

from __future__ import annotations

from typing import Any, Union

from pydantic import TypeAdapter, ValidationError

from fertiscope.agents.summary import DiagnosticSummary
from fertiscope.exceptions import SummarySerializationError

_summary_adapter = TypeAdapter(DiagnosticSummary)


def summary_to_dict(summary: DiagnosticSummary) -> dict[str, Any]:
    """Dump a summary to JSON-compatible Python types."""
    return _summary_adapter.dump_python(summary, mode="json")


def summary_to_json(summary: DiagnosticSummary, indent: int | None = None) -> str:
    """Serialize a summary for storage or printing."""
    return _summary_adapter.dump_json(summary, indent=indent).decode("utf-8")


def summary_from_dict(data: dict[str, Any]) -> DiagnosticSummary:
    """Rebuild a summary from :func:`summary_to_dict` output."""
    try:
        return _summary_adapter.validate_python(data)
    except ValidationError as exc:
        raise SummarySerializationError(
            "Invalid diagnostic summary payload",
            details={"errors": exc.errors(include_url=False)},
        ) from exc


def summary_from_json(data: Union[str, bytes]) -> DiagnosticSummary:
    """Rebuild a summary from :func:`summary_to_json` output."""
    try:
        return _summary_adapter.validate_json(data)
    except ValidationError as exc:
        raise SummarySerializationError(
            "Invalid diagnostic summary JSON",
            details={"errors": exc.errors(include_url=False)},
        ) from exc
