"""Report rendering for the check command.

Processing produces results one repository at a time; a ReportRenderer turns
them into output. TableRenderer prints rows as they arrive, JsonRenderer
collects them and prints a single validated document at the end.
"""

from abc import ABC, abstractmethod
from datetime import datetime

import click

from vercheck.cli.constants import TABLE_SEPARATOR
from vercheck.cli.json_output import emit_json
from vercheck.cli.json_schemas import CheckCommandResponse, RepoResultJson
from vercheck.cli.output import user_output
from vercheck.core.cache_policy import parse_timestamp
from vercheck.core.processor import MISSING_VERSION, ProcessedResult, Severity
from vercheck.core.repo_list import RepoEntry
from vercheck.core.store.types import VersionRecord

SEVERITY_COLORS: dict[Severity, str] = {
    "success": "green",
    "warning": "yellow",
    "error": "red",
}


def format_check_time(timestamp: int) -> str:
    """Local wall-clock rendering used in every output format."""
    return datetime.fromtimestamp(timestamp).strftime("%Y-%m-%d %H:%M")


def format_repo_line(result: ProcessedResult) -> str:
    status = click.style(f"{result.status_label:<20}", fg=SEVERITY_COLORS[result.severity])
    repo = f"{result.repo}:"
    return (
        f"{repo:<30} {result.version_to_print:<15} {status} "
        f"{format_check_time(result.effective_timestamp)}"
    )


class ReportRenderer(ABC):
    """Base class for report renderers."""

    @abstractmethod
    def start(self, summary: str) -> None:
        """Called once before the first repository, with the aggregate summary."""
        ...

    @abstractmethod
    def add_result(self, entry: RepoEntry, result: ProcessedResult) -> None:
        """Called once per repository, in input order."""
        ...

    @abstractmethod
    def finish(self) -> None:
        """Called once after the last repository."""
        ...


class TableRenderer(ReportRenderer):
    """Renders the report as a coloured text table for human consumption.

    Output goes to stderr via user_output(). A category heading is printed
    whenever the category changes between consecutive rows.
    """

    def __init__(self) -> None:
        self._current_category: str | None = None

    def start(self, summary: str) -> None:
        suffix = f" {summary}" if summary else ""
        user_output(f"☞ Checking upstream versions{suffix}...")
        user_output(TABLE_SEPARATOR)
        user_output(f"{'Repository:':<25} {'Version:':<15} Status:")
        user_output(TABLE_SEPARATOR)

    def add_result(self, entry: RepoEntry, result: ProcessedResult) -> None:
        if entry.category != self._current_category:
            user_output()
            user_output(click.style(f"--- {entry.category} ---", fg="cyan"))
            self._current_category = entry.category
        user_output(format_repo_line(result))

    def finish(self) -> None:
        user_output(TABLE_SEPARATOR)


class JsonRenderer(ReportRenderer):
    """Renders the report as one JSON document on stdout."""

    def __init__(self) -> None:
        self._summary = ""
        self._results: list[RepoResultJson] = []

    def start(self, summary: str) -> None:
        self._summary = summary

    def add_result(self, entry: RepoEntry, result: ProcessedResult) -> None:
        self._results.append(
            RepoResultJson(
                category=entry.category,
                repo=result.repo,
                version=result.version_to_print,
                status=result.status_label,
                severity=result.severity,
                last_checked=format_check_time(result.effective_timestamp),
                checked_at=result.effective_timestamp,
            )
        )

    def finish(self) -> None:
        response = CheckCommandResponse(last_success=self._summary, results=self._results)
        emit_json(response.model_dump(mode="json"))


def create_renderer(format: str) -> ReportRenderer:
    if format == "json":
        return JsonRenderer()
    return TableRenderer()


def format_record_line(record: VersionRecord) -> str:
    """One stored record for `vercheck summary --all`."""
    checked_at = parse_timestamp(record.last_checked)
    when = format_check_time(checked_at) if checked_at is not None else "never"
    repo = f"{record.repo}:"
    return f"{repo:<30} {record.version or MISSING_VERSION:<15} {record.status:<8} {when}"
