"""Pydantic models for JSON output schemas.

These models validate the documents printed by ``--format json`` so the shape
of machine-readable output stays stable.
"""

from pydantic import BaseModel, ConfigDict, Field


class RepoResultJson(BaseModel):
    """One repository row of `vercheck check --format json`.

    Attributes:
        category: Display group from the repository list
        repo: Repository identifier ("owner/name")
        version: Version to show, "N/A" when never resolved
        status: Status label such as "OK (Live)" or "FAILED (Once)"
        severity: "success", "warning" or "error"
        last_checked: Local time of the effective check, "%Y-%m-%d %H:%M"
        checked_at: Effective check time in seconds since epoch
    """

    model_config = ConfigDict(strict=True)

    category: str
    repo: str
    version: str
    status: str
    severity: str = Field(..., pattern="^(success|warning|error)$")
    last_checked: str
    checked_at: int = Field(..., ge=0)


class CheckCommandResponse(BaseModel):
    """JSON response schema for `vercheck check --format json`.

    Attributes:
        last_success: Aggregate summary, "" when nothing ever succeeded
        results: Per-repository results in input order
    """

    model_config = ConfigDict(strict=True)

    last_success: str
    results: list[RepoResultJson]
