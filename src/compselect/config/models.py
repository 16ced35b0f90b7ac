"""Pydantic models for declarative rules in ``compselect.toml``.

Each ``[[rules]]`` table becomes one :class:`RuleConfig`::

    [[rules]]
    module = "org.gradle:api"
    reject_versions = ["*-SNAPSHOT", "1.0"]
    reason = "snapshots are not allowed"

A rule without ``module`` applies to every candidate.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class RuleConfig(BaseModel):
    """One declarative version-rejection rule."""

    model_config = {"frozen": True, "extra": "forbid"}

    module: str | None = None
    reject_versions: list[str] = Field(default_factory=list)
    reason: str | None = None
