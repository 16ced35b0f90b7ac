"""ComponentSelection: the mutable view a rule action receives.

The resolution engine wraps each candidate in a selection and hands it to
every matching rule. Actions may reject the candidate; the registry itself
never inspects the outcome.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from compselect.domain.identifiers import ModuleComponentIdentifier


class ComponentSelection:
    """Selection state for one candidate component."""

    def __init__(self, candidate: ModuleComponentIdentifier) -> None:
        self._candidate = candidate
        self._rejected = False
        self._rejection_reason: str | None = None

    @property
    def candidate(self) -> ModuleComponentIdentifier:
        """The candidate under consideration (read-only)."""
        return self._candidate

    @property
    def rejected(self) -> bool:
        return self._rejected

    @property
    def rejection_reason(self) -> str | None:
        return self._rejection_reason

    def reject(self, reason: str) -> None:
        """Reject the candidate. A later call replaces the reason."""
        self._rejected = True
        self._rejection_reason = reason

    def __repr__(self) -> str:
        state = f"rejected: {self._rejection_reason!r}" if self._rejected else "accepted"
        return f"ComponentSelection({self._candidate}, {state})"
