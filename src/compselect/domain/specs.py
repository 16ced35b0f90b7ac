"""Specs: predicates that decide whether a rule applies to a selection.

Pure functions of candidate identity. No I/O, no engine callbacks.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from compselect.domain.identifiers import ModuleIdentifier
    from compselect.domain.selection import ComponentSelection


@runtime_checkable
class Spec(Protocol):
    """A predicate over component selections."""

    def is_satisfied_by(self, selection: ComponentSelection) -> bool: ...


class _SatisfyAll:
    """Spec matching every selection."""

    def is_satisfied_by(self, selection: ComponentSelection) -> bool:
        return True

    def __call__(self, selection: ComponentSelection) -> bool:
        return True

    def __repr__(self) -> str:
        return "SATISFY_ALL"


SATISFY_ALL: Spec = _SatisfyAll()


class ComponentSelectionMatchingSpec:
    """Matches selections whose candidate has the target's group and module name.

    The version never participates. The group is compared first so the
    module name is only read when the group already matches.
    """

    __slots__ = ("_target",)

    def __init__(self, target: ModuleIdentifier) -> None:
        self._target = target

    @property
    def target(self) -> ModuleIdentifier:
        return self._target

    def is_satisfied_by(self, selection: ComponentSelection) -> bool:
        candidate = selection.candidate
        return candidate.group == self._target.group and candidate.module == self._target.name

    def __call__(self, selection: ComponentSelection) -> bool:
        return self.is_satisfied_by(selection)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ComponentSelectionMatchingSpec):
            return NotImplemented
        return self._target == other._target

    def __hash__(self) -> int:
        return hash(self._target)

    def __repr__(self) -> str:
        return f"ComponentSelectionMatchingSpec({self._target})"
