"""Module and component identifiers.

A :class:`ModuleIdentifier` is the ``(group, name)`` pair that scopes a
targeted rule. A :class:`ModuleComponentIdentifier` is a concrete candidate
``(group, module, version)`` supplied by the resolution engine.

INVARIANT: Identifiers are immutable and compare structurally.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ModuleIdentifier:
    """A module coordinate without a version."""

    group: str
    name: str

    def __str__(self) -> str:
        return f"{self.group}:{self.name}"


@dataclass(frozen=True)
class ModuleComponentIdentifier:
    """A versioned module component, i.e. one resolution candidate."""

    group: str
    module: str
    version: str

    @property
    def module_identifier(self) -> ModuleIdentifier:
        """The version-less ``(group, module)`` identity of this component."""
        return ModuleIdentifier(group=self.group, name=self.module)

    @property
    def display_name(self) -> str:
        return f"{self.group}:{self.module}:{self.version}"

    def __str__(self) -> str:
        return self.display_name


def new_component_id(group: str, module: str, version: str) -> ModuleComponentIdentifier:
    """Build a candidate identifier from its three coordinates."""
    return ModuleComponentIdentifier(group=group, module=module, version=version)
