"""Notation parsing: ``"group:module"`` strings to :class:`ModuleIdentifier`.

The registry depends only on the :class:`NotationParser` protocol, so
callers may inject their own converter. :class:`ModuleIdentifierNotationParser`
is the default.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from compselect.domain.identifiers import ModuleComponentIdentifier, ModuleIdentifier
from compselect.errors import UnsupportedNotationError

# Version-range and wildcard syntax is not part of a module identifier.
INVALID_CHARACTERS = frozenset("*[](),")

_SEPARATOR = ":"


@runtime_checkable
class NotationParser(Protocol):
    """Converts a notation value into a module identifier."""

    def parse_notation(self, notation: object) -> ModuleIdentifier: ...


class ModuleIdentifierNotationParser:
    """Parses ``"group:module"`` notation.

    Examples:
        >>> ModuleIdentifierNotationParser().parse_notation("org.gradle:api")
        ModuleIdentifier(group='org.gradle', name='api')
    """

    def parse_notation(self, notation: object) -> ModuleIdentifier:
        """Return the identifier for *notation*.

        Raises:
            UnsupportedNotationError: If *notation* is not exactly two
                non-empty ``:``-separated parts free of range characters.
        """
        if isinstance(notation, ModuleIdentifier):
            return notation
        if not isinstance(notation, str):
            raise UnsupportedNotationError(
                notation, "Expected a string of the form 'group:module'."
            )

        parts = notation.split(_SEPARATOR)
        if len(parts) != 2:
            raise UnsupportedNotationError(notation)

        group = _validate_part(parts[0], notation)
        name = _validate_part(parts[1], notation)
        return ModuleIdentifier(group=group, name=name)


def _validate_part(part: str, notation: str) -> str:
    trimmed = part.strip()
    if not trimmed:
        raise UnsupportedNotationError(notation)
    bad = sorted(INVALID_CHARACTERS.intersection(trimmed))
    if bad:
        raise UnsupportedNotationError(
            notation, f"Module identifiers may not contain {' '.join(bad)!r}."
        )
    return trimmed


def parse_component_notation(notation: str) -> ModuleComponentIdentifier:
    """Parse a ``"group:module:version"`` candidate coordinate.

    Raises:
        UnsupportedNotationError: If *notation* is not exactly three
            non-empty ``:``-separated parts.
    """
    parts = notation.split(_SEPARATOR)
    if len(parts) != 3:
        raise UnsupportedNotationError(
            notation, "Expected a candidate of the form 'group:module:version'."
        )
    group, module, version = (part.strip() for part in parts)
    if not (group and module and version):
        raise UnsupportedNotationError(notation)
    return ModuleComponentIdentifier(group=group, module=module, version=version)
