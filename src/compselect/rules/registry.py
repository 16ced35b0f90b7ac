"""ComponentSelectionRules: ordered registry of component selection rules.

Each successful registration appends exactly one :class:`SpecRuleAction`;
a failed registration appends nothing. Rules are stored and evaluated in
registration order.

INVARIANT: Configure-then-read. Registration happens on a single thread
before resolution starts; readers get an immutable tuple snapshot from
:attr:`ComponentSelectionRules.rules` and never observe a partial append.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from compselect.domain.notation import ModuleIdentifierNotationParser, NotationParser
from compselect.domain.selection import ComponentSelection
from compselect.domain.specs import SATISFY_ALL, ComponentSelectionMatchingSpec, Spec
from compselect.errors import InvalidUserCodeError, UnsupportedNotationError
from compselect.rules.actions import Action, DefaultRuleActionAdapter, RuleAction

if TYPE_CHECKING:
    from collections.abc import Iterator

    from compselect.rules.actions import RuleActionAdapter

logger = logging.getLogger(__name__)

T = TypeVar("T")

RULE_CONTEXT = "component selection rule"


@dataclass(frozen=True)
class SpecRuleAction(Generic[T]):
    """A registered rule: the spec decides applicability, the action does the work."""

    spec: Spec
    action: RuleAction[T]

    def applies_to(self, subject: Any) -> bool:
        return self.spec.is_satisfied_by(subject)


class ComponentSelectionRules:
    """Registry of component selection rules.

    Args:
        adapter: Normalizes typed actions and untyped blocks.
        notation_parser: Converts ``"group:module"`` notation to a
            :class:`~compselect.domain.identifiers.ModuleIdentifier`.

    Usage::

        rules = ComponentSelectionRules()
        rules.all(lambda selection: ...)
        rules.module("org.gradle:api", RejectSnapshots())
    """

    def __init__(
        self,
        adapter: RuleActionAdapter[ComponentSelection] | None = None,
        notation_parser: NotationParser | None = None,
    ) -> None:
        self._adapter: RuleActionAdapter[ComponentSelection] = (
            adapter if adapter is not None else DefaultRuleActionAdapter(RULE_CONTEXT)
        )
        self._notation_parser: NotationParser = (
            notation_parser if notation_parser is not None else ModuleIdentifierNotationParser()
        )
        self._rules: list[SpecRuleAction[ComponentSelection]] = []

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def all(self, action: Action[ComponentSelection] | Any) -> ComponentSelectionRules:
        """Register *action* for every candidate component."""
        rule_action = self._create_rule_action(action)
        return self._add_rule(SpecRuleAction(SATISFY_ALL, rule_action))

    def module(
        self, notation: Any, action: Action[ComponentSelection] | Any
    ) -> ComponentSelectionRules:
        """Register *action* for candidates of the module named by *notation*.

        The action is normalized before the notation is parsed, so a call
        with both a bad action and a bad notation reports the action error.

        Raises:
            InvalidUserCodeError: If the action cannot be adapted (raised
                unchanged), or if *notation* cannot be parsed (raised with
                the :class:`UnsupportedNotationError` as ``__cause__``).
        """
        rule_action = self._create_rule_action(action)
        spec = self._create_matching_spec(notation)
        return self._add_rule(SpecRuleAction(spec, rule_action))

    def with_module(
        self, notation: Any, action: Action[ComponentSelection] | Any
    ) -> ComponentSelectionRules:
        """Alias of :meth:`module`."""
        return self.module(notation, action)

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def rules(self) -> tuple[SpecRuleAction[ComponentSelection], ...]:
        """Registered rules in registration order (immutable snapshot)."""
        return tuple(self._rules)

    def matching(self, selection: ComponentSelection) -> list[SpecRuleAction[ComponentSelection]]:
        """Rules whose spec is satisfied by *selection*, in registration order."""
        return [rule for rule in self.rules if rule.applies_to(selection)]

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[SpecRuleAction[ComponentSelection]]:
        return iter(self.rules)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _create_rule_action(self, action: Any) -> RuleAction[ComponentSelection]:
        if isinstance(action, Action):
            return self._adapter.create_from_action(action)
        return self._adapter.create_from_block(ComponentSelection, action)

    def _create_matching_spec(self, notation: Any) -> ComponentSelectionMatchingSpec:
        try:
            target = self._notation_parser.parse_notation(notation)
        except UnsupportedNotationError as exc:
            msg = f"Could not add a {RULE_CONTEXT} for module '{notation}'."
            raise InvalidUserCodeError(msg) from exc
        return ComponentSelectionMatchingSpec(target)

    def _add_rule(self, rule: SpecRuleAction[ComponentSelection]) -> ComponentSelectionRules:
        self._rules.append(rule)
        logger.debug("Registered %s #%d: %r", RULE_CONTEXT, len(self._rules), rule.spec)
        return self
