"""Rule actions and the adapter that normalizes caller-supplied actions.

Callers hand the registry one of two shapes:

- a typed :class:`Action`, i.e. any object with ``execute(subject)``;
- an untyped block, i.e. any callable taking the subject as its one
  positional argument.

:class:`RuleActionAdapter` turns either shape into a :class:`RuleAction`
once, at registration time. Evaluation code only ever sees ``RuleAction``.
"""

from __future__ import annotations

import inspect
import logging
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

from compselect.errors import InvalidUserCodeError

logger = logging.getLogger(__name__)

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


@runtime_checkable
class Action(Protocol[T_contra]):
    """A typed, single-subject action."""

    def execute(self, subject: T_contra) -> None: ...


@runtime_checkable
class RuleAction(Protocol[T_contra]):
    """Normalized action stored by the registry."""

    @property
    def input_types(self) -> tuple[type, ...]: ...

    def execute(self, subject: T_contra) -> None: ...


class RuleActionAdapter(Protocol[T]):
    """Creates :class:`RuleAction` values from either caller shape."""

    def create_from_action(self, action: Action[T]) -> RuleAction[T]: ...

    def create_from_block(self, target_type: type[T], block: Any) -> RuleAction[T]: ...


class ActionBackedRuleAction(Generic[T]):
    """RuleAction delegating to a typed :class:`Action`."""

    def __init__(self, action: Action[T]) -> None:
        self._action = action

    @property
    def input_types(self) -> tuple[type, ...]:
        return ()

    @property
    def action(self) -> Action[T]:
        return self._action

    def execute(self, subject: T) -> None:
        self._action.execute(subject)

    def __repr__(self) -> str:
        return f"ActionBackedRuleAction({self._action!r})"


class BlockBackedRuleAction(Generic[T]):
    """RuleAction calling an untyped block with the subject."""

    def __init__(self, target_type: type[T], block: Any) -> None:
        self._target_type = target_type
        self._block = block

    @property
    def input_types(self) -> tuple[type, ...]:
        return ()

    @property
    def target_type(self) -> type[T]:
        return self._target_type

    @property
    def block(self) -> Any:
        return self._block

    def execute(self, subject: T) -> None:
        self._block(subject)

    def __repr__(self) -> str:
        name = getattr(self._block, "__qualname__", repr(self._block))
        return f"BlockBackedRuleAction({name})"


class DefaultRuleActionAdapter(Generic[T]):
    """Validating adapter used when no other adapter is injected.

    Args:
        context: Human-readable rule kind used in error messages
            (e.g. ``"component selection rule"``).
    """

    def __init__(self, context: str = "rule") -> None:
        self._context = context

    def create_from_action(self, action: Action[T]) -> RuleAction[T]:
        if not callable(getattr(action, "execute", None)):
            msg = (
                f"Cannot use {type(action).__name__} as a {self._context} action: "
                "it has no execute() method."
            )
            raise InvalidUserCodeError(msg)
        return ActionBackedRuleAction(action)

    def create_from_block(self, target_type: type[T], block: Any) -> RuleAction[T]:
        if not callable(block):
            msg = (
                f"Cannot use {type(block).__name__} as a {self._context} block: "
                "it is not callable."
            )
            raise InvalidUserCodeError(msg)
        self._validate_block(target_type, block)
        return BlockBackedRuleAction(target_type, block)

    def _validate_block(self, target_type: type[T], block: Any) -> None:
        """Check that *block* takes one positional argument compatible with *target_type*."""
        signature = _signature_of(block)
        if signature is None:
            return

        positional: list[inspect.Parameter] = []
        accepts_varargs = False
        for param in signature.parameters.values():
            if param.kind in _POSITIONAL_KINDS:
                positional.append(param)
            elif param.kind is inspect.Parameter.VAR_POSITIONAL:
                accepts_varargs = True
            elif param.kind is inspect.Parameter.KEYWORD_ONLY and param.default is param.empty:
                msg = (
                    f"The {self._context} block declares required keyword-only "
                    f"parameter '{param.name}'; only a single {target_type.__name__} "
                    "parameter is supported."
                )
                raise InvalidUserCodeError(msg)

        required = [p for p in positional if p.default is p.empty]
        if len(required) > 1:
            msg = (
                f"The {self._context} block declares {len(required)} required parameters; "
                f"it must take a single {target_type.__name__} parameter."
            )
            raise InvalidUserCodeError(msg)
        if not positional and not accepts_varargs:
            msg = f"The {self._context} block must take a single {target_type.__name__} parameter."
            raise InvalidUserCodeError(msg)

        if positional and not _accepts(positional[0].annotation, target_type):
            annotation = positional[0].annotation
            msg = (
                f"First parameter of the {self._context} block must be of type "
                f"'{target_type.__name__}', not '{annotation.__name__}'."
            )
            raise InvalidUserCodeError(msg)


def _accepts(annotation: Any, target_type: type) -> bool:
    """Whether a parameter annotated with *annotation* can take a *target_type*."""
    if annotation is inspect.Parameter.empty or annotation is Any or annotation is object:
        return True
    if not isinstance(annotation, type):
        return True
    try:
        return issubclass(target_type, annotation)
    except TypeError:
        # Non-runtime protocols and similar refuse class checks; arity was enough.
        logger.debug("Cannot check %r against %s", annotation, target_type.__name__)
        return True


def _signature_of(block: Any) -> inspect.Signature | None:
    """Signature of *block* with string annotations resolved where possible."""
    try:
        return inspect.signature(block, eval_str=True)
    except NameError:
        # Annotation refers to a name not importable at runtime; check arity only.
        logger.debug("Unresolvable annotations on %r", block)
        return inspect.signature(block)
    except (TypeError, ValueError):
        # Builtins and some C callables expose no signature.
        return None
