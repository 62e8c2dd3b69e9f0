"""
Dispatch layer shared by every curried operator.

An operator is written once as ``logic(source, *config, **options)`` and
wrapped in an :class:`Operator`, which offers two explicit entry points:

* ``op.direct(source, *config)`` runs the logic right away.
* ``op.with_config(*config)`` returns a :class:`PartialOperator` that waits
  for the sequence.

Calling ``op(*args)`` classifies the argument list into a :class:`Direct` or
:class:`Deferred` value and forwards to one of the two. Classification only
looks at the arguments; the wrapped logic (often a generator function) is
never invoked to find out how it was meant to be called.
"""

import functools
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Tuple, Union

from lazyseq.core.probes import is_sequence
from lazyseq.errors import NotASequenceError

Classifier = Callable[[Tuple[Any, ...]], bool]


@dataclass(frozen=True)
class Direct:
    """A fully applied call: the sequence plus its configuration."""
    source: Any
    config: Tuple[Any, ...] = ()
    options: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Deferred:
    """A configuration-only call still waiting for its sequence."""
    config: Tuple[Any, ...] = ()
    options: Dict[str, Any] = field(default_factory=dict)


Call = Union[Direct, Deferred]


def sequence_first(arity: int, accepts: Callable[[Any], bool] = is_sequence) -> Classifier:
    """Direct when there are more positionals than config slots or the first one is a source."""
    def classify(args: Tuple[Any, ...]) -> bool:
        return len(args) > arity or accepts(args[0])
    return classify


def config_first(is_config: Callable[[Any], bool], arity: int) -> Classifier:
    """Direct when there are more positionals than config slots or the first one is not config."""
    def classify(args: Tuple[Any, ...]) -> bool:
        return len(args) > arity or not is_config(args[0])
    return classify


def second_is_optional(is_optional: Callable[[Any], bool]) -> Classifier:
    """Classifier for operators taking ``(source, other, optional)``.

    Two positionals are deferred only when the second one is the optional
    argument; anything else is ``(source, other)`` and runs directly.
    """
    def classify(args: Tuple[Any, ...]) -> bool:
        if len(args) >= 3:
            return True
        if len(args) == 1:
            return False
        return not is_optional(args[1])
    return classify


class Operator:
    """A sequence operator callable either direct or pointfree."""

    def __init__(self,
                 logic: Callable[..., Any],
                 arity: int,
                 is_direct: Optional[Classifier] = None,
                 validate: Optional[Callable[..., None]] = None,
                 accepts: Callable[[Any], bool] = is_sequence):
        """
        Args:
            logic: Function taking ``(source, *config, **options)``
            arity: Maximum number of positional configuration arguments
            is_direct: Classifier for positional arguments (defaults to sequence-first)
            validate: Eager check of the configuration, raising on bad values
            accepts: Probe for valid sources (defaults to the iteration protocol)
        """
        functools.update_wrapper(self, logic)
        self._logic = logic
        self.arity = arity
        self._accepts = accepts
        self._is_direct = is_direct or sequence_first(arity, accepts)
        self._validate = validate

    def classify(self, args: Tuple[Any, ...], options: Dict[str, Any]) -> Call:
        """Tell a direct call from a configuration-only call."""
        if not args:
            raise TypeError(f"{self.__name__}() missing its configuration arguments")
        if self._is_direct(args):
            return Direct(args[0], tuple(args[1:]), dict(options))
        return Deferred(tuple(args), dict(options))

    def __call__(self, *args, **options) -> Any:
        call = self.classify(args, options)
        if isinstance(call, Direct):
            return self.direct(call.source, *call.config, **call.options)
        return self.with_config(*call.config, **call.options)

    def direct(self, source: Any, *config, **options) -> Any:
        """Run the operator against ``source``."""
        if not self._accepts(source):
            raise NotASequenceError(source)
        if self._validate is not None:
            self._validate(*config, **options)
        return self._logic(source, *config, **options)

    def with_config(self, *config, **options) -> 'PartialOperator':
        """Capture the configuration and wait for the sequence."""
        if self._validate is not None:
            self._validate(*config, **options)
        return PartialOperator(self, config, options)

    def __repr__(self) -> str:
        return f"<operator {self.__name__}>"


class PartialOperator:
    """An operator with its configuration captured, awaiting a sequence."""

    def __init__(self, operator: Operator, config: Tuple[Any, ...], options: Dict[str, Any]):
        functools.update_wrapper(self, operator, updated=())
        self.operator = operator
        self.config = tuple(config)
        self.options = dict(options)

    def __call__(self, source: Any) -> Any:
        return self.operator.direct(source, *self.config, **self.options)

    def apply(self, source: Any) -> Any:
        """Apply to a sequence; same as calling the partial."""
        return self(source)

    def __repr__(self) -> str:
        parts = [repr(c) for c in self.config]
        parts.extend(f"{k}={v!r}" for k, v in self.options.items())
        return f"{self.operator.__name__}.with_config({', '.join(parts)})"


def _decorate(logic, build):
    if logic is None:
        return build
    return build(logic)


def curry2(logic: Callable = None, *, arity: int = 1,
           validate: Optional[Callable[..., None]] = None,
           accepts: Callable[[Any], bool] = is_sequence):
    """Wrap a ``(source, config)`` logic function.

    Usable bare (``@curry2``) or with options (``@curry2(validate=...)``).
    """
    def build(fn):
        return Operator(fn, arity, sequence_first(arity, accepts), validate, accepts)
    return _decorate(logic, build)


def curry3(is_config: Callable[[Any], bool], logic: Callable = None, *,
           arity: int = 2, validate: Optional[Callable[..., None]] = None):
    """Wrap a ``(source, config1, config2)`` logic function.

    ``is_config`` recognises the first configuration value so that
    ``op(config1, config2)`` is not mistaken for ``op(source, config1)``.
    """
    def build(fn):
        return Operator(fn, arity, config_first(is_config, arity), validate)
    return _decorate(logic, build)


def curry3_2(is_other: Callable[[Any], bool], is_optional: Callable[[Any], bool],
             logic: Callable = None, *, validate: Optional[Callable[..., None]] = None):
    """Wrap a ``(source, other, optional=None)`` logic function.

    ``op(source, other[, optional])`` runs directly, while ``op(other[, optional])``
    waits for the source. ``is_optional`` recognises the optional argument
    (or ``None``). ``is_other`` checks the second source eagerly; a value it
    rejects raises :class:`NotASequenceError`.
    """
    def check(other, *rest, **options):
        if not is_other(other):
            raise NotASequenceError(other)
        if validate is not None:
            validate(other, *rest, **options)

    def build(fn):
        return Operator(fn, 2, second_is_optional(is_optional), check)
    return _decorate(logic, build)
