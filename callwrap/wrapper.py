"""
WrappedCallable - uniform wrapper around any callable.

wrap() validates a callable, computes its canonical name once, discovers
its signature and reference parameters once, and returns an immutable
WrappedCallable.

Invocation contract:
- invoke(args) and wrapped(*args) forward arguments as-is, in order
- Argument objects keep their identity, so Ref slots and other mutable
  arguments written by the target are visible to the caller
- Errors raised by the target propagate unchanged
"""

import inspect
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Sequence

from callwrap.naming import describe
from callwrap.refs import discover_signature, reference_parameters


logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False, repr=False)
class WrappedCallable:
    """
    An immutable, invokable wrapper with a human-readable name.

    Only the target is passed in; the name, signature and reference
    parameters are all derived from it, so they always agree with it.
    A WrappedCallable target is replaced by its own target.

    Attributes:
        target: The wrapped callable
        display_name: Canonical name computed at construction
        signature: Target signature, or None if the target exposes none
        reference_parameters: Names of parameters declared as Ref slots
    """
    target: Callable[..., Any]
    display_name: str = field(init=False)
    signature: Optional[inspect.Signature] = field(init=False)
    reference_parameters: tuple[str, ...] = field(init=False)

    def __post_init__(self):
        target = self.target
        if isinstance(target, WrappedCallable):
            target = target.target

        # Raises InvalidCallable for values that cannot be invoked
        display_name = describe(target)
        signature = discover_signature(target)

        object.__setattr__(self, "target", target)
        object.__setattr__(self, "display_name", display_name)
        object.__setattr__(self, "signature", signature)
        object.__setattr__(self, "reference_parameters", reference_parameters(target, signature))
        # Lets inspect.signature() see through the wrapper to the target
        object.__setattr__(self, "__signature__", signature)

    def invoke(self, args: Sequence[Any] = (), kwargs: Optional[Mapping[str, Any]] = None) -> Any:
        """
        Call the target with an explicit argument list.

        Args:
            args: Positional arguments, passed in order
            kwargs: Optional keyword arguments

        Returns:
            Whatever the target returns
        """
        if kwargs:
            return self.target(*args, **kwargs)
        return self.target(*args)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.target(*args, **kwargs)

    def to_text(self) -> str:
        return self.display_name

    def __str__(self) -> str:
        return self.display_name

    def __repr__(self) -> str:
        return f"<WrappedCallable {self.display_name}>"


def wrap(candidate: Any) -> WrappedCallable:
    """
    Wrap a callable behind the uniform WrappedCallable interface.

    Wrapping a WrappedCallable wraps its target again instead of nesting
    wrappers.

    Args:
        candidate: Function, method, invokable object, class or builtin

    Returns:
        A new WrappedCallable

    Raises:
        InvalidCallable: If candidate cannot be invoked
    """
    wrapped = WrappedCallable(candidate)

    logger.debug(
        f"Wrapped {wrapped.display_name} "
        f"(signature={wrapped.signature}, "
        f"reference_parameters={list(wrapped.reference_parameters)})",
        extra={"callable_name": wrapped.display_name},
    )
    return wrapped
