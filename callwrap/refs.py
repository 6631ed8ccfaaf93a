"""
Reference slots - mutable output parameters.

Python passes every argument as a shared object reference, so a target can
only report through an argument if that argument is mutable. Ref is the
explicit slot for that: the target writes ``slot.value`` (or calls
``slot.set()``) and the caller reads it back after the call.

A target declares an output parameter by annotating it with ``Ref`` or
``Ref[T]``:

    def probe(res: Ref[bool]) -> bool:
        return res.set(True)

reference_parameters() discovers those declarations once, when a target is
wrapped. The wrapper forwards the caller's slot object itself, so writes made
by the target are observed by the caller.
"""

import inspect
import re
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar, get_origin


T = TypeVar("T")

# String annotations come from modules using postponed evaluation.
_REF_ANNOTATION = re.compile(r"^(?:[\w.]+\.)?Ref(?:\[.*\])?$")


@dataclass
class Ref(Generic[T]):
    """
    A mutable slot a callee can write to.

    Attributes:
        value: Current content of the slot
    """
    value: Optional[T] = None

    def get(self) -> Optional[T]:
        return self.value

    def set(self, value: T) -> T:
        """Store value and return it, so targets can ``return slot.set(x)``."""
        self.value = value
        return value


def discover_signature(target: Any) -> Optional[inspect.Signature]:
    """
    Get the signature of a callable, if it has one.

    Some builtins and extension types do not expose a signature; None is
    returned for those rather than an error.
    """
    try:
        return inspect.signature(target)
    except (TypeError, ValueError):
        return None


def is_ref_annotation(annotation: Any) -> bool:
    """Check whether a parameter annotation declares a reference slot."""
    if annotation is inspect.Parameter.empty:
        return False
    if annotation is Ref or get_origin(annotation) is Ref:
        return True
    if isinstance(annotation, str):
        return bool(_REF_ANNOTATION.match(annotation.strip()))
    return False


def reference_parameters(target: Any, signature: Optional[inspect.Signature] = None) -> tuple[str, ...]:
    """
    Names of the parameters a target declares as reference slots.

    Args:
        target: Callable to inspect
        signature: Already discovered signature, to avoid a second lookup

    Returns:
        Parameter names in declaration order; empty when the target has no
        signature or no Ref parameters
    """
    if signature is None:
        signature = discover_signature(target)
    if signature is None:
        return ()
    return tuple(
        name
        for name, param in signature.parameters.items()
        if is_ref_annotation(param.annotation)
    )
