"""
Canonical names for callables.

describe() turns any Python callable into a stable, human-readable name used
for logging and diagnostics. Names follow the "Type::method" convention for
anything owned by a class and the bare name for free functions:

    add_one              -> "add_one"
    Math.square          -> "Math::square"
    obj.method           -> "Helper::method"
    len                  -> "len"
    [].append            -> "list::append"
    invokable object     -> "Helper::__call__"
    class object         -> "Helper::__init__"
    partial(add_one, 1)  -> "partial(add_one)"
    lambda x: x          -> "{anonymous}tests.test_naming:12"

Names are descriptive only. They are never used as a lookup key.
"""

import functools
import inspect
import types
from typing import Any

from callwrap.errors import InvalidCallable


SEPARATOR = "::"

# Braces never appear in an identifier, so anonymous labels cannot collide
# with function or method names.
ANONYMOUS_PREFIX = "{anonymous}"

_LAMBDA_NAME = "<lambda>"


def describe(candidate: Any) -> str:
    """
    Return the canonical name of a callable.

    Args:
        candidate: Any value that may be invoked

    Returns:
        Non-empty canonical name

    Raises:
        InvalidCallable: If candidate cannot be invoked
    """
    if not callable(candidate):
        raise InvalidCallable(
            f"Not a valid callable: {type(candidate).__name__} value",
            candidate=candidate,
        )

    # Lazy import: wrapper imports this module.
    from callwrap.wrapper import WrappedCallable

    if isinstance(candidate, WrappedCallable):
        return candidate.display_name

    if isinstance(candidate, type):
        return _join(_type_name(candidate), "__init__")

    if isinstance(candidate, functools.partial):
        return f"partial({describe(candidate.func)})"

    if isinstance(candidate, staticmethod):
        return describe(candidate.__func__)

    if isinstance(candidate, types.MethodType):
        return _describe_method(candidate)

    if isinstance(candidate, types.FunctionType):
        return _describe_function(candidate)

    # Method-wrappers are not routines to inspect before 3.11
    if inspect.isroutine(candidate) or isinstance(candidate, types.MethodWrapperType):
        return _describe_builtin(candidate)

    return _join(_type_name(type(candidate)), "__call__")


def is_anonymous(name: str) -> bool:
    """Check whether a canonical name is a generated anonymous label."""
    return name.startswith(ANONYMOUS_PREFIX)


def _join(owner: str, name: str) -> str:
    return f"{owner}{SEPARATOR}{name}"


def _strip_locals(qualname: str) -> str:
    """Drop the enclosing function scopes from a qualified name."""
    return qualname.rsplit("<locals>.", 1)[-1]


def _type_name(cls: type) -> str:
    return _strip_locals(getattr(cls, "__qualname__", cls.__name__))


def _owner_type(owner: Any) -> type:
    return owner if isinstance(owner, type) else type(owner)


def _anonymous_label(func: Any) -> str:
    module = getattr(func, "__module__", None) or "?"
    code = getattr(func, "__code__", None)
    line = code.co_firstlineno if code is not None else 0
    return f"{ANONYMOUS_PREFIX}{module}:{line}"


def _split_qualname(qualname: str) -> str:
    parts = _strip_locals(qualname).split(".")
    if len(parts) == 1:
        return parts[0]
    return _join(".".join(parts[:-1]), parts[-1])


def _describe_function(func: types.FunctionType) -> str:
    if func.__name__ == _LAMBDA_NAME:
        return _anonymous_label(func)
    return _split_qualname(func.__qualname__)


def _describe_method(method: types.MethodType) -> str:
    """Bound methods and classmethods are named after the instance's type."""
    func = method.__func__
    # MethodType also binds arbitrary callable objects, which may lack a name
    name = getattr(func, "__name__", None) or "__call__"
    if name == _LAMBDA_NAME:
        return _anonymous_label(func)
    return _join(_type_name(_owner_type(method.__self__)), name)


def _describe_builtin(routine: Any) -> str:
    owner = getattr(routine, "__self__", None)
    if owner is not None and not isinstance(owner, types.ModuleType):
        return _join(_type_name(_owner_type(owner)), routine.__name__)
    qualname = getattr(routine, "__qualname__", None) or routine.__name__
    return _split_qualname(qualname)
