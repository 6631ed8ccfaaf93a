"""
callwrap - Uniform wrappers for Python callables

Wraps functions, methods, invokable objects and builtins behind a single
WrappedCallable interface that can be invoked with an argument list or
natural call syntax and renders a canonical "Type::method" name.
"""

__version__ = "0.1.0"


__all__ = [
    "ANONYMOUS_PREFIX",
    "SEPARATOR",
    "CallwrapError",
    "InvalidCallable",
    "Ref",
    "WrappedCallable",
    "describe",
    "reference_parameters",
    "resolve",
    "wrap",
]

from .errors import CallwrapError, InvalidCallable
from .naming import ANONYMOUS_PREFIX, SEPARATOR, describe
from .refs import Ref, reference_parameters
from .resolve import resolve
from .wrapper import WrappedCallable, wrap
