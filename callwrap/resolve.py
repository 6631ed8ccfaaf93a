"""
Resolve textual references to callables.

Accepted forms:
    "package.module:function"
    "package.module:Class.method"
    "package.module.function"      (last dotted segment is the attribute)

Anything that cannot be imported, looked up, or invoked is reported as
InvalidCallable, the same error wrap() raises for non-callable values.
"""

import importlib
import logging
from typing import Any, Callable

from callwrap.errors import InvalidCallable


logger = logging.getLogger(__name__)


def split_reference(reference: str) -> tuple[str, str]:
    """
    Split a reference into module path and attribute path.

    Raises:
        InvalidCallable: If the reference is empty or has no attribute part
    """
    reference = reference.strip()
    if ":" in reference:
        module_name, _, attr_path = reference.partition(":")
    else:
        module_name, _, attr_path = reference.rpartition(".")

    if not module_name or not attr_path:
        raise InvalidCallable(
            f"Invalid callable reference: '{reference}'. "
            "Expected 'module:attribute' or 'module.attribute'",
            candidate=reference,
        )
    return module_name, attr_path


def resolve(reference: str) -> Callable[..., Any]:
    """
    Import the object a reference names and check that it is callable.

    Args:
        reference: Textual reference, e.g. "json:dumps" or "pkg.mod:Math.square"

    Returns:
        The referenced callable

    Raises:
        InvalidCallable: If the module or attribute is missing, or the
            attribute is not callable
    """
    module_name, attr_path = split_reference(reference)

    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise InvalidCallable(
            f"Cannot import module '{module_name}' for '{reference}': {e}",
            candidate=reference,
        ) from e

    for part in attr_path.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as e:
            raise InvalidCallable(
                f"'{reference}' does not exist: no attribute '{part}'",
                candidate=reference,
            ) from e

    if not callable(target):
        raise InvalidCallable(
            f"'{reference}' is not callable ({type(target).__name__})",
            candidate=reference,
        )

    logger.debug(f"Resolved {reference} to {target!r}")
    return target
