"""
Error classes for callwrap.

Error handling contract:
- InvalidCallable is raised by describe/wrap/resolve when a value cannot be
  invoked. It is never retried: invocability is not transient.
- Errors raised by a wrapped target propagate unchanged through invoke().
- ConfigError covers the configuration file only, never the core.
"""


class CallwrapError(Exception):
    """Base exception for callwrap."""
    pass


class InvalidCallable(CallwrapError, TypeError):
    """
    The given value is not a valid callable.

    Examples:
    - A plain integer or string
    - A data record without a __call__ method
    - A reference naming a module or attribute that does not exist

    Subclasses TypeError so callers that guard against bad argument types
    keep working without importing callwrap.
    """

    def __init__(self, message: str = "Not a valid callable", candidate: object = None):
        super().__init__(message)
        self.candidate = candidate


class ConfigError(CallwrapError):
    """Configuration validation error."""
    pass
