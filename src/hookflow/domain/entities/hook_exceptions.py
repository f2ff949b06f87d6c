"""Exceptions raised by the hook system.

Contains the error types surfaced by hook registration and dispatch:
- HookValidationError: A hook definition failed its static validation
- HookArgumentError: Call-time arguments do not satisfy a hook's parameters
- HookNotFoundError: Nothing is registered under a dispatched identifier

Errors raised from inside a hook's own execute()/apply() body are never
wrapped; they reach the caller of the dispatch unchanged.
"""

from typing import Optional


class HookError(Exception):
    """Base class for hook system errors.

    Args:
        message: Human-readable error message.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class HookValidationError(HookError, ValueError):
    """Raised when a hook definition is malformed.

    Args:
        issues: Every validation issue found on the definition. The
                exception message is the issues joined by newlines.

    Example:
        try:
            registry.register(hook)
        except HookValidationError as e:
            for issue in e.issues:
                print(issue)
    """

    def __init__(self, issues: list[str]) -> None:
        self.issues = list(issues)
        super().__init__("\n".join(self.issues))


class HookArgumentError(HookError, ValueError):
    """Raised when dispatch arguments are missing, too few, or mistyped.

    Args:
        message: Human-readable error message.
        identifier: Identifier of the hook being executed.
    """

    def __init__(self, message: str, identifier: Optional[str] = None) -> None:
        self.identifier = identifier
        super().__init__(message)


class HookNotFoundError(HookError, LookupError):
    """Raised when dispatching an identifier with no registered hooks."""

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(f"Hook '{identifier}' not found")
