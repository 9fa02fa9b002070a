"""Module defining custom exceptions for the please application."""

from __future__ import annotations

from typing import Any, Iterable, Self

# Exit Codes
EXIT_SUCCESS = 0
EXIT_UNSUPPORTED = 1
EXIT_USER_ERROR = 1
EXIT_SYSTEM_ERROR = 2


class PleaseError(Exception):
    """Base exception class with context propagation.

    All exceptions in please should inherit from this class.
    Context is a dictionary that accumulates relevant information
    as the exception propagates up the call stack.

    Example:
        raise PleaseError("An error occurred", context={"vendor": "Apt"})

        # Or with context propagation
        try:
            ...
        except PleaseError as e:
            raise e.with_context(action="install")
    """
    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        self.message = message
        self.context = context or {}
        super().__init__(message)

    def with_context(self, **new_context: Any) -> Self:
        """Returns the exception with updated context.

        Args:
            **new_context: Additional context to add to the exception.

        Returns:
            The same exception instance with merged context.
        """
        self.context.update(new_context)
        return self

    def __str__(self) -> str:
        """String representation of the exception including context."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} [{context_str}]"
        return self.message


class UserError(PleaseError):
    """Errors caused by user actions or inputs.

    These errors indicate that the user has made a mistake or provided
    invalid input (command line or configuration file).

    CLI should display helpful messages to guide the user.
    """
    pass


class SystemError(PleaseError):
    """Errors due to system-level issues.

    These errors indicate problems with the host environment, such as
    no package manager being installed or the shell being unavailable.
    """
    pass


## Specific Exceptions ##

class UnknownVendorError(UserError):
    """A vendor name did not match any vendor known on this platform."""
    def __init__(
        self,
        message: str | None = None,
        name: str | None = None,
        source: str | None = None,
        context: dict[str, Any] | None = None
    ) -> None:
        """Initialise UnknownVendorError with detailed context.

        Args:
            message: Optional custom error message.
            name: The vendor name as given by the user.
            source: Where the name came from ("cli" or "config").
            context: Additional context information.
        """
        ctx = context or {}
        if name is not None:
            ctx["name"] = name
        if source:
            ctx["source"] = source

        if message is None:
            message = f"invalid vendor {name!r}"

        super().__init__(message, context=ctx)


class ConfigError(UserError):
    """A configuration file parsed but holds an invalid value."""
    def __init__(
        self,
        message: str | None = None,
        path: str | None = None,
        key: str | None = None,
        context: dict[str, Any] | None = None
    ) -> None:
        ctx = context or {}
        if path:
            ctx["path"] = path
        if key:
            ctx["key"] = key

        if message is None:
            message = f"invalid configuration value for {key or 'unknown key'}"

        super().__init__(message, context=ctx)


class NoVendorError(SystemError):
    """None of the candidate package managers is installed.

    The message lists every candidate considered, so the user can tell
    which executables were looked up.
    """
    def __init__(
        self,
        candidates: Iterable[str] = (),
        platform: str | None = None,
        context: dict[str, Any] | None = None
    ) -> None:
        names = list(candidates)
        ctx = context or {}
        ctx["candidates"] = ", ".join(names)
        if platform:
            ctx["platform"] = platform

        message = f"no vendor installed, candidates are: {', '.join(names)}"

        super().__init__(message, context=ctx)


class SpawnError(SystemError):
    """The shell or the elevation tool could not be launched.

    Typically indicates:
        - Missing `sh`, `cmd` or `sudo` binary
        - Permission denied on the interpreter
    """
    def __init__(
        self,
        message: str | None = None,
        program: str | None = None,
        command: str | None = None,
        error: str | None = None,
        context: dict[str, Any] | None = None
    ) -> None:
        """Initialise SpawnError with detailed context.

        Args:
            message: Optional custom error message.
            program: The program that failed to launch.
            command: The formatted vendor command.
            error: The underlying OS error message.
            context: Additional context information.
        """
        ctx = context or {}
        if program:
            ctx["program"] = program
        if command:
            ctx["command"] = command
        if error:
            ctx["error"] = error

        if message is None:
            message = f"Could not launch {program or 'command interpreter'}"

        super().__init__(message, context=ctx)


class CatalogError(SystemError):
    """A vendor has no catalog entry.

    This never happens with a consistent catalog and points to a bug,
    not to anything the user can fix.
    """
    def __init__(self, vendor: str, context: dict[str, Any] | None = None) -> None:
        ctx = context or {}
        ctx["vendor"] = vendor
        super().__init__(f"unreachable code reached for vendor {vendor}", context=ctx)


# CLI Error Message Templates

ERROR_TEMPLATES = {
    UnknownVendorError: (
        "❌ Unknown vendor: {name}\n"
        "   Suggestion: Try 'please list-vendors --all' to see valid names"
    ),
    ConfigError: (
        "❌ Configuration error: {message}\n"
        "   File: {path}"
    ),
    NoVendorError: (
        "⚠️ No package manager found on PATH\n"
        "   Candidates: {candidates}\n"
        "   Fix: Install one of them or pin one with '--vendor'"
    ),
    SpawnError: (
        "⚠️ Could not run command: {command}\n"
        "   Program: {program}\n"
        "   Error: {error}"
    ),
    UserError: (
        "❌ {message}"
    ),
    SystemError: (
        "⚠️ System error: {message}\n"
        "   Please check your system configuration and try again"
    ),
    PleaseError: (
        "❌ {message}"
    ),
}


def format_error_message(error: PleaseError) -> str:
    """Formats an error message for CLI display based on the error type.

    Args:
        error: The PleaseError instance to format.

    Returns:
        A formatted string message for CLI display.
    """
    template = ERROR_TEMPLATES.get(type(error), ERROR_TEMPLATES[PleaseError])
    try:
        return template.format(message=error.message, **getattr(error, "context", {}))
    except KeyError:
        return f"❌ {error.message}"
