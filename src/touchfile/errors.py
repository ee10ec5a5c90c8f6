"""Custom exception types raised while generating files."""

from __future__ import annotations

__all__ = [
    "FileCreationError",
    "InvalidInputError",
    "MissingAuthorError",
    "MissingExtensionError",
    "MissingFilenameError",
    "TouchfileError",
    "UnsupportedFiletypeError",
]


class TouchfileError(RuntimeError):
    """Base class for every error that aborts an invocation."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class InvalidInputError(TouchfileError):
    """Raised when the requested name cannot be split into base and extension."""


class MissingFilenameError(InvalidInputError):
    """Raised for an empty name."""

    def __init__(self) -> None:
        super().__init__("Input filename is expected.")


class MissingExtensionError(InvalidInputError):
    """Raised for a name without any ``.`` separator."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__("Filename with file extension is expected.")


class UnsupportedFiletypeError(TouchfileError):
    """Raised when an extension does not map to a known file kind."""

    def __init__(self, extension: str) -> None:
        self.extension = extension
        super().__init__(
            f"Filetype '.{extension}' is not supported. "
            "Run 'tf --supported-filetypes' for available filetypes."
        )


class FileCreationError(TouchfileError):
    """Raised when writing the file or changing its mode fails."""

    def __init__(self, path: object, cause: OSError | UnicodeError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(str(cause))


class MissingAuthorError(TouchfileError):
    """Raised when the author cannot be resolved from the environment."""

    def __init__(self, variable: str = "LOGNAME") -> None:
        self.variable = variable
        super().__init__(f"${variable} isn't defined?")
