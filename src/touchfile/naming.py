"""Filename splitting and guard token helpers."""

from __future__ import annotations

from .errors import MissingExtensionError, MissingFilenameError

__all__ = ["header_guard", "package_guard", "split_name", "validate_input"]


def validate_input(name: str) -> list[str]:
    """Split ``name`` on ``.`` and reject names without an extension.

    Raises
    ------
    MissingFilenameError
        When ``name`` is empty.
    MissingExtensionError
        When ``name`` contains no ``.`` at all. A bare name is never given a
        default extension.
    """

    segments = name.split(".")
    if segments == [""]:
        raise MissingFilenameError()
    if len(segments) < 2:
        raise MissingExtensionError(name)
    return segments


def split_name(name: str) -> tuple[str, str]:
    """Return ``(base, extension)`` for ``name``.

    The extension is the text after the final ``.`` and the base is the text
    before the first one, so ``"foo.bar.c"`` yields ``("foo", "c")``.
    """

    segments = validate_input(name)
    return segments[0], segments[-1]


def header_guard(filename: str) -> str:
    """Return the include guard for a C/C++ header named ``filename``.

    Characters that are not valid in a preprocessor identifier are kept as-is.
    """

    return filename.replace(".", "_").upper()


def package_guard(base: str) -> str:
    """Return the macro guard for a SystemVerilog package named ``base``."""

    return base.upper()
