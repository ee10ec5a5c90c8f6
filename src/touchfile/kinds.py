"""The closed set of file kinds ``tf`` knows how to generate."""

from __future__ import annotations

from enum import Enum
from typing import Iterator

from .errors import UnsupportedFiletypeError

__all__ = ["FileFamily", "FileKind", "resolve_kind"]


class FileFamily(str, Enum):
    """Groups shown by ``tf --supported-filetypes``."""

    SOFTWARE = "Software"
    HDL = "HDL"


class FileKind(str, Enum):
    """Supported output file kinds, valued by their extension."""

    C = "c"
    H = "h"
    PYTHON = "py"
    CPP = "cpp"
    HPP = "hpp"
    BASH = "bash"
    SV_MODULE = "sv"
    SV_PACKAGE = "svh"

    @property
    def extension(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def family(self) -> FileFamily:
        if self in (FileKind.SV_MODULE, FileKind.SV_PACKAGE):
            return FileFamily.HDL
        return FileFamily.SOFTWARE

    @property
    def executable(self) -> bool:
        """Whether the generated file must be marked executable."""

        return self is FileKind.BASH

    @classmethod
    def in_family(cls, family: FileFamily) -> Iterator["FileKind"]:
        return (kind for kind in cls if kind.family is family)


_LABELS = {
    FileKind.C: "C",
    FileKind.H: "H",
    FileKind.PYTHON: "Python",
    FileKind.CPP: "CPP",
    FileKind.HPP: "HPP",
    FileKind.BASH: "Bash",
    FileKind.SV_MODULE: "SystemVerilog (module)",
    FileKind.SV_PACKAGE: "SystemVerilog (package)",
}


def resolve_kind(extension: str) -> FileKind:
    """Return the :class:`FileKind` for ``extension``.

    The lookup is an exact, case-sensitive match; ``"C"`` or ``".c"`` are
    rejected with :class:`UnsupportedFiletypeError`.
    """

    try:
        return FileKind(extension)
    except ValueError as exc:
        raise UnsupportedFiletypeError(extension) from exc
