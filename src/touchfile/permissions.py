"""Platform adapters for marking generated files executable."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from pathlib import Path

EXECUTABLE_MODE = 0o744


class PermissionSetter(ABC):
    """Capability to mark a file as executable."""

    @abstractmethod
    def mark_executable(self, path: Path) -> None:
        """Make ``path`` executable, raising :class:`OSError` on failure."""


class PosixPermissions(PermissionSetter):
    """Set ``rwxr--r--`` on POSIX file systems."""

    def __init__(self, mode: int = EXECUTABLE_MODE):
        self._mode = mode

    @property
    def mode(self) -> int:
        return self._mode

    def mark_executable(self, path: Path) -> None:
        os.chmod(path, self._mode)


class NoopPermissions(PermissionSetter):
    """Used where the platform has no POSIX mode bits."""

    def mark_executable(self, path: Path) -> None:
        return None


def default_permissions() -> PermissionSetter:
    """Return the adapter suited to the running platform."""

    if os.name == "posix":
        return PosixPermissions()
    return NoopPermissions()


__all__ = [
    "EXECUTABLE_MODE",
    "NoopPermissions",
    "PermissionSetter",
    "PosixPermissions",
    "default_permissions",
]
