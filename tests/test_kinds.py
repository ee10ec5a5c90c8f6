from __future__ import annotations

import pytest

from touchfile.errors import UnsupportedFiletypeError
from touchfile.kinds import FileFamily, FileKind, resolve_kind


@pytest.mark.parametrize(
    "extension, expected",
    [
        ("c", FileKind.C),
        ("h", FileKind.H),
        ("py", FileKind.PYTHON),
        ("cpp", FileKind.CPP),
        ("hpp", FileKind.HPP),
        ("bash", FileKind.BASH),
        ("sv", FileKind.SV_MODULE),
        ("svh", FileKind.SV_PACKAGE),
    ],
)
def test_resolve_kind(extension, expected):
    kind = resolve_kind(extension)
    assert kind is expected
    assert kind.extension == extension


@pytest.mark.parametrize("extension", ["xyz", "C", "PY", "sh", "", ".c"])
def test_resolve_kind_rejects_unknown_extensions(extension):
    with pytest.raises(UnsupportedFiletypeError) as excinfo:
        resolve_kind(extension)
    message = str(excinfo.value)
    assert f"'.{extension}'" in message
    assert "--supported-filetypes" in message


def test_only_bash_is_executable():
    assert [kind for kind in FileKind if kind.executable] == [FileKind.BASH]


def test_families_partition_kinds():
    software = list(FileKind.in_family(FileFamily.SOFTWARE))
    hdl = list(FileKind.in_family(FileFamily.HDL))
    assert hdl == [FileKind.SV_MODULE, FileKind.SV_PACKAGE]
    assert len(software) + len(hdl) == len(FileKind)
