from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from touchfile.config import GeneratorConfig
from touchfile.errors import MissingAuthorError
from touchfile.kinds import FileKind
from touchfile.schema import GenerationRequest, TemplateMetadata


def test_from_environment_reads_logname():
    config = GeneratorConfig.from_environment({"LOGNAME": "bob"}, today=date(2023, 12, 31))
    assert config.author == "bob"
    assert config.today == date(2023, 12, 31)


@pytest.mark.parametrize("environ", [{}, {"LOGNAME": ""}, {"USER": "bob"}])
def test_from_environment_requires_logname(environ):
    with pytest.raises(MissingAuthorError, match="LOGNAME"):
        GeneratorConfig.from_environment(environ)


def test_from_environment_defaults_to_process_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("LOGNAME", "carol")
    config = GeneratorConfig.from_environment()
    assert config.author == "carol"
    assert config.today == date.today()


def test_metadata_uses_request_filename(config: GeneratorConfig):
    request = GenerationRequest(base="demo", kind=FileKind.PYTHON)
    metadata = config.metadata(request)
    assert metadata.file == "demo.py"
    assert metadata.context() == {
        "author": "alice",
        "file": "demo.py",
        "date": "03/07/2024",
        "purpose": "TODO",
        "base": "demo",
    }


def test_request_and_metadata_are_frozen():
    request = GenerationRequest(base="demo", kind=FileKind.C)
    with pytest.raises(ValidationError):
        request.base = "other"

    metadata = TemplateMetadata(author="alice", base="demo", file="demo.c", created=date(2024, 1, 2))
    with pytest.raises(ValidationError):
        metadata.author = "bob"


def test_request_rejects_unknown_kind():
    with pytest.raises(ValidationError):
        GenerationRequest(base="demo", kind="xyz")


def test_metadata_purpose_is_fixed():
    with pytest.raises(ValidationError):
        TemplateMetadata(author="alice", base="demo", file="demo.c", created=date(2024, 1, 2), purpose="x")
    metadata = TemplateMetadata(author="alice", base="demo", file="demo.c", created=date(2024, 1, 2))
    assert metadata.context()["purpose"] == "TODO"


def test_metadata_carries_request_base(config: GeneratorConfig):
    metadata = config.metadata(GenerationRequest(base="top.v2", kind=FileKind.SV_MODULE))
    assert metadata.base == "top.v2"
    assert metadata.file == "top.v2.sv"
