"""Unit tests for StageResult, the output schema registry and validate_output."""

import pytest
from pydantic import BaseModel

from mdlinks.api._output_schemas import get_output_schema, register_output_schema
from mdlinks.api._output_schemas import _registry
from mdlinks.api._output_schemas.link import LinkCheckOutput
from mdlinks.api.link.cmd_check import cmd_check
from mdlinks.api.link.cmd_extract import cmd_extract
from mdlinks.api.StageResult import StageResult
from mdlinks.api.validate_output import validate_output


def test_stage_result_defaults():
    def do_work(result_obj):
        yield (1.0, "Complete")

    result = StageResult(announce="Working...", progress_callback=do_work)

    assert result.result == ""
    assert result.output == {}
    assert result.success is False
    assert list(result.progress_callback(result)) == [(1.0, "Complete")]


def test_registered_schemas():
    assert get_output_schema("link", "check") is LinkCheckOutput
    assert get_output_schema("link", "extract") is not None
    assert get_output_schema("config", "show") is not None
    assert get_output_schema("config", "version") is not None
    assert get_output_schema("link", "nope") is None


def test_register_duplicate_schema_raises(monkeypatch):
    monkeypatch.setattr(_registry, "_SCHEMA_REGISTRY", dict(_registry._SCHEMA_REGISTRY))

    class Extra(BaseModel):
        pass

    register_output_schema("link", "extra", Extra)
    with pytest.raises(ValueError, match="already registered"):
        register_output_schema("link", "extra", Extra)


def test_validate_output_fills_defaults():
    output = {"path": "/tmp/a.md", "links": [], "absolute": [], "relative": []}

    validated = validate_output(cmd_extract, output)

    assert validated["errors"] == []
    assert validated["warnings"] == []


def test_validate_output_rejects_bad_structure():
    with pytest.raises(ValueError, match="Output validation failed for link.check"):
        validate_output(cmd_check, {"path": "/tmp"})


def test_validate_output_ignores_unregistered_functions():
    def helper():
        pass

    output = {"anything": 1}
    assert validate_output(helper, output) is output
