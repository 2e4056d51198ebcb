import io

import pytest

from forgeversion.common.actions import ActionsCore, escape_data
from forgeversion.model import InputError


def _core(environ):
    return ActionsCore(environ=environ, stream=io.StringIO())


def test_get_input_strips_whitespace():
    core = _core({"INPUT_MINECRAFT-VERSION": " 1.20.1\n"})
    assert core.get_input("minecraft-version") == "1.20.1"


def test_get_input_required():
    with pytest.raises(InputError):
        _core({}).get_input("minecraft-version", required=True)


def test_get_input_spaces_become_underscores():
    assert _core({"INPUT_MY_INPUT": "x"}).get_input("my input") == "x"


@pytest.mark.parametrize("value,expected", [("true", True), ("TRUE", True), ("False", False)])
def test_get_boolean_input(value, expected):
    assert _core({"INPUT_LATEST": value}).get_boolean_input("latest", not expected) is expected


def test_get_boolean_input_default():
    assert _core({}).get_boolean_input("latest", True) is True
    assert _core({}).get_boolean_input("latest", False) is False


def test_get_boolean_input_rejects_other_values():
    with pytest.raises(InputError):
        _core({"INPUT_LATEST": "1"}).get_boolean_input("latest", True)


def test_debug_escapes_newlines():
    core = _core({})
    core.debug('[\n  "20.1.50"\n]')
    assert core.stream.getvalue() == '::debug::[%0A  "20.1.50"%0A]\n'


def test_escape_data():
    assert escape_data("100%\r\n") == "100%25%0D%0A"


def test_set_output_appends_to_github_output(tmp_path):
    output = tmp_path / "output"
    output.write_text("other<<EOF\nx\nEOF\n", encoding="utf-8")
    core = _core({"GITHUB_OUTPUT": str(output)})
    core.set_output("version", "47.2.0")
    lines = output.read_text(encoding="utf-8").splitlines()
    assert lines[:3] == ["other<<EOF", "x", "EOF"]
    assert lines[3].startswith("version<<ghadelimiter_")
    assert lines[4] == "47.2.0"
    assert lines[5] == lines[3][len("version<<"):]


def test_set_output_without_output_file():
    core = _core({})
    core.set_output("version", "47.2.0")
    assert core.stream.getvalue() == "::set-output name=version::47.2.0\n"


def test_set_failed():
    core = _core({})
    core.set_failed("boom")
    assert core.exit_code == 1
    assert core.stream.getvalue() == "::error::boom\n"
