"""Tests for rbglue.autoimport.constants — helper subprocess and output parsing.

The interpreter is never started; ``subprocess.run`` is patched.
"""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from rbglue.autoimport.constants import (
    ConstantSpec,
    build_command,
    discover_constants,
    parse_constants,
)
from rbglue.core.errors import DiscoveryError, ErrorCategory
from rbglue.core.settings import DEFAULT_HELPER, GlueSettings

RUN = "rbglue.autoimport.constants.subprocess.run"


class TestConstantSpec:
    def test_rust_name_joins_segments(self):
        assert ConstantSpec("JSON::Ext::Parser", "class").rust_name == "JSONExtParser"

    def test_kind_flags(self):
        assert ConstantSpec("OpenStruct", "class").is_class
        assert ConstantSpec("Shellwords", "module").is_module
        assert ConstantSpec("Mystery").is_module


class TestParseConstants:
    def test_name_and_value(self):
        output = "OpenStruct,class\nShellwords,module\n"
        assert parse_constants(output) == [
            ConstantSpec("OpenStruct", "class"),
            ConstantSpec("Shellwords", "module"),
        ]

    def test_single_field_has_no_value(self):
        assert parse_constants("Foo\n") == [ConstantSpec("Foo", None)]

    def test_extra_fields_ignored(self):
        assert parse_constants("Foo,class,extra") == [ConstantSpec("Foo", "class")]

    def test_blank_lines_and_crlf(self):
        output = "A,class\r\n\r\n\nB,module\r\n"
        assert parse_constants(output) == [ConstantSpec("A", "class"), ConstantSpec("B", "module")]

    def test_empty_output(self):
        assert parse_constants("") == []


class TestBuildCommand:
    def test_default_command(self):
        cmd = build_command("/lib", "ostruct", GlueSettings())
        assert cmd == [
            "ruby",
            "--disable-did_you_mean",
            "--disable-gems",
            str(DEFAULT_HELPER),
            "/lib",
            "ostruct",
        ]

    def test_custom_interpreter(self, tmp_path):
        helper = tmp_path / "consts.rb"
        settings = GlueSettings(interpreter="jruby", interpreter_flags=[], helper_script=helper)
        assert build_command("/lib", "set", settings) == ["jruby", str(helper), "/lib", "set"]


class TestDiscoverConstants:
    def test_returns_parsed_constants(self, settings, make_completed):
        with patch(RUN, return_value=make_completed("OpenStruct,class\n")) as mock_run:
            constants = discover_constants("/lib", "ostruct", settings)

        assert constants == [ConstantSpec("OpenStruct", "class")]
        args, kwargs = mock_run.call_args
        assert args[0][-2:] == ["/lib", "ostruct"]
        assert kwargs["capture_output"] is True
        assert kwargs["check"] is True
        assert kwargs["timeout"] == 5

    def test_no_timeout_by_default(self, make_completed):
        with patch(RUN, return_value=make_completed("")) as mock_run:
            discover_constants("/lib", "ostruct")
        assert mock_run.call_args.kwargs["timeout"] is None

    def test_nonzero_exit(self, settings):
        error = subprocess.CalledProcessError(
            1, ["ruby"], output=b"", stderr=b"cannot load such file -- nope"
        )
        with patch(RUN, side_effect=error):
            with pytest.raises(DiscoveryError) as exc_info:
                discover_constants("/lib", "nope", settings)

        err = exc_info.value
        assert err.category == ErrorCategory.DISCOVERY
        assert err.returncode == 1
        assert "cannot load such file" in err.stderr
        assert err.context.package == "nope"
        assert err.context.command[-1] == "nope"
        assert isinstance(err.__cause__, subprocess.CalledProcessError)

    def test_missing_interpreter(self, settings):
        with patch(RUN, side_effect=FileNotFoundError("ruby")):
            with pytest.raises(DiscoveryError, match="interpreter not found: ruby") as exc_info:
                discover_constants("/lib", "ostruct", settings)
        assert exc_info.value.returncode is None

    def test_timeout(self, settings):
        with patch(RUN, side_effect=subprocess.TimeoutExpired(["ruby"], 5, stderr=b"slow")):
            with pytest.raises(DiscoveryError, match="timed out") as exc_info:
                discover_constants("/lib", "ostruct", settings)
        assert exc_info.value.stderr == "slow"

    def test_undecodable_output_is_replaced(self, settings):
        result = subprocess.CompletedProcess(["ruby"], 0, stdout=b"Caf\xff,class\n", stderr=b"")
        with patch(RUN, return_value=result):
            constants = discover_constants("/lib", "cafe", settings)
        assert constants[0].name == "Caf\ufffd"


class TestBundledHelper:
    def test_helper_ships_with_package(self):
        assert Path(DEFAULT_HELPER).is_file()
        assert "ObjectSpace" in Path(DEFAULT_HELPER).read_text()
