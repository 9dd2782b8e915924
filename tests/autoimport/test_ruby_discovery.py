"""Integration tests running the bundled helper under a real Ruby.

Skipped when no ``ruby`` executable is on PATH.
"""

from __future__ import annotations

import shutil
from pathlib import Path

import pytest

from rbglue.autoimport.constants import ConstantSpec, discover_constants
from rbglue.autoimport.generator import generate_glue
from rbglue.core.errors import DiscoveryError
from rbglue.core.settings import GlueSettings

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(shutil.which("ruby") is None, reason="ruby not installed"),
]


@pytest.fixture
def ruby_settings() -> GlueSettings:
    return GlueSettings(timeout_seconds=60)


@pytest.fixture
def foo_library(tmp_path: Path) -> Path:
    """``foo`` defines module Foo and requires two class files."""
    base = tmp_path / "lib"
    (base / "foo").mkdir(parents=True)
    (base / "foo.rb").write_text("require 'foo/baz'\nrequire 'foo/bar'\n\nmodule Foo\nend\n")
    (base / "foo" / "bar.rb").write_text("module Foo\n  class Bar\n  end\nend\n")
    (base / "foo" / "baz.rb").write_text("module Foo\n  class Baz\n  end\nend\n")
    return base


class TestDiscoverConstants:
    def test_reports_new_constants_sorted(self, foo_library, ruby_settings):
        constants = discover_constants(str(foo_library), "foo", ruby_settings)
        assert constants == [
            ConstantSpec("Foo", "module"),
            ConstantSpec("Foo::Bar", "class"),
            ConstantSpec("Foo::Baz", "class"),
        ]

    def test_package_without_constants(self, tmp_path, ruby_settings):
        base = tmp_path / "lib"
        base.mkdir()
        (base / "quiet.rb").write_text("QUIET_VALUE = 1\n")
        assert discover_constants(str(base), "quiet", ruby_settings) == []

    def test_load_error_raises(self, tmp_path, ruby_settings):
        (tmp_path / "lib").mkdir()
        with pytest.raises(DiscoveryError) as exc_info:
            discover_constants(str(tmp_path / "lib"), "missing", ruby_settings)
        assert exc_info.value.returncode != 0
        assert "missing" in exc_info.value.stderr


class TestGenerateGlue:
    def test_writes_glue_for_library(self, foo_library, ruby_settings, tmp_path):
        out = tmp_path / "out" / "foo.rs"
        sources = ",".join(
            str(foo_library / name) for name in ("foo.rb", "foo/bar.rb", "foo/baz.rb")
        )

        result = generate_glue(str(foo_library), "foo", out, sources, settings=ruby_settings)

        text = out.read_text()
        assert result.sources == ["foo", "foo/bar", "foo/baz"]
        assert "interp.def_module::<Foo>(spec)?;" in text
        assert "interp.def_class::<FooBar>(spec)?;" in text
        assert "interp.def_class::<FooBaz>(spec)?;" in text
        assert "impl File for FooPackage {" in text
        assert text.count("interp.def_rb_source_file(") == 3
        assert '"foo/bar.rb",' in text
