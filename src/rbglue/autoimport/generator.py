"""Auto-import glue generation.

Stability: stable
Since: 0.1.0
Tags: autoimport, generator, codegen

The generation run is strictly linear::

    validate_arguments ─► parse_sources ─► discover_constants ─► render ─► write

Arguments are checked before anything else happens, and the output file is
written once, after the helper subprocess has finished and the template
has rendered. A failure at any step leaves the output path untouched.

Usage::

    from rbglue.autoimport import generate_glue

    result = generate_glue(
        "/vendor/ruby/lib",
        "ostruct",
        "src/extn/stdlib/ostruct/mruby.rs",
        "/vendor/ruby/lib/ostruct.rb",
    )
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from rbglue.autoimport.constants import ConstantSpec, discover_constants
from rbglue.autoimport.renderer import GlueRenderer
from rbglue.autoimport.sources import parse_sources
from rbglue.core.errors import MissingArgumentError
from rbglue.core.logging import LogContext, get_logger
from rbglue.core.settings import GlueSettings

logger = get_logger(__name__)

# Checked in order; the first missing argument wins.
_REQUIRED_ARGUMENTS = (
    ("base", "must provide a library base path"),
    ("package", "must provide a library to import"),
    ("out_file", "must provide an output directory"),
)


@dataclass
class GlueResult:
    """Outcome of one generation run."""

    out_file: Path
    package: str
    sources: list[str] = field(default_factory=list)
    constants: list[ConstantSpec] = field(default_factory=list)
    size: int = 0


def validate_arguments(
    base: str | None,
    package: str | None,
    out_file: str | Path | None,
) -> None:
    """Fail fast when a required argument is absent.

    Empty strings count as absent.

    Raises:
        MissingArgumentError: Naming the first missing argument.
    """
    values = {"base": base, "package": package, "out_file": out_file}
    for name, message in _REQUIRED_ARGUMENTS:
        value = values[name]
        if value is None or str(value) == "":
            raise MissingArgumentError(message, argument=name)


class GlueGenerator:
    """Runs discovery and rendering for one package at a time.

    Manifesto:
        Glue for vendored libraries should be regenerated, not hand-edited.
        The generator asks the library itself which constants it defines,
        so the glue never drifts from the sources it loads.

    Guardrails:
        - Do NOT write partial output
          ✅ Render to a string first, write once at the end
        - Do NOT guess constants from file names
          ✅ Ask the interpreter via the helper script
    """

    def __init__(
        self,
        settings: GlueSettings | None = None,
        renderer: GlueRenderer | None = None,
    ):
        self.settings = settings or GlueSettings()
        self.renderer = renderer or GlueRenderer(
            template_dir=self.settings.template_dir,
            template_name=self.settings.template_name,
        )

    def generate(
        self,
        base: str | None,
        package: str | None,
        out_file: str | Path | None,
        sources: str | Iterable[str] | None = None,
    ) -> GlueResult:
        """Generate glue for ``package`` and write it to ``out_file``.

        Args:
            base: Library base path.
            package: Library to import.
            out_file: Path of the generated source file.
            sources: Comma-separated string or iterable of source paths.

        Returns:
            GlueResult describing what was written.

        Raises:
            MissingArgumentError: If base, package or out_file is missing.
            DiscoveryError: If the helper subprocess fails.
            RenderError: If the template fails.
        """
        validate_arguments(base, package, out_file)
        base, package = str(base), str(package)

        out_path = Path(str(out_file))
        with LogContext(package=package):
            normalized = parse_sources(sources, base, self.settings.source_extension)
            logger.debug("sources_normalized", count=len(normalized), sources=normalized)

            constants = discover_constants(base, package, self.settings)
            output = self.renderer.render(package, normalized, constants)

            out_path.parent.mkdir(parents=True, exist_ok=True)
            out_path.write_text(output, encoding="utf-8")
            size = len(output.encode("utf-8"))
            logger.info("glue_written", path=str(out_path), bytes=size)

        return GlueResult(
            out_file=out_path,
            package=package,
            sources=normalized,
            constants=constants,
            size=size,
        )


def generate_glue(
    base: str | None,
    package: str | None,
    out_file: str | Path | None,
    sources: str | Iterable[str] | None = None,
    *,
    settings: GlueSettings | None = None,
) -> GlueResult:
    """Generate glue with a one-off ``GlueGenerator``."""
    return GlueGenerator(settings=settings).generate(base, package, out_file, sources)


__all__ = ["GlueResult", "GlueGenerator", "validate_arguments", "generate_glue"]
