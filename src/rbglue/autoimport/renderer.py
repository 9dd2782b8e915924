"""
Glue renderer.

Substitutes the package name, normalized sources and discovered constants
into a Jinja2 template and returns the generated source text.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
    TemplateNotFound,
    select_autoescape,
)

from rbglue.autoimport.constants import ConstantSpec
from rbglue.core.errors import RenderError
from rbglue.core.settings import DEFAULT_TEMPLATE, TEMPLATES_DIR

_WORD_RE = re.compile(r"[A-Za-z0-9]+")


def rust_ident(value: str) -> str:
    """Camel-case a package or constant path into a Rust type name.

    ``net/http`` -> ``NetHttp``, ``JSON::Ext`` -> ``JSONExt``. A leading
    digit is prefixed with ``_``.
    """
    words = _WORD_RE.findall(value)
    ident = "".join(word[:1].upper() + word[1:] for word in words)
    if not ident:
        return "_"
    if ident[0].isdigit():
        ident = f"_{ident}"
    return ident


def screaming_snake(value: str) -> str:
    """``OpenStruct`` -> ``OPEN_STRUCT``, ``net/http`` -> ``NET_HTTP``."""
    spaced = re.sub(r"(?<=[a-z0-9])(?=[A-Z])", "_", value)
    return "_".join(_WORD_RE.findall(spaced)).upper()


def unique_constants(constants: Sequence[ConstantSpec]) -> list[ConstantSpec]:
    """Drop repeated constant paths, keeping the first occurrence."""
    seen: set[str] = set()
    unique = []
    for constant in constants:
        if constant.name not in seen:
            seen.add(constant.name)
            unique.append(constant)
    return unique


def struct_names(constants: Sequence[ConstantSpec]) -> dict[str, str]:
    """Unit struct name per constant path, unique across the module.

    ``Foo::Bar`` and ``FooBar`` both join to ``FooBar``; the later one
    becomes ``FooBar2``.
    """
    names: dict[str, str] = {}
    taken: set[str] = set()
    for constant in unique_constants(constants):
        base = constant.rust_name
        name, n = base, 2
        while name in taken:
            name = f"{base}{n}"
            n += 1
        names[constant.name] = name
        taken.add(name)
    return names


def loader_name(package: str, constants: Sequence[ConstantSpec]) -> str:
    """Type name for the package loader, distinct from every constant struct."""
    name = rust_ident(package)
    taken = set(struct_names(constants).values())
    while name in taken:
        name = f"{name}Package"
    return name


class GlueRenderer:
    """Render glue source from a template.

    Templates are loaded from ``template_dir`` (the bundled ``templates``
    directory by default). Undefined template variables are errors rather
    than empty strings.
    """

    def __init__(
        self,
        template_dir: Path | None = None,
        template_name: str = DEFAULT_TEMPLATE,
    ):
        self.template_dir = Path(template_dir) if template_dir is not None else TEMPLATES_DIR
        self.template_name = template_name

        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        self.env.filters["rust_ident"] = rust_ident
        self.env.filters["screaming_snake"] = screaming_snake

    def render(
        self,
        package: str,
        sources: Sequence[str],
        constants: Sequence[ConstantSpec],
        **extra: Any,
    ) -> str:
        """Render the glue template.

        Args:
            package: Library name being imported.
            sources: Normalized module identifiers.
            constants: Discovered constants.
            **extra: Additional template variables.

        Returns:
            Rendered text ending with exactly one newline.

        Raises:
            RenderError: If the template is missing or fails to render.
        """
        constants = unique_constants(constants)
        loader = loader_name(package, constants)
        try:
            template = self.env.get_template(self.template_name)
            output = template.render(
                package=package,
                loader=loader,
                sources=list(sources),
                constants=constants,
                structs=struct_names(constants),
                **extra,
            )
        except TemplateNotFound as exc:
            raise RenderError(
                f"template not found: {self.template_name}", cause=exc
            ).with_context(path=str(self.template_dir / self.template_name)) from exc
        except TemplateError as exc:
            raise RenderError(
                f"failed to render {self.template_name}: {exc}", cause=exc
            ).with_context(package=package, path=str(self.template_dir / self.template_name)) from exc

        return output.rstrip("\n") + "\n"
