"""Constant discovery via a helper interpreter subprocess.

Stability: stable
Since: 0.1.0
Tags: autoimport, subprocess, discovery

Runs the helper script under the configured interpreter and parses its
output. The helper prints one constant per line as ``Name,kind``::

    OpenStruct,class
    Shellwords,module

The process is awaited to completion and its whole stdout captured before
anything is parsed.

Usage::

    from rbglue.autoimport.constants import discover_constants

    constants = discover_constants("/vendor/ruby/lib", "ostruct", settings)
"""

from __future__ import annotations

import shlex
import subprocess
from dataclasses import dataclass

from rbglue.core.errors import DiscoveryError, ErrorContext
from rbglue.core.logging import get_logger
from rbglue.core.settings import GlueSettings

logger = get_logger(__name__)

CLASS_KIND = "class"
MODULE_KIND = "module"


@dataclass(frozen=True)
class ConstantSpec:
    """One discovered constant.

    Attributes:
        name: Fully qualified constant path (``Foo::Bar``).
        value: Second field of the helper line; the constant kind for the
            bundled helper, ``None`` when the line had a single field.
    """

    name: str
    value: str | None = None

    @property
    def segments(self) -> list[str]:
        return [part for part in self.name.split("::") if part]

    @property
    def rust_name(self) -> str:
        """Identifier used for the generated unit struct."""
        return "".join(self.segments)

    @property
    def is_class(self) -> bool:
        return self.value == CLASS_KIND

    @property
    def is_module(self) -> bool:
        return not self.is_class


def parse_constants(output: str) -> list[ConstantSpec]:
    """Parse helper output into constants.

    Each non-blank line is split on commas; the first field is the name and
    the second, if present, the value. Extra fields are ignored.
    """
    constants: list[ConstantSpec] = []
    for line in output.split("\n"):
        line = line.rstrip("\r")
        if not line.strip():
            continue
        fields = line.split(",")
        name = fields[0].strip()
        if not name:
            continue
        value = fields[1].strip() if len(fields) > 1 else None
        constants.append(ConstantSpec(name=name, value=value))
    return constants


def build_command(base: str, package: str, settings: GlueSettings) -> list[str]:
    """Build the argv for the helper invocation."""
    return [
        settings.interpreter,
        *settings.interpreter_flags,
        str(settings.helper_script),
        base,
        package,
    ]


def discover_constants(
    base: str,
    package: str,
    settings: GlueSettings | None = None,
) -> list[ConstantSpec]:
    """Enumerate the constants ``package`` defines when required from ``base``.

    Args:
        base: Library base path, added to the interpreter load path.
        package: Library name to require.
        settings: Interpreter, helper and timeout configuration.

    Returns:
        Constants in the order the helper printed them.

    Raises:
        DiscoveryError: If the interpreter cannot be started, times out, or
            exits non-zero.
    """
    settings = settings or GlueSettings()
    cmd = build_command(base, package, settings)
    context = ErrorContext(package=package, command=cmd)

    logger.debug("discovery_started", command=shlex.join(cmd))
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            check=True,
            timeout=settings.timeout_seconds,
        )
    except FileNotFoundError as exc:
        raise DiscoveryError(
            f"interpreter not found: {settings.interpreter}",
            context=context,
            cause=exc,
        ) from exc
    except subprocess.TimeoutExpired as exc:
        raise DiscoveryError(
            f"constant discovery timed out after {settings.timeout_seconds}s",
            context=context,
            stderr=_decode(exc.stderr),
            cause=exc,
        ) from exc
    except subprocess.CalledProcessError as exc:
        stderr = _decode(exc.stderr)
        logger.error("discovery_failed", returncode=exc.returncode, stderr=stderr)
        raise DiscoveryError(
            f"constant discovery exited with status {exc.returncode}",
            context=context,
            returncode=exc.returncode,
            stderr=stderr,
            cause=exc,
        ) from exc

    constants = parse_constants(_decode(result.stdout))
    logger.info("constants_discovered", package=package, count=len(constants))
    return constants


def _decode(data: bytes | str | None) -> str:
    if data is None:
        return ""
    if isinstance(data, str):
        return data
    return data.decode("utf-8", errors="replace")


__all__ = [
    "CLASS_KIND",
    "MODULE_KIND",
    "ConstantSpec",
    "parse_constants",
    "build_command",
    "discover_constants",
]
