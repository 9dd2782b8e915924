"""
rbglue — glue generation for vendored interpreter libraries.

Two tools live here:

- ``rbglue.autoimport`` asks an interpreter which constants a vendored
  package defines and renders them into a glue module.
- ``rbglue.implementors`` builds and updates the per-trait implementor
  tables that documentation pages load.

Example:
    >>> from rbglue import generate_glue
    >>> generate_glue("vendor/ruby/lib", "ostruct", "out/ostruct.rs")
"""

from rbglue.autoimport import GlueGenerator, GlueResult, generate_glue
from rbglue.core.errors import GlueError
from rbglue.core.settings import GlueSettings
from rbglue.implementors import Implementor, ImplementorSlot, ImplementorTable

__version__ = "0.1.0"

__all__ = [
    "GlueGenerator",
    "GlueResult",
    "GlueSettings",
    "GlueError",
    "Implementor",
    "ImplementorSlot",
    "ImplementorTable",
    "generate_glue",
    "__version__",
]
