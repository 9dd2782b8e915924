"""Allow ``python -m rbglue``."""

from rbglue.cli import app

if __name__ == "__main__":
    app()
