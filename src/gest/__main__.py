"""Entry point for ``python -m gest``."""

from gest.cli.main import cli

if __name__ == "__main__":
    cli()
