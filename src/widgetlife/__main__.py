"""Allow ``python -m widgetlife``."""

from widgetlife.cli.main import cli

if __name__ == "__main__":
    cli()
