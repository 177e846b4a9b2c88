"""Allow ``python -m oopatterns``."""
from oopatterns.cli.main import cli

if __name__ == "__main__":
    cli()
