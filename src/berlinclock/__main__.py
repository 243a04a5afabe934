"""Main entry point for berlinclock."""

from berlinclock.cli import cli

if __name__ == "__main__":
    cli()
