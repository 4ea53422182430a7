"""Main entry point for codemaster CLI."""

from src.cli.app import app


def main():
    """Run the CLI application."""
    app()


if __name__ == "__main__":
    main()
