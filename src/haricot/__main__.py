"""Entry point for python -m haricot."""

from __future__ import annotations


def main() -> None:
    """Run the CLI application."""
    try:
        from haricot.cli.main import app

        app()
    except ImportError as e:
        import sys

        print("CLI dependencies not installed.", file=sys.stderr)
        print("Install with: pip install haricot[cli]", file=sys.stderr)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
