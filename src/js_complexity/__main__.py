"""Allow running as `python -m js_complexity`."""

from .cli import app

if __name__ == "__main__":
    app()
