from __future__ import annotations

from composition.cli import app

if __name__ == "__main__":
    app()
