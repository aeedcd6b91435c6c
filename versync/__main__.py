"""Entry point for running versync as a module.

This allows running the application with:
    python -m versync [OPTIONS]
"""

from versync.cli import app

if __name__ == "__main__":
    app()
