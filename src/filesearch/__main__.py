"""Allow ``python -m filesearch``."""

from filesearch.cli import app

if __name__ == "__main__":
    app(prog_name="filesearch")
