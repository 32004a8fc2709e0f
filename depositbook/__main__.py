"""Allow `python -m depositbook`."""

from depositbook.cli import app

app(prog_name="depositbook")
