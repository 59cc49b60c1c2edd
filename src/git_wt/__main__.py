"""Allow `python -m git_wt`."""

from .cli import app

app(prog_name="wt")
