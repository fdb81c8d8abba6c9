"""Allow ``python -m halstead_metrics``."""

from .cli import app

app()
