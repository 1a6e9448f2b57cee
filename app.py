"""Entry point for `gunicorn app:app` and `python app.py`.

Under Gunicorn the tip calculator's Flask app is served with logging set
from the LOG_LEVEL env var (default INFO), so engine and request warnings
reach the worker logs. As a script this runs the tipsplit CLI instead.
"""
import logging
import os

from web_app import app as app  # exported WSGI app for Gunicorn


def configure_logging(level_name=None):
    level_name = (level_name or os.environ.get("LOG_LEVEL", "INFO")).upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    return level


if __name__ == "__main__":
    import sys

    from cli import main

    sys.exit(main())
else:
    configure_logging()
