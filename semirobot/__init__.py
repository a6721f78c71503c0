import logging

from .bus import EventBus

# Default level for the package loggers, main.py configures the handlers
logging.getLogger("semirobot").setLevel(logging.INFO)

__all__ = ["EventBus"]
