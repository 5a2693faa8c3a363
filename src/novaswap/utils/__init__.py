from . import logger

__all__ = [
    "logger",
]
