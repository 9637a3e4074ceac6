"""Satellite position tracker using aiohttp."""

__all__ = [
    "api",
    "cli",
    "const",
    "exceptions",
    "history",
    "logging_config",
    "model",
    "session",
    "utils",
]
