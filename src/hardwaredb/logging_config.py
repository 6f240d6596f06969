"""Singleton logging configuration.

setup_logging() configures the root logger once per process; later
calls are no-ops (guarded by a module-level flag). Library modules
only ever call ``logging.getLogger(__name__)``.
"""

import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(name)s] - %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%S"

_setup_done = False


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger. Idempotent: second call is a no-op."""
    global _setup_done  # noqa: PLW0603
    if _setup_done:
        return
    _setup_done = True

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )
