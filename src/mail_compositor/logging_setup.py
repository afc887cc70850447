"""Logging setup for applications embedding the engine."""

import logging


def setup_logging(verbose: bool = False) -> None:
    """Configure root logging for the engine's module loggers."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(name)s: %(message)s",
    )
