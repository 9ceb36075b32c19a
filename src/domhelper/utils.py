"""Utility functions."""

import logging

from rich.logging import RichHandler


def setup_logging(verbose: bool = False) -> None:
    """Setup logging with RichHandler for console output.

    The library itself only emits records through module loggers; this is a
    convenience for applications and scripts embedding it.

    Args:
        verbose: If True, sets logging to DEBUG level and shows file paths.
                If False, sets logging to INFO level and silences parser noise.
    """
    level = logging.DEBUG if verbose else logging.INFO

    handler = RichHandler(
        rich_tracebacks=True,
        markup=False,
        show_time=True,
        show_path=verbose,  # Only show file path in verbose mode
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    logging.basicConfig(
        level=level,
        handlers=[handler],
        force=True,  # Override any existing config
    )

    # Suppressed parse errors and per-selector translations are DEBUG chatter
    if not verbose:
        logging.getLogger("domhelper.loader").setLevel(logging.WARNING)
        logging.getLogger("domhelper.cache").setLevel(logging.WARNING)
    else:
        logging.getLogger("domhelper.loader").setLevel(logging.NOTSET)
        logging.getLogger("domhelper.cache").setLevel(logging.NOTSET)
