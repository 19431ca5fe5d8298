# SPDX-License-Identifier: MIT

import logging

from rich.logging import RichHandler


def configure_logging(verbose: bool = False) -> None:
    """Route the engine's log records through rich. Only the CLI calls this."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.ERROR,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=verbose)],
        force=True,
    )
