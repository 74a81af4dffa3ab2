"""Entry point that writes the welcome line to the module logger."""

from __future__ import annotations

import logging
from typing import Sequence


GREETING = "Hello and welcome!"
LOGGER = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    """Emit the greeting at INFO and report success.

    ``argv`` is accepted for symmetry with the CLI and ignored.
    """

    LOGGER.info(GREETING)
    return 0
