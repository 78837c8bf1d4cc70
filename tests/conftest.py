import logging
from collections.abc import Iterator

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Undo logging configuration done by CLI invocations."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level

    yield

    structlog.reset_defaults()
    root.handlers = handlers
    root.setLevel(level)
