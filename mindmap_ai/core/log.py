import logging

from mindmap_ai.core.config import settings

LOG_FORMAT = "%(asctime)s │ %(levelname)-8s │ %(name)s │ %(message)s"


def setup_logging() -> None:
    """Configure root logging once for the whole service."""
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format=LOG_FORMAT,
    )
