import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class Talker(Protocol):
    """Anything that can speak a line of text."""

    def say(self, text: str) -> None: ...


class LoggingTalker:
    """Default talker: writes announcements to the log instead of a speech engine."""

    def say(self, text: str) -> None:
        logger.info("announce: %s", text)
