import logging

logger = logging.getLogger(__name__)


class RequestArbiter:
    """Monotonic request tokens; only the latest token is current.

    A caller captures ``issue()`` when an operation starts and checks
    ``is_current()`` before applying its result. Any later ``issue()``
    or ``invalidate()`` supersedes it.
    """

    def __init__(self, name: str = "request") -> None:
        self._name = name
        self._counter = 0

    @property
    def current(self) -> int:
        return self._counter

    def issue(self) -> int:
        self._counter += 1
        logger.debug("Issued %s token %d", self._name, self._counter)
        return self._counter

    def invalidate(self) -> None:
        """Supersede every outstanding token without starting a new operation."""
        self._counter += 1
        logger.debug("Invalidated %s tokens up to %d", self._name, self._counter - 1)

    def is_current(self, token: int) -> bool:
        return token == self._counter
