import logging

from chat.notices import AUTH_MISMATCH

logger = logging.getLogger(__name__)


def _normalize(value):
    return (value or "").strip().lower()


class AccessGate:
    """
    Client-side admin gate.

    Decides who may see context notifications and is shown the context
    banner. Not a security boundary: a single credential compared
    case-insensitively after trimming whitespace.
    """

    def __init__(self, credential: str):
        self._credential = _normalize(credential)
        self._authorized = False
        self.error = None

    def authorize(self, candidate: str) -> bool:
        self.error = None

        if self._credential and _normalize(candidate) == self._credential:
            self._authorized = True
            logger.info("Admin authorized")
            return True

        self.error = AUTH_MISMATCH
        logger.info("Admin authorization rejected")
        return False

    def deauthorize(self):
        self._authorized = False
        self.error = None

    def is_authorized(self) -> bool:
        return self._authorized
