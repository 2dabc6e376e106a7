import logging
import threading

from chat.messages import Message
from chat.notices import UNKNOWN_ERROR, turn_failed_banner, turn_failed_reply

logger = logging.getLogger(__name__)


def describe_error(exc):
    return str(exc).strip() or UNKNOWN_ERROR


class ConversationController:
    """
    Drives one turn at a time:
    user message -> model call (with document context) -> reply or error.
    """

    def __init__(self, state, transport):
        self.state = state
        self.transport = transport
        self._turn_lock = threading.Lock()

    def submit(self, input_text):
        """
        Run a turn. Returns the appended bot message, or None when the
        input was rejected (empty input, no session, turn already in flight).
        """
        if not isinstance(input_text, str) or not input_text.strip():
            return None

        chat = self.state.chat_session
        if chat is None:
            return None

        if not self._turn_lock.acquire(blocking=False):
            logger.info("Turn rejected: another turn is in flight")
            return None

        try:
            self.state.append(Message.from_user(input_text))
            self.state.is_loading = True
            self.state.error = None

            # Captured before the call; later context changes do not apply
            context = self.state.document.content

            banner = None
            try:
                reply_text = self.transport.send_message(chat, input_text, context)
            except Exception as e:
                logger.exception("Turn failed")
                description = describe_error(e)
                reply = Message.from_bot(turn_failed_reply(description))
                banner = turn_failed_banner(description)
            else:
                reply = Message.from_bot(reply_text)

            with self.state.lock:
                if not self._is_current(chat):
                    logger.info("Session replaced during turn, reply dropped")
                    return None

                self.state.append(reply)
                if banner is not None:
                    self.state.error = banner
            return reply
        finally:
            self.state.is_loading = False
            self._turn_lock.release()

    def _is_current(self, chat):
        return self.state.chat_session is chat
