import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class MessageSender(str, Enum):
    USER = "user"
    BOT = "bot"


def _now():
    return datetime.now(timezone.utc)


def _new_id():
    return str(uuid.uuid4())


@dataclass(frozen=True)
class Message:
    text: str
    sender: MessageSender
    is_context_notification: bool = False
    id: str = field(default_factory=_new_id)
    timestamp: datetime = field(default_factory=_now)

    @classmethod
    def from_user(cls, text):
        return cls(text=text, sender=MessageSender.USER)

    @classmethod
    def from_bot(cls, text):
        return cls(text=text, sender=MessageSender.BOT)

    @classmethod
    def context_notice(cls, text):
        return cls(text=text, sender=MessageSender.BOT, is_context_notification=True)

    def to_dict(self):
        return {
            "id": self.id,
            "text": self.text,
            "sender": self.sender.value,
            "timestamp": self.timestamp.isoformat(),
            "is_context_notification": self.is_context_notification,
        }
