# storage/context_store.py

import json
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)

CONTEXT_KEY = "investmentChatbot_documentContext"
NAMES_KEY = "investmentChatbot_documentNames"


@dataclass(frozen=True)
class DocumentContext:
    """
    The shared document context injected into every outbound turn.
    Content and names are present together or absent together.
    """
    content: Optional[str] = None
    names: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_stored(cls, content, names):
        if not content or not names:
            return cls()
        return cls(content=content, names=tuple(names))

    @property
    def is_active(self) -> bool:
        return self.content is not None and len(self.names) > 0


class ContextStore:
    """
    Persists the document context under two fixed keys:
    - CONTEXT_KEY: raw text
    - NAMES_KEY: JSON array of document names
    """

    def __init__(self, kv):
        self.kv = kv

    def save(self, content: str, names: List[str]):
        self.kv.set_many({
            CONTEXT_KEY: content,
            NAMES_KEY: json.dumps(list(names), ensure_ascii=False),
        })

    def load(self) -> Tuple[Optional[str], List[str]]:
        content = self.kv.get(CONTEXT_KEY)
        return content, self._load_names()

    def clear(self):
        self.kv.remove_many([CONTEXT_KEY, NAMES_KEY])

    def _load_names(self) -> List[str]:
        raw = self.kv.get(NAMES_KEY)
        if raw is None:
            return []

        try:
            names = json.loads(raw)
        except ValueError:
            names = None

        if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
            # Corrupted data counts as "no context"
            logger.warning("Discarding corrupted document names under %s", NAMES_KEY)
            self.kv.remove(NAMES_KEY)
            return []

        return names
