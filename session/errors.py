class ChatbotError(Exception):
    """Base class for errors raised by the chat engine."""


class SessionInitializationError(ChatbotError):
    """
    The remote-model session could not be created.
    No turns may be submitted until a session is created successfully.
    """


class TurnError(ChatbotError):
    """A single outbound model call failed. The session stays usable."""


class ContextValidationError(ChatbotError, ValueError):
    """applyContext was called without content or without document names."""
