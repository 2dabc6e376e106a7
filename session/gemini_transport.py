import logging

from google import genai

from chat.prompts.prompt_loader import load_system_prompt
from session.errors import SessionInitializationError, TurnError

logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = (
    "Could not start the chat session. "
    "Please make sure your API key is configured correctly."
)


def build_prompt(user_text, context=None):
    if not context:
        return user_text

    return "\n\n".join([
        "CONTEXT:\n" + context,
        "USER MESSAGE:\n" + user_text,
    ])


class GeminiTransport:
    """
    Remote model access through google-genai chat sessions.
    """

    def __init__(self, settings, system_prompt=None):
        self.api_key = settings.gemini_api_key
        self.model = settings.gemini_model
        self.system_prompt = system_prompt if system_prompt is not None else load_system_prompt()
        self.generation_config = {
            "temperature": settings.temperature,
            "top_p": settings.top_p,
            "max_output_tokens": settings.max_output_tokens,
        }
        # Chats send through the client's http pool; it must outlive them
        self.client = None

    def get_client(self):
        if self.client is None:
            self.client = genai.Client(api_key=self.api_key)
        return self.client

    def start_chat(self):
        if not self.api_key:
            raise SessionInitializationError(MISSING_KEY_MESSAGE)

        try:
            return self.get_client().chats.create(
                model=self.model,
                config={
                    "system_instruction": self.system_prompt,
                    **self.generation_config,
                },
            )
        except Exception as e:
            logger.exception("Gemini chat creation failed")
            raise SessionInitializationError(MISSING_KEY_MESSAGE) from e

    def send_message(self, chat, user_text, context=None) -> str:
        response = chat.send_message(build_prompt(user_text, context))

        text = (response.text or "").strip()
        if not text:
            raise TurnError("The model returned an empty response.")
        return text

    def close(self):
        if self.client is not None:
            self.client.close()
            self.client = None
