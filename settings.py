"""
Runtime configuration.
Loaded from environment variables / .env file.
"""
import os
from dataclasses import dataclass

from dotenv import load_dotenv


@dataclass
class Settings:
    # Remote model
    gemini_api_key: str = ""
    gemini_model: str = "models/gemini-2.5-flash"
    temperature: float = 0.2
    top_p: float = 0.9
    max_output_tokens: int = 1500
    # Access gate
    admin_email: str = ""
    # Storage
    db_path: str = "data/chatbot.db"
    # Web
    flask_secret_key: str = "dev-secret"
    log_level: str = "INFO"


def load_settings() -> Settings:
    load_dotenv()

    return Settings(
        gemini_api_key=os.getenv("GEMINI_API_KEY", ""),
        gemini_model=os.getenv("GEMINI_MODEL", Settings.gemini_model),
        temperature=float(os.getenv("GEMINI_TEMPERATURE", Settings.temperature)),
        top_p=float(os.getenv("GEMINI_TOP_P", Settings.top_p)),
        max_output_tokens=int(os.getenv("GEMINI_MAX_OUTPUT_TOKENS", Settings.max_output_tokens)),
        admin_email=os.getenv("ADMIN_EMAIL", ""),
        db_path=os.getenv("CHATBOT_DB_PATH", Settings.db_path),
        flask_secret_key=os.getenv("FLASK_SECRET_KEY", Settings.flask_secret_key),
        log_level=os.getenv("LOG_LEVEL", Settings.log_level),
    )
