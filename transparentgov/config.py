"""TransparentGov configuration — loaded from environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_prefix": "TRANSPARENTGOV_", "env_file": ".env"}

    # Gemini text generation
    gemini_api_key: str = ""
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    gemini_model: str = "gemini-2.0-flash"
    # None waits indefinitely; set seconds to opt in to a timeout
    request_timeout: float | None = None

    # Insight orchestration
    discard_stale_results: bool = False


settings = Settings()
