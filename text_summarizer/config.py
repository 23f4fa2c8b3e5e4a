from functools import lru_cache
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings

from text_summarizer.summarizer.models import SummaryMode


class Settings(BaseSettings):
    """
    Centralized application settings leveraging environment overrides.
    """

    app_name: str = "Mini Text Summarizer"
    environment: str = Field("local", validation_alias="ENVIRONMENT")
    allow_origins: List[str] = Field(default_factory=lambda: ["*"])
    max_payload_bytes: int = Field(5 * 1024 * 1024, ge=1024)  # 5 MB soft limit
    default_mode: SummaryMode = "standard"

    # Remote completion settings
    llm_api_url: str = Field(
        "https://api.openai.com/v1/chat/completions",
        description="Chat completions endpoint",
    )
    llm_model: str = Field("gpt-4o-mini", description="Model name sent to the provider")
    llm_api_key: Optional[str] = Field(None, validation_alias="SUMMARIZER_API_KEY")
    llm_max_tokens: int = Field(600, ge=16, le=4000)
    llm_temperature: float = Field(0.2, ge=0.0, le=2.0)
    llm_timeout_seconds: float = Field(60.0, gt=0)

    # URL source settings
    fetch_timeout_seconds: float = Field(15.0, gt=0)
    fetch_user_agent: str = "MiniTextSummarizer/1.0"

    class Config:
        env_file = ".env"
        case_sensitive = False


@lru_cache
def get_settings() -> Settings:
    return Settings()
