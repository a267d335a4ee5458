import os
from pydantic import BaseModel, Field, ConfigDict
from dotenv import load_dotenv

from giscus_configurator.application.debouncer import DEFAULT_DEBOUNCE_DELAY
from giscus_configurator.infrastructure.github_client import DEFAULT_API_URL


class Settings(BaseModel):
    """Runtime settings, read from the environment (and a .env file if present)."""
    model_config = ConfigDict(frozen=True)

    github_token: str = Field("", description="Token used for GitHub GraphQL lookups")
    github_graphql_url: str = DEFAULT_API_URL
    debounce_delay: float = Field(DEFAULT_DEBOUNCE_DELAY, ge=0, description="Seconds of quiet before a lookup")
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        # Load environment variables from .env file
        load_dotenv()

        return cls(
            github_token=os.getenv("GITHUB_TOKEN", ""),
            github_graphql_url=os.getenv("GITHUB_GRAPHQL_URL", DEFAULT_API_URL),
            debounce_delay=os.getenv("GISCUS_DEBOUNCE_DELAY", DEFAULT_DEBOUNCE_DELAY),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
