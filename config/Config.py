# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-03
# Description: Config
# -----------------------------------------------------------------------------

import os
from dataclasses import dataclass
from dotenv import load_dotenv, find_dotenv

from errors.PipelineErrors import MissingCredentialError

# Load .env once globally
load_dotenv(find_dotenv(usecwd=True))


@dataclass(frozen=True)
class Config:
    # OpenAI embeddings API
    openai_api_key: str
    openai_base_url: str = "https://api.openai.com/v1"
    openai_embed_model: str = "text-embedding-3-small"
    openai_timeout_seconds: float = 60.0

    # ---- Single source of truth: field_name -> ENV VAR NAME ----
    ENV_VARS = {
        "openai_api_key": "OPENAI_API_KEY",
        "openai_base_url": "OPENAI_BASE_URL",      # e.g. https://api.openai.com/v1
        "openai_embed_model": "OPENAI_EMBED_MODEL",
        "openai_timeout_seconds": "OPENAI_TIMEOUT_SECONDS",
    }

    @staticmethod
    def from_env() -> "Config":
        """Build Config object from environment variables; unset optionals keep their defaults."""
        kwargs = {}
        for field_name, env_name in Config.ENV_VARS.items():
            value = (os.getenv(env_name) or "").strip()
            if field_name == "openai_api_key" or value:
                kwargs[field_name] = value

        timeout = kwargs.get("openai_timeout_seconds")
        if timeout is not None:
            try:
                kwargs["openai_timeout_seconds"] = float(timeout)
            except ValueError as e:
                raise ValueError(
                    f"Env var {Config.ENV_VARS['openai_timeout_seconds']} must be a number, got {timeout!r}"
                ) from e
        return Config(**kwargs)

    def __post_init__(self):
        """
        Fail fast if the credential is missing, before any record is touched.
        """
        if not self.openai_api_key:
            raise MissingCredentialError(self.ENV_VARS["openai_api_key"])

        if self.openai_timeout_seconds <= 0:
            raise ValueError(f"openai_timeout_seconds must be positive, got {self.openai_timeout_seconds}")

    def summary(self) -> dict:
        """Return a safe, non-sensitive summary for logging."""
        return {
            "openai_base_url": self.openai_base_url,
            "openai_embed_model": self.openai_embed_model,
            "openai_timeout_seconds": self.openai_timeout_seconds,
        }
