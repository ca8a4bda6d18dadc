"""
Client configuration loaded from the environment
"""

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://webwallet.guccicoin.cf/api/"
DEFAULT_TIMEOUT = 30


class ClientSettings(BaseSettings):
    """
    Settings for building a client with ``from_settings``.

    Reads ``GUCCICOIN_API_KEY``, ``GUCCICOIN_BASE_URL`` and
    ``GUCCICOIN_TIMEOUT`` from the environment or a ``.env`` file.
    """

    model_config = SettingsConfigDict(
        env_prefix="GUCCICOIN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_key: SecretStr
    base_url: str = DEFAULT_BASE_URL
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
