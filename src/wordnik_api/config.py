"""wordnik_api.config

Connection settings for the Wordnik client.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "WORD_URL",
    "WORDS_URL",
    "USER_AGENT",
    "GETTING_STARTED_URL",
    "ClientSettings",
]

WORD_URL = "https://api.wordnik.com/v4/word.json/"
WORDS_URL = "https://api.wordnik.com/v4/words.json/"
USER_AGENT = "WordnikAPI-EP/1.0.0"
GETTING_STARTED_URL = "https://developer.wordnik.com/gettingstarted"


class ClientSettings(BaseModel):
    """Configuration options for a WordnikClient."""

    model_config = ConfigDict(frozen=True)

    api_key: Optional[str] = Field(
        default=None,
        description="Wordnik API key, sent as the api_key query parameter",
    )
    timeout: float = Field(
        default=15,
        gt=0,
        description="Seconds to wait for each HTTP request",
    )
    user_agent: str = Field(
        default=USER_AGENT,
        description="Value of the User-Agent request header",
    )
    raise_errors: bool = Field(
        default=False,
        description="Propagate request failures instead of returning None / []",
    )
