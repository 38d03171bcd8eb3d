"""Configuration loading for the CTS Listing Pages service."""

import os
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field


class ListingPageAPIOptions(BaseModel):
    """Options read by the listing info query service."""

    model_config = ConfigDict(frozen=True)

    listing_info_alias_name: str = Field(
        ..., min_length=1, description="Elasticsearch alias holding listing info documents"
    )


def load_api_options(env_file: Optional[Union[str, Path]] = None) -> ListingPageAPIOptions:
    """
    Build the API options from environment variables.

    Args:
        env_file: Optional path to a .env file loaded before reading the environment

    Returns:
        Immutable ListingPageAPIOptions

    Raises:
        RuntimeError: If LISTING_INFO_ALIAS_NAME is not set
    """
    if env_file is not None:
        load_dotenv(env_file, override=True)

    alias_name = os.environ.get("LISTING_INFO_ALIAS_NAME", "").strip()
    if not alias_name:
        raise RuntimeError("LISTING_INFO_ALIAS_NAME environment variable not set.")

    return ListingPageAPIOptions(listing_info_alias_name=alias_name)
