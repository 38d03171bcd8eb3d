from typing import List, Optional

from pydantic import BaseModel, Field

# Document field name -> model attribute name
NAME_INFO_FIELDS = {
    "label": "label",
    "normalized": "normalized",
}

LISTING_INFO_FIELDS = {
    "concept_id": "concept_id",
    "name": "name",
    "pretty_url_name": "pretty_url_name",
}


class NameInfo(BaseModel):
    """Naming information for a single EVS concept."""

    label: Optional[str] = Field(None, description="Display name of the disease or intervention")
    normalized: Optional[str] = Field(
        None, description="Lower-cased form of the name, used for matching"
    )


class ListingInfo(BaseModel):
    """Name and URL data for a disease or intervention listing page."""

    concept_id: List[str] = Field(
        ...,
        min_length=1,
        description="One or more concept IDs mapping to this disease or intervention",
    )
    name: Optional[NameInfo] = Field(None, description="Name of the disease or intervention")
    pretty_url_name: Optional[str] = Field(
        None, description="Browser-friendly path segment. None if none exists."
    )
