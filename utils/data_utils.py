"""Document mapping and input cleaning utilities for CTS Listing Pages."""

from typing import Any, Dict, List, Mapping, Optional, Sequence

from listing_schema import (
    LISTING_INFO_FIELDS,
    NAME_INFO_FIELDS,
    ListingInfo,
    NameInfo,
)


def is_blank(value: Any) -> bool:
    """
    Check if a value is None or a whitespace-only string.

    Args:
        value: Value to check

    Returns:
        True if the value carries no usable text, False otherwise
    """
    return value is None or (isinstance(value, str) and not value.strip())


def map_fields(source: Mapping[str, Any], fields: Mapping[str, str]) -> Dict[str, Any]:
    """
    Copy the known document fields of a source mapping onto attribute names.

    Args:
        source: Raw document (typically a hit's _source)
        fields: Table of document field name to attribute name

    Returns:
        Dict keyed by attribute name; fields absent from the source are omitted
    """
    return {attr: source[field] for field, attr in fields.items() if field in source}


def name_info_from_source(source: Optional[Mapping[str, Any]]) -> Optional[NameInfo]:
    """
    Map the nested name structure of a document, if present.

    Raises:
        TypeError: If the name is not a single object
    """
    if source is None:
        return None
    if not isinstance(source, Mapping):
        raise TypeError(f"name must be an object, got {type(source).__name__}")
    return NameInfo(**map_fields(source, NAME_INFO_FIELDS))


def listing_info_from_source(source: Mapping[str, Any]) -> ListingInfo:
    """
    Map a listing info document onto a ListingInfo record.

    Args:
        source: The document's _source from Elasticsearch

    Returns:
        Validated ListingInfo

    Raises:
        pydantic.ValidationError: If the document has no concept IDs
        TypeError: If the nested name is not a single object
    """
    values = map_fields(source, LISTING_INFO_FIELDS)

    concept_ids = values.get("concept_id")
    # Keyword fields holding a single value come back as a plain string
    if isinstance(concept_ids, str):
        values["concept_id"] = [concept_ids]

    values["name"] = name_info_from_source(values.get("name"))

    if is_blank(values.get("pretty_url_name")):
        values["pretty_url_name"] = None

    return ListingInfo(**values)


def listing_infos_from_hits(hits: Sequence[Mapping[str, Any]]) -> List[ListingInfo]:
    """Map search hits, in order, onto ListingInfo records."""
    return [listing_info_from_source(hit.get("_source", {})) for hit in hits]


def clean_ccodes(ccodes: Optional[Sequence[Any]]) -> List[str]:
    """
    Normalize a client-supplied c-code list.

    Args:
        ccodes: Raw list of c-codes (a single string is treated as one c-code)

    Returns:
        List of stripped, non-blank c-codes in their original order
    """
    if ccodes is None:
        return []
    if isinstance(ccodes, str):
        ccodes = [ccodes]
    return [str(code).strip() for code in ccodes if not is_blank(code)]
