"""Listing info lookup tools for CTS Listing Pages MCP server."""

from typing import Any, Dict, List

from fastmcp import Context

from services.listing_info_query_service import ESListingInfoQueryService
from utils.data_utils import clean_ccodes, is_blank
from utils.errors import APIInternalException


async def get_listing_info_by_pretty_url_name_impl(
    service: ESListingInfoQueryService,
    pretty_url_name: str,
    ctx: Context = None,
) -> Dict[str, Any]:
    """
    Implementation for looking up a listing info record by pretty-url name.

    Args:
        service: Listing info query service
        pretty_url_name: The pretty-url name to match exactly
        ctx: FastMCP context for logging

    Returns:
        Dict with status "ok" and the record, "not_found", "invalid" or "error"
    """
    if is_blank(pretty_url_name):
        return {"status": "invalid", "error": "pretty_url_name must not be empty"}

    try:
        record = await service.get_by_pretty_url_name(pretty_url_name)
    except APIInternalException as e:
        if ctx:
            await ctx.error(f"Failed to look up pretty URL name '{pretty_url_name}'")
        return {"status": "error", "error": e.message}

    if record is None:
        return {"status": "not_found"}

    return {"status": "ok", "listing_info": record.model_dump()}


async def get_listing_info_by_ids_impl(
    service: ESListingInfoQueryService,
    ccodes: List[str],
    ctx: Context = None,
) -> Dict[str, Any]:
    """
    Implementation for looking up listing info records by c-code list.

    Args:
        service: Listing info query service
        ccodes: C-codes to match; blanks are dropped and values stripped
        ctx: FastMCP context for logging

    Returns:
        Dict with status "ok" and the records, "not_found", "invalid" or "error"
    """
    codes = clean_ccodes(ccodes)
    if not codes:
        return {"status": "invalid", "error": "ccodes must contain at least one c-code"}

    try:
        records = await service.get_by_ids(codes)
    except APIInternalException as e:
        if ctx:
            await ctx.error(f"Failed to look up c-code(s) '{','.join(codes)}'")
        return {"status": "error", "error": e.message}

    if records is None:
        return {"status": "not_found"}

    return {
        "status": "ok",
        "listing_infos": [record.model_dump() for record in records],
    }
