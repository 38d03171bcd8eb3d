"""Resources implementations for CTS Listing Pages MCP server."""

from typing import Any, Dict

from services.listing_info_query_service import ESListingInfoQueryService
from tools.listing_tools import get_listing_info_by_pretty_url_name_impl


async def listing_info_resource_impl(
    service: ESListingInfoQueryService, pretty_url_name: str
) -> Dict[str, Any]:
    """
    Implementation for reading a listing page's name and URL data.

    Args:
        service: Listing info query service
        pretty_url_name: The pretty-url name of the listing page

    Returns:
        Lookup result dict, the same shape the pretty-url name tool returns
    """
    return await get_listing_info_by_pretty_url_name_impl(
        service=service, pretty_url_name=pretty_url_name
    )
