"""CTS Listing Pages FastMCP Server for looking up listing page name and URL data."""

import os
from typing import List

from dotenv import load_dotenv
from fastmcp import Context, FastMCP

from resources.listing_resources import listing_info_resource_impl
from services.listing_info_query_service import ESListingInfoQueryService
from tools.listing_tools import (
    get_listing_info_by_ids_impl,
    get_listing_info_by_pretty_url_name_impl,
)
from utils.config_utils import load_api_options
from utils.es_utils import create_es_client

load_dotenv()

# --- API Options ---
api_options = load_api_options()

# --- Elasticsearch Client ---
try:
    es = create_es_client(debug=os.environ.get("ES_DEBUG", "").lower() == "true")
except Exception as e:
    raise RuntimeError(f"Failed to initialize Elasticsearch client: {e}")

listing_info_service = ESListingInfoQueryService(es, api_options)


mcp = FastMCP("CTSListingPages")


# --- MCP Tool: Lookup by Pretty URL Name ---
@mcp.tool(
    name="get_listing_info_by_pretty_url_name",
    description=(
        "Retrieve the name and URL data for the disease or intervention whose "
        "pretty-url name exactly matches the given value."
    ),
)
async def get_listing_info_by_pretty_url_name(
    pretty_url_name: str, ctx: Context = None
) -> dict:
    """
    Look up a listing info record by pretty-url name.

    Args:
        pretty_url_name: The pretty-url name of the record to be retrieved
        ctx: FastMCP context for logging

    Returns:
        dict: Lookup status with the listing info when found
    """
    return await get_listing_info_by_pretty_url_name_impl(
        service=listing_info_service, pretty_url_name=pretty_url_name, ctx=ctx
    )


# --- MCP Tool: Lookup by C-codes ---
@mcp.tool(
    name="get_listing_info_by_ids",
    description=(
        "Retrieve the name and URL data for diseases or interventions matching "
        "a list of EVS c-codes (e.g. ['C4872', 'C118809'])."
    ),
)
async def get_listing_info_by_ids(ccodes: List[str], ctx: Context = None) -> dict:
    """
    Look up listing info records by c-code list.

    Args:
        ccodes: The c-code list of the records to be retrieved
        ctx: FastMCP context for logging

    Returns:
        dict: Lookup status with the matching listing infos when found
    """
    return await get_listing_info_by_ids_impl(
        service=listing_info_service, ccodes=ccodes, ctx=ctx
    )


# --- MCP Resource: Listing Info by Pretty URL Name ---
@mcp.resource(
    uri="listing://pretty-url-name/{pretty_url_name}",
    name="listing_info",
    description="Name and URL data for a listing page, by pretty-url name",
)
async def listing_info(pretty_url_name: str) -> dict:
    return await listing_info_resource_impl(
        service=listing_info_service, pretty_url_name=pretty_url_name
    )


if __name__ == "__main__":
    mcp.run()
