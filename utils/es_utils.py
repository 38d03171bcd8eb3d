"""Elasticsearch utilities for CTS Listing Pages."""

import json
import os
from typing import Any, Dict, List, Mapping, Optional, Sequence

from elasticsearch import AsyncElasticsearch

PRETTY_URL_NAME_FIELD = "pretty_url_name"
CONCEPT_ID_FIELD = "concept_id"

# Minimum number of matching concept IDs a document needs to be returned
TERMS_SET_MINIMUM_MATCH_SCRIPT = "params.num_terms"


def create_es_client(
    endpoint: Optional[str] = None, api_key: Optional[str] = None, debug: bool = False
) -> AsyncElasticsearch:
    """
    Create and configure AsyncElasticsearch client.

    Args:
        endpoint: Elasticsearch endpoint URL (defaults to ES_ENDPOINT env var)
        api_key: API key for authentication (defaults to ES_API_KEY env var)
        debug: If True, print connection details (default: False)

    Returns:
        Configured AsyncElasticsearch client

    Examples:
        # Use environment variables
        es = create_es_client()

        # Override with specific values
        es = create_es_client(endpoint="http://localhost:9200")
    """
    ES_ENDPOINT = endpoint or os.environ.get("ES_ENDPOINT", "http://localhost:9200")
    ES_API_KEY = api_key or os.environ.get("ES_API_KEY")

    if ES_ENDPOINT:
        ES_ENDPOINT = ES_ENDPOINT.strip()
    if ES_API_KEY:
        ES_API_KEY = ES_API_KEY.strip()

    if debug:
        print(f"[ES Client Debug]")
        print(f"  Endpoint: {ES_ENDPOINT}")
        print(f"  API Key: {'*' * 20 if ES_API_KEY else 'None (using no auth)'}")

    if ES_API_KEY:
        # Cloud/Serverless with API key authentication
        return AsyncElasticsearch(
            hosts=[ES_ENDPOINT],
            api_key=ES_API_KEY,
            verify_certs=True,
            request_timeout=30,
        )
    else:
        # Local instance without authentication
        return AsyncElasticsearch(
            hosts=[ES_ENDPOINT], verify_certs=False, request_timeout=30
        )


def build_pretty_url_name_query(pretty_url_name: str) -> Dict[str, Any]:
    """Exact-match query on the keyword pretty-url name field."""
    return {"term": {PRETTY_URL_NAME_FIELD: pretty_url_name}}


def build_concept_ids_query(ccodes: Sequence[str]) -> Dict[str, Any]:
    """
    Terms-set query on the concept ID field.

    Args:
        ccodes: The c-codes to match against

    Returns:
        Query dict requiring ``params.num_terms`` matching terms per document
    """
    return {
        "terms_set": {
            CONCEPT_ID_FIELD: {
                "terms": list(ccodes),
                "minimum_should_match_script": {
                    "source": TERMS_SET_MINIMUM_MATCH_SCRIPT
                },
            }
        }
    }


def get_response_body(resp: Any) -> Mapping[str, Any]:
    """
    Standardize access to the body of an Elasticsearch response.

    Args:
        resp: Elasticsearch response object or plain dict

    Returns:
        The response body mapping (empty if none)
    """
    if hasattr(resp, "body") and resp.body is not None:
        return resp.body
    return resp or {}


def is_valid_search_response(body: Mapping[str, Any]) -> bool:
    """
    Check that a search response is complete and usable.

    A response is invalid when it has no hits section, timed out, or
    reports failed shards.
    """
    hits = body.get("hits")
    if not isinstance(hits, Mapping) or "hits" not in hits:
        return False
    if body.get("timed_out"):
        return False
    shards = body.get("_shards") or {}
    return not shards.get("failed", 0)


def get_total_hits(body: Mapping[str, Any]) -> int:
    """
    Extract the total hit count from a search response.

    Handles both the object form (``{"value": n, "relation": ...}``) and the
    plain integer form of ``hits.total``.
    """
    total = body.get("hits", {}).get("total")
    if total is None:
        return len(get_hits(body))
    if isinstance(total, Mapping):
        return int(total.get("value", 0))
    return int(total)


def get_hits(body: Mapping[str, Any]) -> List[Mapping[str, Any]]:
    """Return the list of hits from a search response."""
    return list(body.get("hits", {}).get("hits", []))


def get_debug_information(body: Mapping[str, Any]) -> str:
    """
    Summarize the diagnostic parts of a search response.

    Args:
        body: Search response body

    Returns:
        JSON text with timing, shard status and any error details
    """
    debug = {
        "took": body.get("took"),
        "timed_out": body.get("timed_out"),
        "_shards": body.get("_shards"),
        "has_hits": isinstance(body.get("hits"), Mapping),
    }
    if "error" in body:
        debug["error"] = body["error"]
    return json.dumps(debug, default=str)
