"""
Pytest configuration and shared fixtures.

Provides a mocked AsyncElasticsearch client, API options, a mock logger and
helpers for building search responses.
"""

import os
import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

os.environ.setdefault("LISTING_INFO_ALIAS_NAME", "listinginfov1")

# Add project root to path
project_dir = Path(__file__).parent.parent
sys.path.insert(0, str(project_dir))

from services.listing_info_query_service import ESListingInfoQueryService  # noqa: E402
from utils.config_utils import ListingPageAPIOptions  # noqa: E402

ALIAS_NAME = "listinginfov1"


def make_hit(concept_id, label=None, pretty_url_name=None, normalized=None):
    """Build a search hit for a listing info document."""
    source = {"concept_id": concept_id}
    if label is not None:
        source["name"] = {
            "label": label,
            "normalized": normalized if normalized is not None else label.lower(),
        }
    if pretty_url_name is not None:
        source["pretty_url_name"] = pretty_url_name
    return {"_index": ALIAS_NAME, "_id": ",".join(concept_id), "_source": source}


def make_search_response(hits, total=None, **overrides):
    """Build a successful search response body around the given hits."""
    body = {
        "took": 2,
        "timed_out": False,
        "_shards": {"total": 1, "successful": 1, "skipped": 0, "failed": 0},
        "hits": {
            "total": {"value": len(hits) if total is None else total, "relation": "eq"},
            "max_score": 1.0 if hits else None,
            "hits": hits,
        },
    }
    body.update(overrides)
    return body


@pytest.fixture
def api_options():
    return ListingPageAPIOptions(listing_info_alias_name=ALIAS_NAME)


@pytest.fixture
def mock_es():
    """AsyncElasticsearch stand-in with an async search method."""
    es = MagicMock()
    es.search = AsyncMock()
    return es


@pytest.fixture
def mock_logger():
    return MagicMock()


@pytest.fixture
def service(mock_es, api_options, mock_logger):
    return ESListingInfoQueryService(mock_es, api_options, log=mock_logger)


def logged_message(call):
    """Render the message of a mocked logger call with its %-style arguments."""
    msg, args = call.args[0], call.args[1:]
    return msg % args if args else msg
