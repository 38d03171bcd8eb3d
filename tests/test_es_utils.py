"""Unit tests for Elasticsearch utilities."""

import json
from unittest.mock import patch

import pytest

from conftest import make_search_response
from utils.es_utils import (
    build_concept_ids_query,
    build_pretty_url_name_query,
    create_es_client,
    get_debug_information,
    get_total_hits,
    is_valid_search_response,
)


def test_build_pretty_url_name_query():
    assert build_pretty_url_name_query("lung-cancer") == {
        "term": {"pretty_url_name": "lung-cancer"}
    }


def test_build_concept_ids_query_copies_terms():
    ccodes = ("C4872", "C118809")

    query = build_concept_ids_query(ccodes)

    assert query["terms_set"]["concept_id"]["terms"] == ["C4872", "C118809"]


class TestIsValidSearchResponse:
    """Test suite for response validity checks."""

    def test_valid(self):
        assert is_valid_search_response(make_search_response([]))

    def test_timed_out(self):
        assert not is_valid_search_response(make_search_response([], timed_out=True))

    def test_failed_shards(self):
        body = make_search_response([], _shards={"total": 1, "successful": 0, "failed": 1})
        assert not is_valid_search_response(body)

    def test_missing_hits(self):
        assert not is_valid_search_response({"took": 1})


@pytest.mark.parametrize(
    "total,expected",
    [({"value": 7, "relation": "eq"}, 7), (4, 4)],
)
def test_get_total_hits(total, expected):
    body = make_search_response([])
    body["hits"]["total"] = total

    assert get_total_hits(body) == expected


def test_get_total_hits_without_total_counts_hits():
    body = {"hits": {"hits": [{"_source": {}}, {"_source": {}}]}}

    assert get_total_hits(body) == 2


def test_get_debug_information_is_json():
    body = make_search_response([], timed_out=True)

    debug = json.loads(get_debug_information(body))

    assert debug["timed_out"] is True
    assert debug["_shards"]["failed"] == 0


class TestCreateEsClient:
    """Test suite for the client factory."""

    def test_local_without_api_key(self, monkeypatch):
        monkeypatch.delenv("ES_API_KEY", raising=False)
        with patch("utils.es_utils.AsyncElasticsearch") as client_cls:
            create_es_client(endpoint=" http://es:9200 ")

        client_cls.assert_called_once_with(
            hosts=["http://es:9200"], verify_certs=False, request_timeout=30
        )

    def test_api_key(self):
        with patch("utils.es_utils.AsyncElasticsearch") as client_cls:
            create_es_client(endpoint="https://cloud:443", api_key="abc\n")

        client_cls.assert_called_once_with(
            hosts=["https://cloud:443"],
            api_key="abc",
            verify_certs=True,
            request_timeout=30,
        )
