"""Elasticsearch implementation of the service for retrieving listing info documents."""

import logging
from typing import List, Optional, Sequence

from elasticsearch import AsyncElasticsearch
from fastmcp.utilities.logging import get_logger
from pydantic import ValidationError

from listing_schema import ListingInfo
from utils.config_utils import ListingPageAPIOptions
from utils.data_utils import listing_info_from_source, listing_infos_from_hits
from utils.errors import APIInternalException
from utils.es_utils import (
    build_concept_ids_query,
    build_pretty_url_name_query,
    get_debug_information,
    get_hits,
    get_response_body,
    get_total_hits,
    is_valid_search_response,
)

logger = get_logger(__name__)


class ESListingInfoQueryService:
    """
    Look up listing info records by pretty-url name or by concept IDs.

    The service keeps no per-call state; one instance may be shared by
    concurrent callers.
    """

    def __init__(
        self,
        es: AsyncElasticsearch,
        api_options: ListingPageAPIOptions,
        log: Optional[logging.Logger] = None,
    ):
        self._es = es
        self._api_options = api_options
        self._logger = log or logger

    @property
    def alias_name(self) -> str:
        return self._api_options.listing_info_alias_name

    async def get_by_pretty_url_name(self, pretty_url_name: str) -> Optional[ListingInfo]:
        """
        Retrieve the listing info whose pretty-url name exactly matches the parameter.

        Args:
            pretty_url_name: The pretty-url name of the record to be retrieved

        Returns:
            A ListingInfo, or None if no exact match is found

        Raises:
            APIInternalException: If the search fails or the response is invalid
        """
        body = await self._search(
            build_pretty_url_name_query(pretty_url_name),
            "Invalid response when searching for pretty URL name '%s'.",
            pretty_url_name,
        )

        total = get_total_hits(body)
        hits = get_hits(body)
        if total == 0 or not hits:
            return None

        if total > 1:
            self._logger.warning(
                "Found multiple records for pretty URL name '%s'.", pretty_url_name
            )

        return self._map(lambda: listing_info_from_source(hits[0].get("_source", {})))

    async def get_by_ids(self, ccodes: Sequence[str]) -> Optional[List[ListingInfo]]:
        """
        Retrieve listing info records whose concept IDs match the c-code list.

        Args:
            ccodes: The c-code list of the records to be retrieved

        Returns:
            List of ListingInfo in engine order, or None if nothing matched

        Raises:
            ValueError: If ccodes is None or a bare string
            APIInternalException: If the search fails or the response is invalid
        """
        if ccodes is None or isinstance(ccodes, str):
            raise ValueError("ccodes must be a list of c-codes")

        ccodes = list(ccodes)
        body = await self._search(
            build_concept_ids_query(ccodes),
            "Invalid response when searching for c-code(s) '%s'.",
            ",".join(ccodes),
        )

        hits = get_hits(body)
        if not hits:
            return None

        return self._map(lambda: listing_infos_from_hits(hits))

    def _map(self, mapper):
        try:
            return mapper()
        except (ValidationError, TypeError, ValueError) as e:
            self._logger.error(
                "Malformed listing info document in index: '%s'.",
                self.alias_name,
                exc_info=e,
            )
            raise APIInternalException() from e

    async def _search(self, query: dict, invalid_message: str, key: str):
        try:
            resp = await self._es.search(index=[self.alias_name], query=query)
        except Exception as e:
            self._logger.error(
                "Error searching index: '%s'.", self.alias_name, exc_info=e
            )
            raise APIInternalException() from e

        body = get_response_body(resp)
        if not is_valid_search_response(body):
            self._logger.error(invalid_message, key)
            self._logger.error(get_debug_information(body))
            raise APIInternalException()

        return body
