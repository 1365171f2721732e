import logging

from staybook.mappers.property_search import filter_options, search_properties
from staybook.schemas.property import Property, SearchCriteria, SearchFilters, SortSpec
from staybook.schemas.responses import FilterOptions, SearchResponse
from staybook.services.rental_api import RentalApiService

logger = logging.getLogger(__name__)


class SearchService:
    def __init__(self, api: RentalApiService):
        self._api = api

    async def search(
        self,
        filters: SearchFilters,
        sort: SortSpec,
        criteria: SearchCriteria | None = None,
    ) -> SearchResponse:
        candidates = await self._api.search_properties(criteria)
        results = search_properties(candidates, filters, sort)
        logger.info("Found %d of %d properties", len(results), len(candidates))
        return SearchResponse(total_found=len(results), properties=results)

    async def filter_options(self, criteria: SearchCriteria | None = None) -> FilterOptions:
        candidates = await self._api.search_properties(criteria)
        return filter_options(candidates)

    async def property_details(self, property_id: int) -> Property:
        return await self._api.get_property(property_id)
