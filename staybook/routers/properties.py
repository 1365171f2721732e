from fastapi import APIRouter
from pydantic import BaseModel

from staybook.dependencies import SearchDep
from staybook.schemas.property import Property, SearchCriteria, SearchFilters, SortSpec
from staybook.schemas.responses import FilterOptions, SearchResponse

router = APIRouter(prefix="/properties")


class SearchRequest(BaseModel):
    filters: SearchFilters = SearchFilters()
    sort: SortSpec = SortSpec()
    criteria: SearchCriteria | None = None


@router.post("/search", response_model=SearchResponse)
async def search(service: SearchDep, request: SearchRequest | None = None) -> SearchResponse:
    request = request or SearchRequest()
    return await service.search(request.filters, request.sort, request.criteria)


@router.get("/filter-options", response_model=FilterOptions)
async def get_filter_options(service: SearchDep) -> FilterOptions:
    return await service.filter_options()


@router.get("/{property_id}", response_model=Property)
async def get_property(property_id: int, service: SearchDep) -> Property:
    return await service.property_details(property_id)
