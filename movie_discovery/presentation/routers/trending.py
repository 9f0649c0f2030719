from typing import Annotated

from fastapi import APIRouter, Depends

from movie_discovery.applications.interfaces.dtos.trending import TrendingList
from movie_discovery.applications.services.search_dto_mapper import SearchDtoMapper
from movie_discovery.applications.services.search_orchestrator import SearchOrchestrator
from movie_discovery.infrastructure.config.dependencies import get_search_orchestrator

router = APIRouter(prefix="/trending", tags=["trending"])


@router.get("/", response_model=TrendingList)
async def read_trending(orchestrator: Annotated[SearchOrchestrator, Depends(get_search_orchestrator)]):
    return TrendingList(trending=SearchDtoMapper.to_trending_list(orchestrator.trending))
