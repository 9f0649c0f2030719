from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends

from movie_discovery.applications.interfaces.dtos.search import QuerySchema, SearchStatePublic
from movie_discovery.applications.services.search_dto_mapper import SearchDtoMapper
from movie_discovery.applications.services.search_orchestrator import SearchOrchestrator
from movie_discovery.infrastructure.config.dependencies import get_search_dto_mapper, get_search_orchestrator

router = APIRouter(prefix="/search", tags=["search"])

SearchOrchestratorDep = Annotated[SearchOrchestrator, Depends(get_search_orchestrator)]
SearchDtoMapperDep = Annotated[SearchDtoMapper, Depends(get_search_dto_mapper)]


@router.get("/", response_model=SearchStatePublic)
async def read_search_state(orchestrator: SearchOrchestratorDep, mapper: SearchDtoMapperDep):
    return mapper.to_search_state_public(orchestrator.state())


@router.put("/query", status_code=HTTPStatus.ACCEPTED, response_model=SearchStatePublic)
async def set_search_query(payload: QuerySchema, orchestrator: SearchOrchestratorDep, mapper: SearchDtoMapperDep):
    orchestrator.set_query(payload.query)
    return mapper.to_search_state_public(orchestrator.state())
