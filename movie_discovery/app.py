from contextlib import asynccontextmanager
from http import HTTPStatus

from fastapi import FastAPI

from movie_discovery.applications.interfaces.dtos.message import Message
from movie_discovery.infrastructure.config.dependencies import (
    build_search_orchestrator,
    get_logger,
    get_search_settings,
    get_settings,
)
from movie_discovery.infrastructure.http.client import close_http_client, get_http_client
from movie_discovery.infrastructure.logging.logger import setup_logging
from movie_discovery.presentation.routers import search, trending

setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    orchestrator = build_search_orchestrator(get_settings(), get_search_settings(), get_http_client(), get_logger())
    app.state.search_orchestrator = orchestrator
    orchestrator.start()
    try:
        yield
    finally:
        await orchestrator.close()
        await close_http_client()


app = FastAPI(lifespan=lifespan)

app.include_router(search.router)
app.include_router(trending.router)


@app.get("/", status_code=HTTPStatus.OK, response_model=Message)
def read_root():
    return {"message": "Find movies you'll enjoy without the hassle"}
