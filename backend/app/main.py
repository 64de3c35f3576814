from fastapi import FastAPI
from fastapi.concurrency import run_in_threadpool
from contextlib import asynccontextmanager

from backend.app.config import AppConfig
from backend.app.api.graphql_schema import create_graphql_router
from backend.app.api.routes_store import router as store_router
from backend.app.dependencies import get_store
from backend.app.middleware import install_latency_middleware


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifecycle hooks.

    Seeds the store once at startup so the first request
    does not pay for it. Seeding fetches photos over HTTP, so it
    runs off the event loop.
    """
    await run_in_threadpool(get_store)

    yield


def create_app(config: AppConfig) -> FastAPI:
    app = FastAPI(
        title=config.app_name,
        lifespan=lifespan,
    )

    install_latency_middleware(app, config.latency_ms)

    app.include_router(
        create_graphql_router(graphiql_enabled=config.graphiql_enabled),
        prefix=config.graphql_path,
        tags=["graphql"],
    )

    app.include_router(
        store_router,
        prefix=f"{config.api_prefix}/store",
        tags=["store"],
    )

    return app


config = AppConfig()
app = create_app(config)
