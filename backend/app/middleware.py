import asyncio

from fastapi import FastAPI, Request


def install_latency_middleware(app: FastAPI, latency_ms: int) -> None:
    """
    Delay every request by `latency_ms` before handling it.

    Lets clients exercise their loading states against a local server.
    """
    if latency_ms <= 0:
        return

    delay = latency_ms / 1000.0

    @app.middleware("http")
    async def add_latency(request: Request, call_next):
        await asyncio.sleep(delay)
        return await call_next(request)
