import asyncio
import logging
import sys
from pathlib import Path

from uvicorn import Config, Server

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.app.config import AppConfig  # noqa: E402
from backend.app.main import create_app  # noqa: E402


async def serve(config: AppConfig) -> None:
    server = Server(
        Config(
            app=create_app(config),
            host=config.host,
            port=config.port,
            log_level=config.log_level.lower(),
        )
    )
    await server.serve()


def main() -> None:
    config = AppConfig()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    logging.getLogger("pawgraph.run").info(
        "Starting server at http://localhost:%s%s",
        config.port,
        config.graphql_path,
    )
    asyncio.run(serve(config))


if __name__ == "__main__":
    main()
