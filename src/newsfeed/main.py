"""Main application entry point.

Serves the news API, or runs the feed pipeline once from the command line.
"""

import argparse
import asyncio
import json
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from newsfeed.api import router
from newsfeed.config.settings import Settings, get_settings
from newsfeed.services.factory import create_news_service
from newsfeed.services.news_service import NewsService
from newsfeed.utils.logger import configure_logging, get_logger


def create_app(
    settings: Settings | None = None,
    news_service: NewsService | None = None,
) -> FastAPI:
    """Create FastAPI application.

    Args:
        settings: Application settings; loaded from the environment if omitted.
        news_service: Prebuilt service; built from settings if omitted.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger = get_logger("lifespan")
        app.state.settings = settings
        app.state.news_service = news_service or create_news_service(settings)
        logger.info("newsfeed started", sources=app.state.news_service.registry.keys())
        yield
        logger.info("newsfeed stopped")

    app = FastAPI(
        title="newsfeed API",
        description="Normalized news items from RSS, RDF and Atom feeds",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.include_router(router)

    @app.get("/health", tags=["health"])
    async def health() -> dict:
        return {"status": "ok"}

    return app


async def run_cli_once(source_key: str, settings: Settings) -> dict:
    """Run the pipeline once for one source and return the JSON body."""
    logger = get_logger("cli")
    logger.info("Running one-time pipeline", source=source_key)

    service = create_news_service(settings)
    result = await service.run(source_key)
    return result.model_dump(mode="json", by_alias=True)


def main():
    """Main entry point."""
    settings = get_settings()

    parser = argparse.ArgumentParser(description="newsfeed - normalized news feeds")
    parser.add_argument(
        "--once",
        metavar="SOURCE",
        help="Fetch one source, print the result as JSON and exit (no API server)",
    )
    parser.add_argument(
        "--host",
        default=settings.api_host,
        help=f"API server host (default: {settings.api_host})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.api_port,
        help=f"API server port (default: {settings.api_port})",
    )
    args = parser.parse_args()

    configure_logging(
        log_level=settings.log_level,
        json_format=settings.log_json,
    )

    if args.once:
        body = asyncio.run(run_cli_once(args.once, settings))
        print(json.dumps(body, ensure_ascii=False, indent=2))
    else:
        app = create_app(settings)
        uvicorn.run(
            app,
            host=args.host,
            port=args.port,
            log_level=settings.log_level.lower(),
        )


if __name__ == "__main__":
    main()
