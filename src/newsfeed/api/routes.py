"""API routes for newsfeed.

Exposes the feed pipeline as JSON endpoints.
"""

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from newsfeed.config.settings import Settings
from newsfeed.exceptions import ErrorCode
from newsfeed.models.news import FeedSuccess
from newsfeed.services.news_service import NewsService

router = APIRouter(prefix="/api", tags=["news"])


class SourceInfo(BaseModel):
    """Public view of a registered source."""

    key: str = Field(..., description="Source key accepted by /api/news")
    title: str = Field(..., description="Human-readable name")


def get_news_service(request: Request) -> NewsService:
    return request.app.state.news_service


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


@router.get("/news")
async def get_news(
    src: str | None = Query(default=None, description="Source key, e.g. nhk"),
    service: NewsService = Depends(get_news_service),
    settings: Settings = Depends(get_app_settings),
) -> JSONResponse:
    """Fetch and normalize one source.

    Pipeline failures are domain-level and answered with 200 so the UI
    always gets a renderable body. Only an unknown source is a client
    error.
    """
    source_key = (src or settings.default_source).strip().lower()
    result = await service.run(source_key)
    body = result.model_dump(mode="json", by_alias=True)

    if isinstance(result, FeedSuccess):
        cache_control = (
            f"public, s-maxage={settings.cache_s_maxage}, "
            f"stale-while-revalidate={settings.cache_stale_while_revalidate}"
        )
        return JSONResponse(body, headers={"Cache-Control": cache_control})

    if result.code is ErrorCode.UNKNOWN_SRC:
        body["allowed"] = service.registry.keys()
        return JSONResponse(body, status_code=status.HTTP_400_BAD_REQUEST)

    return JSONResponse(body, headers={"Cache-Control": "no-store"})


@router.get("/sources", response_model=list[SourceInfo])
async def list_sources(service: NewsService = Depends(get_news_service)) -> list[SourceInfo]:
    """List selectable sources."""
    return [SourceInfo(key=s.key, title=s.title) for s in service.registry.sources()]
