"""Feed source and fetch outcome models."""

from pydantic import BaseModel, ConfigDict, Field, HttpUrl


class FeedSource(BaseModel):
    """Preconfigured feed endpoint selectable by key."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Unique source key, e.g. nhk")
    title: str = Field(..., description="Human-readable name")
    url: HttpUrl = Field(..., description="Feed URL")


class FetchOutcome(BaseModel):
    """Raw upstream response of a single fetch attempt."""

    url: str = Field(..., description="Final URL after redirects")
    status_code: int = Field(..., description="HTTP status code")
    content_type: str = Field(default="", description="Declared Content-Type header")
    text: str = Field(default="", description="Decoded response body")

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300
