"""Normalized news item and pipeline result models."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field

from newsfeed.exceptions import ERROR_LABELS, ErrorCode, NewsFeedError


class FeedItem(BaseModel):
    """Normalized feed entry.

    All fields are plain strings; a missing value is an empty string.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    title: str = Field(default="", description="Entry title")
    link: str = Field(default="", description="Primary entry URL")
    pub_date: str = Field(
        default="",
        alias="pubDate",
        description="Publication date exactly as the feed declared it",
    )


class ParsedFeed(BaseModel):
    """Result of parsing one feed document."""

    dialect: str = Field(..., description="Matched dialect: rss2, rdf or atom")
    title: str = Field(default="", description="Feed-declared title")
    items: list[FeedItem] = Field(default_factory=list)


class FeedSuccess(BaseModel):
    """Successful pipeline result."""

    model_config = ConfigDict(populate_by_name=True)

    ok: Literal[True] = True
    source_title: str = Field(..., alias="sourceTitle")
    items: list[FeedItem] = Field(default_factory=list)

    @computed_field
    @property
    def count(self) -> int:
        return len(self.items)


class FeedFailure(BaseModel):
    """Failed pipeline result.

    `error` is the stable category for `code`; `message` keeps the
    low-level diagnostic and `sample` the start of an unusable upstream
    body. `items` is always present and empty so callers can render it
    like a success.
    """

    ok: Literal[False] = False
    code: ErrorCode
    error: str
    message: str = ""
    sample: str = ""
    items: list[FeedItem] = Field(default_factory=list)

    @computed_field
    @property
    def count(self) -> int:
        return len(self.items)

    @classmethod
    def from_code(cls, code: ErrorCode, message: str = "", sample: str = "") -> "FeedFailure":
        return cls(code=code, error=ERROR_LABELS[code], message=message, sample=sample)

    @classmethod
    def from_error(cls, exc: NewsFeedError) -> "FeedFailure":
        return cls.from_code(exc.code, str(exc), getattr(exc, "sample", ""))


FeedResult = FeedSuccess | FeedFailure
