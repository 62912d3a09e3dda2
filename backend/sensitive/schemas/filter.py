from pydantic import BaseModel, Field


class TextRequest(BaseModel):
    text: str


class SearchRequest(BaseModel):
    text: str
    with_replacements: bool = False


class FilterResponse(BaseModel):
    text: str
    filtered: str


class CheckResponse(BaseModel):
    text: str
    contains: bool


class MatchResponse(BaseModel):
    start: int = Field(ge=0)
    length: int = Field(ge=1)
    text: str
    replacement: str | None = None


class ModerationResponse(BaseModel):
    safe: bool
    reason: str | None = None


class TrieStatusResponse(BaseModel):
    word_count: int
    cache_enabled: bool
    cache_key: str
    snapshot_saved: bool | None = None
    snapshot_cleared: bool | None = None
