from fastapi import APIRouter, Depends, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from sensitive.config import settings
from sensitive.engine.registry import get_sensitive_filter
from sensitive.engine.sensitive_filter import SensitiveFilter
from sensitive.middleware.content_filter import ContentFilter
from sensitive.schemas.filter import (
    CheckResponse,
    FilterResponse,
    MatchResponse,
    ModerationResponse,
    SearchRequest,
    TextRequest,
)

router = APIRouter(prefix="/api", tags=["filter"])
limiter = Limiter(key_func=get_remote_address)


@router.post("/filter", response_model=FilterResponse)
@limiter.limit(settings.filter_rate_limit)
def filter_text(
    request: Request,
    body: TextRequest,
    engine: SensitiveFilter = Depends(get_sensitive_filter),
):
    return FilterResponse(text=body.text, filtered=engine.filter(body.text))


@router.post("/check", response_model=CheckResponse)
@limiter.limit(settings.filter_rate_limit)
def check_text(
    request: Request,
    body: TextRequest,
    engine: SensitiveFilter = Depends(get_sensitive_filter),
):
    return CheckResponse(text=body.text, contains=engine.check(body.text))


@router.post("/search", response_model=list[MatchResponse])
@limiter.limit(settings.filter_rate_limit)
def search_text(
    request: Request,
    body: SearchRequest,
    engine: SensitiveFilter = Depends(get_sensitive_filter),
):
    return [
        MatchResponse(
            start=match.start,
            length=match.length,
            text=match.text,
            replacement=match.replacement if body.with_replacements else None,
        )
        for match in engine.matches(body.text)
    ]


@router.post("/moderate", response_model=ModerationResponse)
@limiter.limit(settings.filter_rate_limit)
def moderate_text(
    request: Request,
    body: TextRequest,
    engine: SensitiveFilter = Depends(get_sensitive_filter),
):
    is_safe, reason = ContentFilter(engine).check_content(body.text)
    return ModerationResponse(safe=is_safe, reason=reason)
