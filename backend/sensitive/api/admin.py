"""Administrative trie and snapshot operations."""

import logging

from fastapi import APIRouter, Depends

from sensitive.auth import require_admin
from sensitive.engine.registry import get_sensitive_filter
from sensitive.engine.sensitive_filter import SensitiveFilter
from sensitive.schemas.filter import TrieStatusResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["admin"], dependencies=[Depends(require_admin)])


def _status(engine: SensitiveFilter, **extra) -> TrieStatusResponse:
    return TrieStatusResponse(
        word_count=engine.store.count_words(),
        cache_enabled=engine.cache is not None,
        cache_key=engine.cache_key,
        **extra,
    )


@router.get("/trie", response_model=TrieStatusResponse)
def trie_status(engine: SensitiveFilter = Depends(get_sensitive_filter)):
    return _status(engine)


@router.post("/trie/reset", response_model=TrieStatusResponse)
def reset_trie(engine: SensitiveFilter = Depends(get_sensitive_filter)):
    """Rebuild the trie from the word source and refresh the snapshot."""
    engine.reset_trie()
    logger.info("Trie rebuilt via admin endpoint")
    return _status(engine, snapshot_saved=engine.cache is not None)


@router.put("/snapshot", response_model=TrieStatusResponse)
def save_snapshot(engine: SensitiveFilter = Depends(get_sensitive_filter)):
    return _status(engine, snapshot_saved=engine.save_snapshot())


@router.delete("/snapshot", response_model=TrieStatusResponse)
def clear_snapshot(engine: SensitiveFilter = Depends(get_sensitive_filter)):
    return _status(engine, snapshot_cleared=engine.clear_snapshot())
