from sensitive.models.base import Base
from sensitive.models.snapshot import TrieSnapshotRecord

__all__ = ["Base", "TrieSnapshotRecord"]
