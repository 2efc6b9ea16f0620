from studio.domains.vcs.entities import Commit, CommitLog, CommitInfo, RepoStatus
from studio.domains.vcs.dirty import is_dirty, deep_equal, normalize
from studio.domains.vcs.schemas import CommitCreate, CommitResponse
from studio.domains.vcs.services import CommitLogService

__all__ = [
    "Commit", "CommitLog", "CommitInfo", "RepoStatus",
    "is_dirty", "deep_equal", "normalize",
    "CommitCreate", "CommitResponse",
    "CommitLogService"
]
