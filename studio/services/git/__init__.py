from studio.services.git.base import GitBackend, NoopGitBackend
from studio.services.git.local import LocalGitBackend, REPOSITORY_KEY
from studio.services.git.remote import RemoteGitBackend
from studio.services.git.factory import get_git_backend

__all__ = [
    "GitBackend", "NoopGitBackend",
    "LocalGitBackend", "REPOSITORY_KEY",
    "RemoteGitBackend",
    "get_git_backend"
]
