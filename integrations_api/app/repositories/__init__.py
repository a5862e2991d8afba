"""
Persistence layer.

Each resource has a repository exposing the same small capability set
(``find_by_id``, ``find_all``, ``create``, ``update``, ``delete``);
the user repository adds ``find_by_login``.  The SQLite
implementations in this package are the default; handlers only rely on
the ``Repository`` protocol.
"""

from .assignor_repo import AssignorRepository
from .base import Repository, UserLookup
from .payable_repo import PayableRepository
from .user_repo import UserRepository

__all__ = [
    "AssignorRepository",
    "PayableRepository",
    "Repository",
    "UserLookup",
    "UserRepository",
]
