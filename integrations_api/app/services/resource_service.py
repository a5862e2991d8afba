"""
Generic resource handler.

One ``ResourceService`` is instantiated per resource with the
repository it delegates to.  Each operation performs an explicit
existence check and then calls the matching repository method:

* ``create`` rejects a payload whose key is already stored
  (``ALREADY_EXISTS``);
* ``get_by_id``, ``update`` and ``delete`` reject unknown ids
  (``NOT_FOUND``);
* ``get_all`` treats an empty collection as ``NOT_FOUND``.

Any other exception, including faults raised by the repository, is
logged and re-raised as an ``INTERNAL`` ``IntegrationError`` carrying
only the original message.

The check and the write are separate repository calls, so two
concurrent creates for the same key can both pass the check.  The
storage constraints decide the outcome in that case.
"""

import functools
import logging
from typing import Any, Awaitable, Callable, Generic, List, Optional, TypeVar

from integrations_api.app.core.errors import IntegrationError
from integrations_api.app.repositories.base import Repository

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")
F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def _wrap_errors(func: F) -> F:
    """Pass ``IntegrationError`` through, turn anything else into ``INTERNAL``."""

    @functools.wraps(func)
    async def wrapper(self: "ResourceService", *args: Any, **kwargs: Any) -> Any:
        try:
            return await func(self, *args, **kwargs)
        except IntegrationError:
            raise
        except Exception as exc:
            logger.exception("%s.%s failed", self.entity, func.__name__)
            raise IntegrationError.internal(str(exc)) from exc

    return wrapper  # type: ignore[return-value]


class ResourceService(Generic[RecordT]):
    """Existence-check-then-delegate handler for one resource.

    Parameters
    ----------
    repository : Repository
        Persistence backend for the resource.
    entity : str
        Singular display name used in error messages (``"Payable"``).
    collection : str
        Plural display name used when the listing is empty.
    create_key : Callable
        Extracts the identifying key from a create payload.  Defaults
        to the payload's ``id`` attribute.
    find_for_create : Callable, optional
        Lookup used for the duplicate check on create.  Defaults to
        ``repository.find_by_id``.
    """

    def __init__(
        self,
        repository: Repository[Any, RecordT],
        entity: str,
        collection: str,
        create_key: Callable[[Any], Any] = lambda payload: payload.id,
        find_for_create: Optional[Callable[[Any], Awaitable[Optional[RecordT]]]] = None,
    ) -> None:
        self.repository = repository
        self.entity = entity
        self.collection = collection
        self.create_key = create_key
        self.find_for_create = find_for_create or repository.find_by_id

    @_wrap_errors
    async def create(self, payload: Any) -> RecordT:
        existing = await self.find_for_create(self.create_key(payload))
        if existing:
            raise IntegrationError.already_exists(f"{self.entity} already exists")
        return await self.repository.create(payload)

    @_wrap_errors
    async def get_by_id(self, record_id: Any) -> RecordT:
        return await self._require(record_id)

    @_wrap_errors
    async def get_all(self) -> List[RecordT]:
        records = await self.repository.find_all()
        if not records:
            raise IntegrationError.not_found(f"{self.collection} not found")
        return records

    @_wrap_errors
    async def update(self, record_id: Any, payload: Any) -> RecordT:
        await self._require(record_id)
        return await self.repository.update(record_id, payload)

    @_wrap_errors
    async def delete(self, record_id: Any) -> None:
        await self._require(record_id)
        await self.repository.delete(record_id)

    async def _require(self, record_id: Any) -> RecordT:
        record = await self.repository.find_by_id(record_id)
        if not record:
            raise IntegrationError.not_found(f"{self.entity} with ID {record_id} not found")
        return record


class UserService(ResourceService[RecordT]):
    """Resource handler for users.

    Users are unique by ``login``: the duplicate check on create looks
    the login up instead of the id, and ``get_by_login`` is available.
    """

    def __init__(self, repository: Any) -> None:
        super().__init__(
            repository,
            entity="User",
            collection="Users",
            create_key=lambda payload: payload.login,
            find_for_create=repository.find_by_login,
        )

    @_wrap_errors
    async def get_by_login(self, login: str) -> RecordT:
        user = await self.repository.find_by_login(login)
        if not user:
            raise IntegrationError.not_found(f"User with login {login} not found")
        return user
