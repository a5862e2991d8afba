from __future__ import annotations

from typing import Any, List, Optional, Protocol, TypeVar

KeyT = TypeVar("KeyT", contravariant=True)
RecordT = TypeVar("RecordT")


class Repository(Protocol[KeyT, RecordT]):
    """
    Abstraction over persistence for one resource.

    Implementations are responsible for:
    - Mapping between storage rows and the resource's read schema.
    - Hiding any SQL / driver details from the handlers.

    Uniqueness of keys is checked by the caller before ``create``;
    implementations may additionally enforce it in storage.
    """

    async def find_by_id(self, record_id: KeyT) -> Optional[RecordT]:
        """Return the record with the given id, or None if not found."""

        ...

    async def find_all(self) -> List[RecordT]:
        """Return every stored record."""

        ...

    async def create(self, data: Any) -> RecordT:
        """Persist a new record and return it as stored."""

        ...

    async def update(self, record_id: KeyT, data: Any) -> RecordT:
        """Replace the stored fields of an existing record and return it."""

        ...

    async def delete(self, record_id: KeyT) -> None:
        """Remove the record with the given id."""

        ...


class UserLookup(Protocol):
    """Extra lookup offered by the user repository."""

    async def find_by_login(self, login: str) -> Optional[Any]:
        """Return the user with the given login, or None if not found."""

        ...
