"""
FastAPI dependencies providing one service per resource.

Repositories are created per request; they hold no state besides the
database location.  Tests replace ``get_*_repository`` through
``app.dependency_overrides``.
"""

from typing import Annotated

from fastapi import Depends

from integrations_api.app.repositories import (
    AssignorRepository,
    PayableRepository,
    UserRepository,
)
from integrations_api.app.services import ResourceService, UserService


def get_user_repository() -> UserRepository:
    return UserRepository()


def get_payable_repository() -> PayableRepository:
    return PayableRepository()


def get_assignor_repository() -> AssignorRepository:
    return AssignorRepository()


def get_user_service(
    repository: UserRepository = Depends(get_user_repository),
) -> UserService:
    return UserService(repository)


def get_payable_service(
    repository: PayableRepository = Depends(get_payable_repository),
) -> ResourceService:
    return ResourceService(repository, entity="Payable", collection="Payables")


def get_assignor_service(
    repository: AssignorRepository = Depends(get_assignor_repository),
) -> ResourceService:
    return ResourceService(repository, entity="Assignor", collection="Assignors")


UserServiceDep = Annotated[UserService, Depends(get_user_service)]
PayableServiceDep = Annotated[ResourceService, Depends(get_payable_service)]
AssignorServiceDep = Annotated[ResourceService, Depends(get_assignor_service)]
