"""Assignor endpoints, mounted under ``/integrations/assignor``."""

from typing import List

from fastapi import APIRouter, status

from integrations_api.app.api.deps import AssignorServiceDep
from integrations_api.app.schemas.assignor import AssignorCreate, AssignorRead, AssignorUpdate

router = APIRouter()


@router.post("", response_model=AssignorRead, status_code=status.HTTP_201_CREATED)
async def create_assignor(body: AssignorCreate, service: AssignorServiceDep) -> AssignorRead:
    return await service.create(body)


@router.get("/{assignor_id}", response_model=AssignorRead)
async def get_assignor(assignor_id: str, service: AssignorServiceDep) -> AssignorRead:
    return await service.get_by_id(assignor_id)


@router.get("", response_model=List[AssignorRead])
async def list_assignors(service: AssignorServiceDep) -> List[AssignorRead]:
    return await service.get_all()


@router.put("/{assignor_id}", response_model=AssignorRead)
async def update_assignor(
    assignor_id: str,
    body: AssignorUpdate,
    service: AssignorServiceDep,
) -> AssignorRead:
    return await service.update(assignor_id, body)


@router.delete("/{assignor_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_assignor(assignor_id: str, service: AssignorServiceDep) -> None:
    await service.delete(assignor_id)
