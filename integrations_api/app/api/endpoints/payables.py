"""
Payable endpoints, mounted under ``/integrations/payable``.

Payables carry a client supplied ``id``; creating one twice yields
HTTP 400, touching an unknown id yields HTTP 404.
"""

from typing import List

from fastapi import APIRouter, status

from integrations_api.app.api.deps import PayableServiceDep
from integrations_api.app.schemas.payable import PayableCreate, PayableRead, PayableUpdate

router = APIRouter()


@router.post("", response_model=PayableRead, status_code=status.HTTP_201_CREATED)
async def create_payable(body: PayableCreate, service: PayableServiceDep) -> PayableRead:
    return await service.create(body)


@router.get("/{payable_id}", response_model=PayableRead)
async def get_payable(payable_id: str, service: PayableServiceDep) -> PayableRead:
    return await service.get_by_id(payable_id)


@router.get("", response_model=List[PayableRead])
async def list_payables(service: PayableServiceDep) -> List[PayableRead]:
    """Return every payable; 404 when there are none."""
    return await service.get_all()


@router.put("/{payable_id}", response_model=PayableRead)
async def update_payable(
    payable_id: str,
    body: PayableUpdate,
    service: PayableServiceDep,
) -> PayableRead:
    return await service.update(payable_id, body)


@router.delete("/{payable_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_payable(payable_id: str, service: PayableServiceDep) -> None:
    await service.delete(payable_id)
