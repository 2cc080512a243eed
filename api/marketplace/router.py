"""
Buyers and sellers API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter

from . import schemas, service

router = APIRouter()


@router.get("/buyers")
async def list_buyers() -> list[dict]:
    return await service.list_buyers()


@router.post("/buyers")
async def create_buyer(request: schemas.CreateAccountRequest) -> dict:
    return await service.create_buyer(request)


@router.delete("/buyers/{buyer_id}")
async def delete_buyer(buyer_id: int) -> dict:
    return await service.delete_buyer(buyer_id)


@router.get("/sellers")
async def list_sellers() -> list[dict]:
    return await service.list_sellers()


@router.post("/sellers")
async def create_seller(request: schemas.CreateAccountRequest) -> dict:
    return await service.create_seller(request)


@router.delete("/sellers/{seller_id}")
async def delete_seller(seller_id: int) -> dict:
    return await service.delete_seller(seller_id)
