"""
Marketplace business logic.

Scope:
- buyer and seller account creation (password hashed at write time)
- deletion with a confirmation message naming the deleted account
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from . import repository, schemas, security

logger = logging.getLogger(__name__)


def _deleted_message(entity: str, row: dict | None, account_id: int) -> dict[str, str]:
    if row is None:
        logger.info("delete_not_found entity=%s id=%s", entity, account_id)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{entity} not found.",
        )
    logger.info("%s_deleted id=%s", entity.lower(), account_id)
    return {"message": f"{entity} {row['name']} deleted."}


async def list_buyers() -> list[dict]:
    return await repository.list_buyers()


async def create_buyer(payload: schemas.CreateAccountRequest) -> dict:
    row = await repository.create_buyer(
        name=payload.name,
        email=payload.email,
        password_hash=security.hash_password(payload.password),
    )
    logger.info("buyer_created id=%s", row["id"])
    return row


async def delete_buyer(buyer_id: int) -> dict[str, str]:
    row = await repository.delete_buyer(buyer_id)
    return _deleted_message("Buyer", row, buyer_id)


async def list_sellers() -> list[dict]:
    return await repository.list_sellers()


async def create_seller(payload: schemas.CreateAccountRequest) -> dict:
    row = await repository.create_seller(
        name=payload.name,
        email=payload.email,
        password_hash=security.hash_password(payload.password),
    )
    logger.info("seller_created id=%s", row["id"])
    return row


async def delete_seller(seller_id: int) -> dict[str, str]:
    row = await repository.delete_seller(seller_id)
    return _deleted_message("Seller", row, seller_id)
