"""
Buyers and sellers persistence (raw SQL).

Both tables share one shape, so the queries live in private helpers keyed by
table name. Returned rows never include the password column.
"""

from __future__ import annotations

from core import db

_ACCOUNT_TABLES = frozenset({"buyers", "sellers"})
_ACCOUNT_COLUMNS = "id, name, email, created_at, updated_at"


def _table(name: str) -> str:
    # Table names cannot be bound as parameters; only allow known ones.
    if name not in _ACCOUNT_TABLES:
        raise ValueError(f"Unknown account table: {name!r}")
    return name


async def _list_accounts(table: str) -> list[dict]:
    return await db.fetch_all(
        f"""
        SELECT {_ACCOUNT_COLUMNS}
        FROM {_table(table)}
        ORDER BY id
        """
    )


async def _create_account(
    table: str,
    *,
    name: str | None,
    email: str | None,
    password_hash: str | None,
) -> dict:
    row = await db.fetch_one(
        f"""
        INSERT INTO {_table(table)} (name, email, password)
        VALUES ($1, $2, $3)
        RETURNING {_ACCOUNT_COLUMNS}
        """,
        name,
        email,
        password_hash,
    )
    if row is None:
        raise RuntimeError(f"Failed to insert into {table}.")
    return row


async def _delete_account(table: str, account_id: int) -> dict | None:
    return await db.fetch_one(
        f"""
        DELETE FROM {_table(table)}
        WHERE id = $1
        RETURNING {_ACCOUNT_COLUMNS}
        """,
        account_id,
    )


async def list_buyers() -> list[dict]:
    return await _list_accounts("buyers")


async def create_buyer(*, name: str | None, email: str | None, password_hash: str | None) -> dict:
    return await _create_account("buyers", name=name, email=email, password_hash=password_hash)


async def delete_buyer(buyer_id: int) -> dict | None:
    return await _delete_account("buyers", buyer_id)


async def list_sellers() -> list[dict]:
    return await _list_accounts("sellers")


async def create_seller(*, name: str | None, email: str | None, password_hash: str | None) -> dict:
    return await _create_account("sellers", name=name, email=email, password_hash=password_hash)


async def delete_seller(seller_id: int) -> dict | None:
    return await _delete_account("sellers", seller_id)
