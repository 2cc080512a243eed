"""
Shared fixtures: an in-memory stand-in for the repository layer.

HTTP tests run without a database; the lifespan (and so the asyncpg pool)
is never started because TestClient is not used as a context manager.
The in-memory tables enforce the NOT NULL and REFERENCES constraints
declared in db/schema.sql, so a write the real database would reject fails
here too.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from itertools import count
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from main import app
from marketplace import repository as marketplace_repository
from todos import repository as todos_repository

SCHEMA_PATH = Path(__file__).resolve().parent.parent / "db" / "schema.sql"

_TABLE_RE = re.compile(r"CREATE TABLE IF NOT EXISTS (\w+) \((.*?)\n\);", re.S)
_REFERENCES_RE = re.compile(r"REFERENCES\s+(\w+)")


@dataclass
class TableConstraints:
    not_null: set[str] = field(default_factory=set)
    references: dict[str, str] = field(default_factory=dict)


def load_schema_constraints(path: Path = SCHEMA_PATH) -> dict[str, TableConstraints]:
    constraints: dict[str, TableConstraints] = {}
    for table, body in _TABLE_RE.findall(path.read_text(encoding="utf-8")):
        table_constraints = TableConstraints()
        for line in body.splitlines():
            line = line.strip().rstrip(",")
            if not line or line.startswith("--"):
                continue
            column = line.split()[0]
            if "NOT NULL" in line or "PRIMARY KEY" in line:
                table_constraints.not_null.add(column)
            match = _REFERENCES_RE.search(line)
            if match:
                table_constraints.references[column] = match.group(1)
        constraints[table] = table_constraints
    return constraints


class ConstraintViolation(Exception):
    pass


def _now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryTables:
    """Rows keyed by id per table, with serial ids like the real schema."""

    def __init__(self) -> None:
        self.rows: dict[str, dict[int, dict]] = {
            "categories": {},
            "todo_lists": {},
            "buyers": {},
            "sellers": {},
        }
        self._ids = {name: count(1) for name in self.rows}
        self.constraints = load_schema_constraints()

    def check(self, table: str, row: dict) -> None:
        constraints = self.constraints[table]
        for column in constraints.not_null:
            if row.get(column) is None:
                raise ConstraintViolation(f"null value in column {column!r} of {table}")
        for column, target in constraints.references.items():
            value = row.get(column)
            if value is not None and value not in self.rows[target]:
                raise ConstraintViolation(f"{table}.{column}={value} has no row in {target}")

    def insert(self, table: str, **fields) -> dict:
        row_id = next(self._ids[table])
        row = {"id": row_id, **fields}
        if table != "categories":
            row["created_at"] = row["updated_at"] = _now()
        self.check(table, row)
        self.rows[table][row_id] = row
        return row

    def update(self, table: str, row_id: int, **fields) -> dict | None:
        row = self.rows[table].get(row_id)
        if row is None:
            return None
        updated = {**row, **fields, "updated_at": _now()}
        self.check(table, updated)
        self.rows[table][row_id] = updated
        return dict(updated)

    def add_category(self, name: str) -> dict:
        return self.insert("categories", name=name)

    def add_todo_list(self, title: str, *, category_id: int | None = None, status: bool = False) -> dict:
        return self.insert(
            "todo_lists",
            title=title,
            description=f"{title} description",
            category_id=category_id,
            status=status,
        )

    def public(self, table: str, row: dict) -> dict:
        return {k: v for k, v in row.items() if k != "password"}

    def all(self, table: str) -> list[dict]:
        return [self.public(table, row) for _, row in sorted(self.rows[table].items())]

    def get(self, table: str, row_id: int) -> dict | None:
        row = self.rows[table].get(row_id)
        return self.public(table, row) if row is not None else None


def _install_todos(monkeypatch: pytest.MonkeyPatch, tables: InMemoryTables) -> None:
    async def list_categories():
        return tables.all("categories")

    async def get_category(category_id):
        return tables.get("categories", category_id)

    async def list_todo_lists():
        return tables.all("todo_lists")

    async def get_todo_list(todo_list_id):
        return tables.get("todo_lists", todo_list_id)

    async def create_todo_list(*, title, description, category_id):
        return tables.insert(
            "todo_lists",
            title=title,
            description=description,
            category_id=category_id,
            status=False,
        )

    async def update_todo_list(todo_list_id, *, title, description, category_id, status):
        return tables.update(
            "todo_lists",
            todo_list_id,
            title=title,
            description=description,
            category_id=category_id,
            status=status,
        )

    for fn in (list_categories, get_category, list_todo_lists, get_todo_list, create_todo_list, update_todo_list):
        monkeypatch.setattr(todos_repository, fn.__name__, fn)


def _install_marketplace(monkeypatch: pytest.MonkeyPatch, tables: InMemoryTables) -> None:
    def accounts(table: str):
        async def list_accounts():
            return tables.all(table)

        async def create_account(*, name, email, password_hash):
            row = tables.insert(table, name=name, email=email, password=password_hash)
            return tables.public(table, row)

        async def delete_account(account_id):
            row = tables.rows[table].pop(account_id, None)
            return tables.public(table, row) if row is not None else None

        return list_accounts, create_account, delete_account

    for table, singular in (("buyers", "buyer"), ("sellers", "seller")):
        list_accounts, create_account, delete_account = accounts(table)
        monkeypatch.setattr(marketplace_repository, f"list_{table}", list_accounts)
        monkeypatch.setattr(marketplace_repository, f"create_{singular}", create_account)
        monkeypatch.setattr(marketplace_repository, f"delete_{singular}", delete_account)


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BCRYPT_ROUNDS", "4")


@pytest.fixture
def tables(monkeypatch: pytest.MonkeyPatch) -> InMemoryTables:
    store = InMemoryTables()
    _install_todos(monkeypatch, store)
    _install_marketplace(monkeypatch, store)
    return store


@pytest.fixture
def client(tables: InMemoryTables) -> TestClient:
    return TestClient(app)
