"""In-memory stand-in for the supabase client's table query builder.

Supports the subset of the fluent API Bandroom uses: select / insert /
update / delete, eq / lt / gte filters, order, limit, and exact delete
counts. Every executed query is recorded in ``FakeSupabase.calls``.
"""

import copy
import itertools
from types import SimpleNamespace
from typing import Any, Callable, Dict, List, Optional
from unittest.mock import MagicMock

from postgrest.exceptions import APIError


class FakeQuery:
    def __init__(self, db: "FakeSupabase", table: str):
        self.db = db
        self.table = table
        self.op = "select"
        self.columns = "*"
        self.payload: Any = None
        self.count_mode: Optional[str] = None
        self.filters: List[tuple] = []
        self.orders: List[tuple] = []
        self.limit_n: Optional[int] = None

    # Operations

    def select(self, columns: str = "*", count: Optional[str] = None):
        self.op = "select"
        self.columns = columns
        self.count_mode = count
        return self

    def insert(self, payload):
        self.op = "insert"
        self.payload = payload
        return self

    def update(self, payload):
        self.op = "update"
        self.payload = payload
        return self

    def delete(self, count: Optional[str] = None):
        self.op = "delete"
        self.count_mode = count
        return self

    # Filters / modifiers

    def eq(self, column: str, value):
        self.filters.append(("eq", column, value))
        return self

    def lt(self, column: str, value):
        self.filters.append(("lt", column, value))
        return self

    def gte(self, column: str, value):
        self.filters.append(("gte", column, value))
        return self

    def order(self, column: str, desc: bool = False):
        self.orders.append((column, desc))
        return self

    def limit(self, n: int):
        self.limit_n = n
        return self

    def _matches(self, row: Dict[str, Any]) -> bool:
        for op, column, value in self.filters:
            actual = row.get(column)
            if op == "eq" and actual != value:
                return False
            if op == "lt" and not (actual is not None and actual < value):
                return False
            if op == "gte" and not (actual is not None and actual >= value):
                return False
        return True

    def _project(self, row: Dict[str, Any]) -> Dict[str, Any]:
        if self.columns.strip() == "*":
            return copy.deepcopy(row)
        wanted = [c.strip() for c in self.columns.split(",")]
        return {c: row.get(c) for c in wanted}

    def execute(self):
        self.db.calls.append((self.table, self.op, list(self.filters)))
        rows = self.db.tables.setdefault(self.table, [])

        if self.db.fail_when is not None:
            error = self.db.fail_when(self.table, self.op, self.payload)
            if error:
                raise APIError({"message": error, "code": "FAKE", "hint": None, "details": None})

        if self.op == "insert":
            payloads = self.payload if isinstance(self.payload, list) else [self.payload]
            inserted = []
            for payload in payloads:
                row = dict(payload)
                row.setdefault("id", f"{self.table}-{next(self.db.ids)}")
                rows.append(row)
                inserted.append(copy.deepcopy(row))
            return SimpleNamespace(data=inserted, count=None)

        matched = [row for row in rows if self._matches(row)]

        if self.op == "update":
            for row in matched:
                row.update(self.payload)
            return SimpleNamespace(data=copy.deepcopy(matched), count=None)

        if self.op == "delete":
            self.db.tables[self.table] = [row for row in rows if not self._matches(row)]
            count = len(matched) if self.count_mode == "exact" else None
            return SimpleNamespace(data=copy.deepcopy(matched), count=count)

        for column, desc in reversed(self.orders):
            matched.sort(key=lambda r: (r.get(column) is None, r.get(column)), reverse=desc)
        if self.limit_n is not None:
            matched = matched[: self.limit_n]
        data = [self._project(row) for row in matched]
        count = len(data) if self.count_mode == "exact" else None
        return SimpleNamespace(data=data, count=count)


class FakeSupabase:
    """Minimal supabase ``Client`` double backed by dict rows."""

    def __init__(self, tables: Optional[Dict[str, List[Dict[str, Any]]]] = None):
        self.tables: Dict[str, List[Dict[str, Any]]] = copy.deepcopy(tables or {})
        self.calls: List[tuple] = []
        self.ids = itertools.count(1)
        # (table, op, payload) -> error message to raise APIError, or None
        self.fail_when: Optional[Callable[[str, str, Any], Optional[str]]] = None
        self.auth = MagicMock()
        self.postgrest = MagicMock()

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def rows(self, table: str) -> List[Dict[str, Any]]:
        return self.tables.get(table, [])

    def count_calls(self, table: str, op: str) -> int:
        return sum(1 for t, o, _ in self.calls if t == table and o == op)
