"""
Pytest fixtures and configuration for Coffee Journal Backend tests

Provides an in-memory stand-in for the Supabase client so services,
repositories and API routes can be tested without a database.

Author: TM3
Date: 2025-11-02
"""
import uuid
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient
from postgrest.exceptions import APIError

from app.core.database import get_supabase
from app.main import app
from app.services.catalog_service import CatalogService


class FakeResponse:
    """Mimics postgrest's APIResponse (only .data is used)"""

    def __init__(self, data):
        self.data = data


class FakeQuery:
    """
    Tiny subset of the postgrest query builder

    Supports insert / select / delete with eq filters, order and limit.
    """

    def __init__(self, client, table):
        self.client = client
        self.table = table
        self.action = None
        self.payload = None
        self.filters = []
        self.order_by = None
        self.descending = False
        self.row_limit = None

    def insert(self, record):
        self.action = "insert"
        self.payload = record
        return self

    def select(self, *columns):
        self.action = "select"
        return self

    def delete(self):
        self.action = "delete"
        return self

    def eq(self, column, value):
        self.filters.append((column, value))
        return self

    def order(self, column, desc=False):
        self.order_by = column
        self.descending = desc
        return self

    def limit(self, size):
        self.row_limit = size
        return self

    def _matches(self, row):
        return all(str(row.get(column)) == str(value) for column, value in self.filters)

    def execute(self):
        self.client.calls.append((self.table, self.action, self.payload, list(self.filters)))

        error = self.client.errors.get((self.table, self.action))
        if error is not None:
            raise error

        rows = self.client.tables.setdefault(self.table, [])

        if self.action == "insert":
            return FakeResponse([self.client.store_row(self.table, self.payload)])

        if self.action == "delete":
            deleted = [row for row in rows if self._matches(row)]
            self.client.tables[self.table] = [row for row in rows if not self._matches(row)]
            for row in deleted:
                self.client.cascade(self.table, row)
            return FakeResponse([dict(row) for row in deleted])

        found = [dict(row) for row in rows if self._matches(row)]
        if self.order_by:
            present = [row for row in found if row.get(self.order_by) is not None]
            missing = [row for row in found if row.get(self.order_by) is None]
            present.sort(key=lambda row: row[self.order_by], reverse=self.descending)
            found = present + missing
        if self.row_limit is not None:
            found = found[:self.row_limit]
        return FakeResponse(found)


class FakeSupabaseClient:
    """
    In-memory record store with the same table() entry point as supabase.Client

    - assigns id and created_at on insert
    - rejects coffee_entries rows whose shop_id has no shop (FK)
    - deleting a shop deletes its coffee_entries (ON DELETE CASCADE)
    - `fail(table, action, message)` makes the next calls raise APIError
    """

    def __init__(self):
        self.tables = {"coffee_shops": [], "coffee_entries": []}
        self.calls = []
        self.errors = {}

    def table(self, name):
        return FakeQuery(self, name)

    def fail(self, table, action, message="boom", code="XX000"):
        self.errors[(table, action)] = APIError({
            "message": message,
            "code": code,
            "hint": None,
            "details": None,
        })

    def store_row(self, table, record):
        if table == "coffee_entries":
            shop_ids = {row["id"] for row in self.tables["coffee_shops"]}
            if record.get("shop_id") not in shop_ids:
                raise APIError({
                    "message": 'insert or update on table "coffee_entries" violates foreign key constraint',
                    "code": "23503",
                    "hint": None,
                    "details": None,
                })

        row = dict(record)
        row.setdefault("id", str(uuid.uuid4()))
        row.setdefault("created_at", datetime.now(timezone.utc).isoformat())
        self.tables.setdefault(table, []).append(row)
        return dict(row)

    def cascade(self, table, row):
        if table == "coffee_shops":
            self.tables["coffee_entries"] = [
                entry for entry in self.tables["coffee_entries"]
                if entry.get("shop_id") != row["id"]
            ]

    def add_shop(self, **fields):
        """Seed a shop row directly (bypasses shaping)"""
        record = {"name": "Seed Shop", "vibe": [], "good_for_work": False}
        record.update(fields)
        return self.store_row("coffee_shops", record)

    def add_order(self, shop_id, **fields):
        """Seed a coffee order row directly"""
        record = {"shop_id": shop_id, "coffee_name": "Seed Latte"}
        record.update(fields)
        return self.store_row("coffee_entries", record)

    def calls_for(self, table, action=None):
        return [call for call in self.calls if call[0] == table and (action is None or call[1] == action)]


@pytest.fixture
def fake_client():
    """Fresh in-memory store per test"""
    return FakeSupabaseClient()


@pytest.fixture
def service(fake_client):
    """CatalogService wired to the in-memory store"""
    return CatalogService(fake_client)


@pytest.fixture
def api_client(fake_client):
    """
    TestClient whose Supabase dependency is the in-memory store

    Overrides are cleared after each test.
    """
    app.dependency_overrides[get_supabase] = lambda: fake_client
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def sample_shop_data():
    """
    Provides sample shop form data for tests
    """
    return {
        "name": "Brew & Bean",
        "address": "123 Main St",
        "seating_level": "lots",
        "vibe": "cozy, quiet, modern",
        "good_for_work": True,
    }


@pytest.fixture
def sample_order_data():
    """
    Provides sample coffee order form data (shop_id filled in by the test)
    """
    return {
        "coffee_name": "Vanilla Latte",
        "strength_level": "medium",
        "price": "5.50",
        "rating": "4",
        "tasting_notes": "Smooth and creamy",
        "date_tried": "2025-11-02",
    }
