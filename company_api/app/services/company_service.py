"""
Service layer for company records.

This module provides the CRUD operations exposed by the API.  Every
call reads the full collection from the :class:`CompanyStore`; the
mutating calls transform it in memory and write it back whole.

Records are kept as plain dictionaries so that any extra fields found
in the data file survive a read/update/write cycle unchanged.  Only
``name`` and ``updatedAt`` are ever modified after creation.

Not-found is a normal outcome and is reported as ``None`` (or
``False`` for deletion).  Store write errors propagate to the caller.

Mutations hold a per-instance lock around their read-modify-write
cycle.  Under uvicorn the ``async def`` handlers already run one at a
time on the event loop thread, so the lock matters for callers that
share one service across threads (scripts, threaded workers).
Separate processes sharing one data file are not coordinated: the last
writer wins.
"""

from __future__ import annotations

import logging
import threading
import uuid
from datetime import datetime, timezone
from typing import Callable, List, Optional

from company_api.app.core.store import Company, CompanyStore


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """Render *moment* as UTC ISO-8601 with milliseconds, e.g. ``2025-01-01T12:00:00.000Z``."""
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class CompanyService:
    """Create, read, update and delete companies stored in a JSON file."""

    def __init__(
        self,
        store: CompanyStore,
        logger: Optional[logging.Logger] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self._store = store
        self._log = logger or logging.getLogger(__name__)
        self._clock = clock or _utcnow
        self._write_lock = threading.Lock()

    def _now(self) -> str:
        return format_timestamp(self._clock())

    @staticmethod
    def _find_index(companies: List[Company], company_id: str) -> int:
        for index, company in enumerate(companies):
            if company.get("id") == company_id:
                return index
        return -1

    def create(self, name: str) -> Company:
        """Append a new company and return it.

        Duplicate names are allowed; the id is a fresh UUID4 string.
        """
        with self._write_lock:
            companies = self._store.read_all()
            timestamp = self._now()
            company: Company = {
                "id": str(uuid.uuid4()),
                "name": name,
                "createdAt": timestamp,
                "updatedAt": timestamp,
            }
            companies.append(company)
            self._store.write_all(companies)
        self._log.info("Company created: %s - %s", company["id"], company["name"])
        return company

    def get_all(self) -> List[Company]:
        companies = self._store.read_all()
        self._log.info("Retrieved %d companies", len(companies))
        return companies

    def get_by_id(self, company_id: str) -> Optional[Company]:
        """Return the company with *company_id*, or ``None``."""
        companies = self._store.read_all()
        index = self._find_index(companies, company_id)
        if index == -1:
            self._log.warning("Company not found: %s", company_id)
            return None
        company = companies[index]
        self._log.info("Company retrieved: %s - %s", company_id, company.get("name"))
        return company

    def update(self, company_id: str, name: str) -> Optional[Company]:
        """Rename a company and refresh its ``updatedAt`` timestamp.

        Returns the updated record, or ``None`` when the id is unknown.
        """
        with self._write_lock:
            companies = self._store.read_all()
            index = self._find_index(companies, company_id)
            if index == -1:
                self._log.warning("Company not found for update: %s", company_id)
                return None
            company = companies[index]
            company["name"] = name
            company["updatedAt"] = self._now()
            self._store.write_all(companies)
        self._log.info("Company updated: %s - %s", company_id, name)
        return company

    def delete(self, company_id: str) -> bool:
        """Remove a company.  Returns ``False`` if it did not exist."""
        with self._write_lock:
            companies = self._store.read_all()
            index = self._find_index(companies, company_id)
            if index == -1:
                self._log.warning("Company not found for deletion: %s", company_id)
                return False
            deleted = companies.pop(index)
            self._store.write_all(companies)
        self._log.info("Company deleted: %s - %s", company_id, deleted.get("name"))
        return True
