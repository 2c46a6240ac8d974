"""Company API client.

This module defines a small client wrapper around the Company API
REST endpoints.  It uses the ``requests`` library internally and
exposes one method per endpoint:

* :meth:`CompanyAPI.hello` – fetch the plain text greeting.
* :meth:`CompanyAPI.list_companies` – return all companies.
* :meth:`CompanyAPI.get_company` – fetch a single company by id.
* :meth:`CompanyAPI.create_company` – create a company with a name.
* :meth:`CompanyAPI.update_company` – rename an existing company.
* :meth:`CompanyAPI.delete_company` – delete a company.

None of the methods raise on HTTP or network failures.  Each returns a
tuple ``(result, error)``; ``error`` is ``None`` on success or a
dictionary with the keys ``status_code`` and ``message``.  The message
is taken from the ``error`` field of the server's JSON error body.

The module can also be run as a command line tool::

    python company_api_client.py --base-url http://localhost:3004 create "Acme"
    python company_api_client.py list
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:3004"

Error = Dict[str, Any]


class CompanyAPI:
    """Client for interacting with the Company API."""

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_BASE_URL,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:3004``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None, expect_json: bool = True
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/companies``).
            json_body: JSON body to send with the request.
            expect_json: Parse the response body as JSON (otherwise the
                raw text is returned).
        Returns:
            A tuple ``(data, error)``.  ``data`` is ``None`` for empty
            responses such as ``204 No Content``.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if not response.content:
                return None, None
            if expect_json:
                return response.json(), None
            return response.text, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("error") or err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _company_path(company_id: str) -> str:
        return f"/companies/{quote(str(company_id), safe='')}"

    # ------------------------------------------------------------------
    # Company operations
    # ------------------------------------------------------------------
    def hello(self) -> Tuple[Optional[str], Optional[Error]]:
        """Fetch the greeting served at ``/``."""
        return self._request("GET", "/", expect_json=False)

    def list_companies(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all companies.

        Returns:
            A tuple ``(companies, error)``; ``companies`` is empty on failure.
        """
        data, error = self._request("GET", "/companies")
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    def get_company(self, company_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single company by ID."""
        return self._request("GET", self._company_path(company_id))

    def create_company(self, name: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a company called *name*."""
        return self._request("POST", "/companies", json_body={"name": name})

    def update_company(
        self, company_id: str, name: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Rename the company *company_id* to *name*."""
        return self._request("PUT", self._company_path(company_id), json_body={"name": name})

    def delete_company(self, company_id: str) -> Tuple[bool, Optional[Error]]:
        """Delete a company.

        Returns:
            A tuple ``(deleted, error)``.
        """
        _, error = self._request("DELETE", self._company_path(company_id))
        if error:
            return False, error
        return True, None


# ----------------------------------------------------------------------
# Command line interface
# ----------------------------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Command line client for the Company API.")
    ap.add_argument(
        "--base-url",
        default=os.getenv("COMPANY_API_BASE_URL", DEFAULT_BASE_URL),
        help="API base URL (default: $COMPANY_API_BASE_URL or %(default)s)",
    )
    sub = ap.add_subparsers(dest="command", required=True)
    sub.add_parser("hello", help="Print the server greeting")
    sub.add_parser("list", help="List all companies")
    get_p = sub.add_parser("get", help="Show one company")
    get_p.add_argument("id")
    create_p = sub.add_parser("create", help="Create a company")
    create_p.add_argument("name")
    update_p = sub.add_parser("update", help="Rename a company")
    update_p.add_argument("id")
    update_p.add_argument("name")
    delete_p = sub.add_parser("delete", help="Delete a company")
    delete_p.add_argument("id")
    return ap


def main(argv: Optional[List[str]] = None, api: Optional[CompanyAPI] = None) -> int:
    args = build_parser().parse_args(argv)
    api = api or CompanyAPI(base_url=args.base_url)

    if args.command == "hello":
        result, error = api.hello()
    elif args.command == "list":
        result, error = api.list_companies()
    elif args.command == "get":
        result, error = api.get_company(args.id)
    elif args.command == "create":
        result, error = api.create_company(args.name)
    elif args.command == "update":
        result, error = api.update_company(args.id, args.name)
    else:
        deleted, error = api.delete_company(args.id)
        result = {"deleted": deleted}

    if error:
        print(f"[!] {error['message']} (status {error['status_code']})", file=sys.stderr)
        return 1
    if isinstance(result, str):
        print(result)
    else:
        print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
