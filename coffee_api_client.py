"""Coffee API client.

This module defines a small client wrapper around the Coffee API using
the ``requests`` library.  It exposes one method per endpoint:

* :meth:`CoffeeAPI.list_coffees` – return all coffees.
* :meth:`CoffeeAPI.get_coffee` – fetch a single coffee by id.
* :meth:`CoffeeAPI.create_coffee` – add a coffee.
* :meth:`CoffeeAPI.put_coffee` – update or create a coffee.
* :meth:`CoffeeAPI.delete_coffee` – remove a coffee.
* :meth:`CoffeeAPI.get_droid` and :meth:`CoffeeAPI.get_greeting` –
  read the configuration echo endpoints.

Every method returns a tuple whose last element is ``None`` on success
or a dictionary with ``status_code`` and ``message`` describing the
failure.  A missing coffee is reported by :meth:`get_coffee` as
``(None, None)``, not as an error.

Run the module as a script for a minimal command line interface::

    python coffee_api_client.py --base-url http://localhost:8000 list
    python coffee_api_client.py add "Cafe Cereza"
    python coffee_api_client.py put <id> "Cafe Dulce"
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class CoffeeAPI:
    """Client for the Coffee API."""

    def __init__(
        self,
        *,
        base_url: str,
        prefix: str = "",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8000``.
            prefix: Router prefix configured on the server (``API_PREFIX``).
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per‑request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/") + prefix.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[requests.Response], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(response, error)``.  On failure ``response`` is
            ``None`` and ``error`` describes the problem.  404 responses
            are returned as responses so callers can treat them as
            absence.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(method=method, url=url, json=json_body, timeout=self.timeout)
            if response.status_code == 404:
                return response, None
            response.raise_for_status()
            return response, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not isinstance(message, str):
                message = json.dumps(message)
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _json(response: requests.Response) -> Any:
        return response.json() if response.content else None

    # ------------------------------------------------------------------
    # Coffee operations
    # ------------------------------------------------------------------
    def list_coffees(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        response, error = self._request("GET", "/coffees")
        if error:
            return [], error
        data = self._json(response)
        return (data if isinstance(data, list) else []), None

    def get_coffee(self, coffee_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a coffee; ``(None, None)`` when it does not exist."""
        response, error = self._request("GET", f"/coffees/{coffee_id}")
        if error:
            return None, error
        if response.status_code == 404:
            return None, None
        return self._json(response), None

    def create_coffee(self, name: str, coffee_id: Optional[str] = None) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        payload: Dict[str, Any] = {"name": name}
        if coffee_id:
            payload["id"] = coffee_id
        response, error = self._request("POST", "/coffees", json_body=payload)
        if error:
            return None, error
        return self._json(response), None

    def put_coffee(
        self, coffee_id: str, name: str, body_id: Optional[str] = None
    ) -> Tuple[Optional[Dict[str, Any]], bool, Optional[Error]]:
        """Update or create a coffee.

        Returns:
            A tuple ``(coffee, created, error)``; ``created`` is ``True``
            when the server answered 201.
        """
        payload = {"id": body_id if body_id is not None else coffee_id, "name": name}
        response, error = self._request("PUT", f"/coffees/{coffee_id}", json_body=payload)
        if error:
            return None, False, error
        if response.status_code == 404:
            return None, False, {"status_code": 404, "message": "Coffee endpoint not found"}
        return self._json(response), response.status_code == 201, None

    def delete_coffee(self, coffee_id: str) -> Tuple[bool, Optional[Error]]:
        response, error = self._request("DELETE", f"/coffees/{coffee_id}")
        if error:
            return False, error
        return True, None

    # ------------------------------------------------------------------
    # Configuration endpoints
    # ------------------------------------------------------------------
    def get_droid(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        response, error = self._request("GET", "/droid")
        if error:
            return None, error
        return self._json(response), None

    def get_greeting(self, coffee: bool = False) -> Tuple[Optional[str], Optional[Error]]:
        path = "/greeting/coffee" if coffee else "/greeting"
        response, error = self._request("GET", path)
        if error:
            return None, error
        return response.text, None


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Command line client for the Coffee API.")
    ap.add_argument("--base-url", default="http://localhost:8000", help="Service URL")
    ap.add_argument("--prefix", default="", help="API prefix configured on the server")
    sub = ap.add_subparsers(dest="command", required=True)
    sub.add_parser("list", help="List all coffees")
    get_p = sub.add_parser("get", help="Show one coffee")
    get_p.add_argument("id")
    add_p = sub.add_parser("add", help="Create a coffee")
    add_p.add_argument("name")
    add_p.add_argument("--id", help="Explicit id; generated by the server if omitted")
    put_p = sub.add_parser("put", help="Update or create a coffee")
    put_p.add_argument("id")
    put_p.add_argument("name")
    del_p = sub.add_parser("delete", help="Delete a coffee")
    del_p.add_argument("id")
    args = ap.parse_args(argv)

    api = CoffeeAPI(base_url=args.base_url, prefix=args.prefix)
    if args.command == "list":
        result, error = api.list_coffees()
    elif args.command == "get":
        result, error = api.get_coffee(args.id)
        if result is None and error is None:
            print(f"[!] No coffee with id: {args.id}", file=sys.stderr)
            return 2
    elif args.command == "add":
        result, error = api.create_coffee(args.name, coffee_id=args.id)
    elif args.command == "put":
        result, created, error = api.put_coffee(args.id, args.name)
        if not error:
            print("[+] Created" if created else "[+] Updated")
    else:
        result, error = api.delete_coffee(args.id)

    if error:
        print(f"[!] {error['message']} (status {error['status_code']})", file=sys.stderr)
        return 1
    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
