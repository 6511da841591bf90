"""Artfolio Marketplace API client.

This module wraps the marketplace REST API with one method per
endpoint.  The client uses the ``requests`` library internally and
never raises for HTTP or network failures: every method returns a
tuple ``(data, error)`` where exactly one side is meaningful.  An
``error`` is a dictionary with the keys

``status_code``
    HTTP status, or ``None`` when the server could not be reached.
``code``
    The server's error kind (``not_found``, ``conflict``,
    ``unauthorized``, ``invalid_input``) or ``None``.
``message``
    Human readable description.

After :meth:`MarketplaceAPI.login_member` succeeds, callers should pass
the returned ``access_token`` to :meth:`MarketplaceAPI.set_token`; the
token is then sent as ``Authorization: Bearer <token>`` on every call.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class MarketplaceAPI:
    """Client for interacting with the marketplace API."""

    def __init__(
        self,
        *,
        base_url: str,
        access_token: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:3000``.
            access_token: Optional bearer token from a previous login.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per‑request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.access_token = access_token
        self.session = session or requests.Session()
        self.timeout = timeout

    def set_token(self, access_token: Optional[str]) -> None:
        self.access_token = access_token

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str, *, json_body: Any | None = None) -> Result:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET`` or ``POST``).
            path: Path relative to :attr:`base_url` (e.g. ``/allMembers``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success and ``error`` is ``None``. On failure,
            ``data`` is ``None`` and ``error`` describes the issue.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            return None, self._error_from_response(exc)
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "code": None, "message": str(exc)}

    @staticmethod
    def _error_from_response(exc: requests.HTTPError) -> Dict[str, Any]:
        # A failed Response is falsy, so compare with None explicitly.
        response = exc.response
        status = response.status_code if response is not None else None
        code = None
        message: Any = ""
        if response is not None:
            try:
                err_json = response.json()
            except ValueError:
                message = response.text
            else:
                if isinstance(err_json, dict):
                    code = err_json.get("error")
                    message = err_json.get("detail") or err_json.get("message") or str(err_json)
                else:
                    message = str(err_json)
        if isinstance(message, list):
            # Validation errors: one entry per offending field.
            message = "; ".join(
                f"{'.'.join(str(p) for p in item.get('loc', [])[1:])}: {item.get('msg')}"
                if isinstance(item, dict) else str(item)
                for item in message
            )
        if not message:
            message = str(exc)
        logger.error("API request failed (%s): %s", status, message)
        return {"status_code": status, "code": code, "message": message}

    # ------------------------------------------------------------------
    # Member operations
    # ------------------------------------------------------------------
    def register_member(
        self,
        username: str,
        email: str,
        password: str,
        *,
        about: Optional[str] = None,
        location: Optional[str] = None,
        website: Optional[str] = None,
    ) -> Result:
        payload = {
            "username": username,
            "email": email,
            "password": password,
            "about": about,
            "location": location,
            "website": website,
        }
        return self._request("POST", "/registerMember", json_body=payload)

    def login_member(self, username: str, password: str) -> Result:
        """Log in and return the member profile plus ``access_token``.

        The token is not stored automatically; see :meth:`set_token`.
        """
        return self._request(
            "POST", "/loginMember", json_body={"username": username, "password": password}
        )

    def list_members(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        data, error = self._request("GET", "/allMembers")
        return data or [], error

    def get_account_info(self, member_id: Any) -> Result:
        """Fetch the logged‑in member's own profile (token required)."""
        return self._request("GET", f"/myAccountInfo/{member_id}")

    # ------------------------------------------------------------------
    # Portfolio operations
    # ------------------------------------------------------------------
    def add_portfolio(
        self,
        *,
        title: str,
        description: str,
        image: str,
        category: str,
        price: Any,
        member_id: Any = None,
    ) -> Result:
        """Upload a portfolio for the logged‑in member (token required)."""
        payload: Dict[str, Any] = {
            "title": title,
            "description": description,
            "image": image,
            "category": category,
            "price": price,
        }
        if member_id is not None:
            payload["memberId"] = member_id
        return self._request("POST", "/addPortfolio", json_body=payload)

    def list_portfolios(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        data, error = self._request("GET", "/allPortfolios")
        return data or [], error

    def list_member_portfolios(self, member_id: Any) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        data, error = self._request("GET", f"/myPortfolios/{member_id}")
        return data or [], error

    def list_portfolios_with_authors(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        data, error = self._request("GET", "/portfoliosAndAuthors")
        return data or [], error

    def get_portfolio_with_author(self, portfolio_id: Any) -> Result:
        """Retrieve one portfolio with ``authorInfo`` and ``comments``.

        Unwraps the single‑element array the endpoint returns.
        """
        data, error = self._request("GET", f"/portfolioWithAuthor/{portfolio_id}")
        if error:
            return None, error
        if isinstance(data, list) and data:
            return data[0], None
        return None, {"status_code": 404, "code": "not_found", "message": f"Portfolio {portfolio_id} not found"}

    def filter_portfolios(
        self, min_price: Any, max_price: Any, category: str = "all"
    ) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Filter by exclusive price bounds and category (``all`` for any)."""
        data, error = self._request(
            "GET", f"/filterPortfolios/{min_price}/{max_price}/{quote(category, safe='')}"
        )
        return data or [], error

    # ------------------------------------------------------------------
    # Comment operations
    # ------------------------------------------------------------------
    def add_comment(self, portfolio_id: Any, content: str, *, post_date: Any = None) -> Result:
        """Post a comment as the logged‑in member (token required)."""
        payload: Dict[str, Any] = {"portfolioID": portfolio_id, "content": content}
        if post_date is not None:
            payload["postDate"] = post_date
        return self._request("POST", "/addComment", json_body=payload)
