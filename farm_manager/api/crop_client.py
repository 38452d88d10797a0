"""
Crop API Client
Handles communication with the remote crop entity store
"""
import logging
from typing import Any, Dict, Optional

import requests

logger = logging.getLogger(__name__)


class CropClientError(Exception):
    """Transport, status or payload failure talking to the crop store."""


class CropNotFoundError(CropClientError):
    """The crop store has no record with the requested identifier."""


class CropClient:
    """Client for the crop entity store (list / create / update only)"""

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        timeout: float = 20.0,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.headers = {"Accept": "application/json"}
        if token:
            self.headers["Authorization"] = f"Bearer {token}"

    def _url(self, *parts: str) -> str:
        return "/".join([self.base_url, "crops", *parts])

    def _request(self, method: str, url: str, payload: Optional[Dict[str, Any]] = None) -> Any:
        try:
            r = self.session.request(
                method,
                url,
                json=payload,
                headers=self.headers,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.warning(f"[CropClient] {method} {url} failed: {e}")
            raise CropClientError(f"{method} {url} failed: {e}") from e

        if r.status_code == 404:
            raise CropNotFoundError(f"{method} {url}: not found")
        try:
            r.raise_for_status()
        except requests.HTTPError as e:
            logger.warning(f"[CropClient] {method} {url} returned {r.status_code}")
            raise CropClientError(f"{method} {url} returned {r.status_code}") from e

        try:
            return r.json()
        except ValueError as e:
            raise CropClientError(f"{method} {url} returned a non-JSON body") from e

    @staticmethod
    def _unwrap(body: Any) -> Dict[str, Any]:
        # Some deployments answer {"success": true, "data": {...}}
        if isinstance(body, dict) and isinstance(body.get("data"), dict):
            if body.get("success") is False:
                raise CropClientError(body.get("error") or "request rejected by crop store")
            return body["data"]
        if not isinstance(body, dict):
            raise CropClientError(f"unexpected response type: {type(body).__name__}")
        return body

    def list(self) -> Dict[str, Any]:
        """
        Fetch the full crop snapshot.

        Returns:
            The store's envelope, ``{"success": bool, "data": [...]}``. A bare
            JSON array is wrapped into that shape.
        """
        body = self._request("GET", self._url())
        if isinstance(body, list):
            return {"success": True, "data": body}
        if not isinstance(body, dict):
            raise CropClientError(f"unexpected response type: {type(body).__name__}")
        return body

    def create(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        """Create a crop record and return it as stored."""
        logger.debug(f"[CropClient] create {fields}")
        return self._unwrap(self._request("POST", self._url(), fields))

    def update(self, crop_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        """Apply a partial update to one crop record and return it as stored."""
        logger.debug(f"[CropClient] update {crop_id} {fields}")
        return self._unwrap(self._request("PATCH", self._url(str(crop_id)), fields))
