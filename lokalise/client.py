"""HTTP transport with token authentication and retries."""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import requests

from .errors import LokaliseError, raise_for_error
from .serialization import JsonModel

API_TOKEN_HEADER = "X-Api-Token"
DEFAULT_BASE_URL = "https://api.lokalise.com/api2"
DEFAULT_RETRY_COUNT = 3
DEFAULT_RETRY_WAIT = 0.1

_log = logging.getLogger(__name__)


def should_retry(status_code, error) -> bool:
    """Retry on transport errors, missing responses and server errors."""
    if status_code is None or error is not None:
        return True
    return status_code >= 500


@dataclass
class RawResponse:
    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    payload: Any = None


class RestClient:
    """Sends JSON requests to the API."""

    def __init__(
        self,
        api_token: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        retry_count: int = DEFAULT_RETRY_COUNT,
        retry_wait: float = DEFAULT_RETRY_WAIT,
        timeout: float | None = None,
        debug: bool = False,
    ) -> None:
        self.api_token = api_token
        self.base_url = base_url
        self.retry_count = retry_count
        self.retry_wait = retry_wait
        self.timeout = timeout
        self.debug = debug
        self.session = requests.Session()

    def get(self, path, params=None) -> RawResponse:
        return self._request("GET", path, params=params)

    def post(self, path, body=None) -> RawResponse:
        return self._request("POST", path, body=body)

    def put(self, path, body=None) -> RawResponse:
        return self._request("PUT", path, body=body)

    def delete(self, path, body=None) -> RawResponse:
        return self._request("DELETE", path, body=body)

    def _request(self, method, path, *, params=None, body=None) -> RawResponse:
        url = f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"
        headers = {API_TOKEN_HEADER: self.api_token, "Accept": "application/json"}
        data = None
        if body is not None:
            if isinstance(body, JsonModel):
                body = body.to_dict()
            data = json.dumps(body, separators=(",", ":"), ensure_ascii=False).encode("utf-8")
            headers["Content-Type"] = "application/json"

        for attempt in range(self.retry_count + 1):
            response, error = None, None
            try:
                response = self.session.request(
                    method, url, params=params or None, data=data,
                    headers=headers, timeout=self.timeout,
                )
            except requests.RequestException as exc:
                error = exc
            if self.debug:
                _log.debug("%s %s -> %s", method, url,
                           response.status_code if response is not None else error)
            status = response.status_code if response is not None else None
            if attempt < self.retry_count and should_retry(status, error):
                time.sleep(self.retry_wait)
                continue
            break

        if response is None:
            raise LokaliseError(f"lokalise: request failed: {error}") from error
        return self._finish(response)

    @staticmethod
    def _finish(response: requests.Response) -> RawResponse:
        payload = None
        if response.content:
            try:
                payload = response.json()
            except ValueError as exc:
                if response.status_code < 400:
                    raise LokaliseError("lokalise: invalid JSON in response") from exc
        raise_for_error(response.status_code, payload)
        return RawResponse(response.status_code, response.headers, payload)