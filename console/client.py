import json
from typing import Any, Dict

import httpx

JSON_HEADERS = {"Content-Type": "application/json"}


class ApiError(Exception):
    """A settings API call that did not succeed."""

    def __init__(self, status_code: int | None, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class SettingsApiClient:
    """Thin wrapper over the settings REST endpoints.

    ``http`` is any httpx-compatible client; FastAPI's ``TestClient`` works
    as well as a plain ``httpx.Client(base_url=...)``.
    """

    def __init__(self, http: httpx.Client):
        self.http = http

    def _send(self, method: str, path: str, **kwargs) -> httpx.Response:
        try:
            response = self.http.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            raise ApiError(None, str(exc)) from exc
        if response.is_error:
            raise ApiError(response.status_code, _error_message(response))
        return response

    def _send_json(self, method: str, path: str, data: Any) -> Dict[str, Any]:
        # Serialize by hand so a JSON null payload still produces a body
        return self._send(
            method, path, content=json.dumps(data), headers=JSON_HEADERS
        ).json()

    def list(self, page: int = 1, limit: int = 10) -> Dict[str, Any]:
        return self._send("GET", "/settings", params={"page": page, "limit": limit}).json()

    def get(self, uid: str) -> Dict[str, Any]:
        return self._send("GET", f"/settings/{uid}").json()

    def create(self, data: Any) -> Dict[str, Any]:
        return self._send_json("POST", "/settings", data)

    def update(self, uid: str, data: Any) -> Dict[str, Any]:
        return self._send_json("PUT", f"/settings/{uid}", data)

    def delete(self, uid: str) -> None:
        self._send("DELETE", f"/settings/{uid}")


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict) and "detail" in body:
        return str(body["detail"])
    return response.text
