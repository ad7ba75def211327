# pterodactyl.py
"""
Pterodactyl client API, scoped to one server's file manager.

  GET  /api/client/servers/{id}/files/download?file=<path>   -> {"attributes": {"url": ...}}
  GET  /api/client/servers/{id}/files/list?directory=<path>  -> {"data": [{"attributes": {...}}]}
  POST /api/client/servers/{id}/files/write?file=<path>      (raw bytes body)

Download links are pre-signed and single-use; fetch them with fetch_file(), not
through the authenticated session.
"""

from __future__ import annotations

from typing import List, Optional

import requests

from config import Config


class PterodactylClient:
    def __init__(self, config: Config, session: Optional[requests.Session] = None):
        self.files_url = f"{config.pterodactyl_url}/api/client/servers/{config.server_id}/files"
        self.timeout = config.http_timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            "Authorization": f"Bearer {config.pterodactyl_token}",
            "Accept": "application/json",
        })

    def _request(self, method: str, action: str, **kwargs) -> requests.Response:
        resp = self.session.request(method, f"{self.files_url}/{action}", timeout=self.timeout, **kwargs)
        resp.raise_for_status()
        return resp

    def close(self) -> None:
        self.session.close()

    def get_download_link(self, path: str) -> str:
        resp = self._request("GET", "download", params={"file": path})
        return resp.json()["attributes"]["url"]

    def list_directory(self, path: str) -> List[dict]:
        """Returns the raw attribute dicts (name, is_file, size, ...) of each entry."""
        resp = self._request("GET", "list", params={"directory": path})
        return [entry["attributes"] for entry in resp.json()["data"]]

    def write_file(self, path: str, content: bytes) -> None:
        self._request(
            "POST",
            "write",
            params={"file": path},
            data=content,
            headers={"Content-Type": "application/octet-stream"},
        )


def fetch_file(url: str, timeout: float) -> bytes:
    """Plain GET (no auth header) for pre-signed links and Discord CDN attachments."""
    resp = requests.get(url, timeout=timeout)
    resp.raise_for_status()
    return resp.content
