# discord_api.py
"""
Thin Discord REST client (bot token auth).

- register_commands(): upsert of the /schematic command group
- post_message():      plain text or a single file attachment to a channel
"""

from __future__ import annotations

import json
from typing import Optional, Tuple

import requests

from config import Config

# Discord application command option types
SUB_COMMAND = 1
STRING = 3
ATTACHMENT = 11

COMMAND_SCHEMA = {
    "name": "schematic",
    "description": "Download/Upload/List schematics on the server",
    "options": [
        {
            "type": SUB_COMMAND,
            "name": "upload",
            "description": "Upload schematics onto the server (will be assigned a random name)",
            "options": [
                {
                    "type": ATTACHMENT,
                    "name": "file",
                    "description": "The schematic file to upload",
                    "required": True,
                }
            ],
        },
        {
            "type": SUB_COMMAND,
            "name": "list",
            "description": "List schematics on the server",
            "options": [],
        },
        {
            "type": SUB_COMMAND,
            "name": "download",
            "description": "Download a schematic on the server",
            "options": [
                {
                    "type": STRING,
                    "name": "name",
                    "description": "Name of the schematic (excluding file ending)",
                    "required": True,
                }
            ],
        },
    ],
}


class DiscordClient:
    def __init__(self, config: Config, session: Optional[requests.Session] = None):
        self.base_url = config.discord_api_url
        self.application_id = config.application_id
        self.timeout = config.http_timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Authorization": f"Bot {config.bot_token}"})

    def _post(self, path: str, **kwargs) -> requests.Response:
        resp = self.session.post(f"{self.base_url}{path}", timeout=self.timeout, **kwargs)
        resp.raise_for_status()
        return resp

    def close(self) -> None:
        self.session.close()

    def register_commands(self) -> dict:
        resp = self._post(f"/applications/{self.application_id}/commands", json=COMMAND_SCHEMA)
        return resp.json()

    def post_message(
        self,
        channel_id: str,
        content: Optional[str] = None,
        file: Optional[Tuple[str, bytes]] = None,
    ) -> dict:
        """
        Send `content` as JSON, or upload `file` = (filename, bytes) as multipart.
        With both, the content travels as payload_json next to the file.
        """
        path = f"/channels/{channel_id}/messages"
        if file is None:
            resp = self._post(path, json={"content": content})
        else:
            filename, data = file
            form = {}
            if content is not None:
                form["payload_json"] = json.dumps({"content": content})
            resp = self._post(path, data=form, files={"files[0]": (filename, data)})
        return resp.json()
