# config.py
"""
Process configuration, read from the environment once at startup.

Required:
- PUBLIC_KEY         : application public key (hex), used for request verification
- BOT_TOKEN          : Discord bot token for the REST API
- APPLICATION_ID     : Discord application id (command registration)
- PTERODACTYL_URL    : panel base URL, e.g. https://panel.example.com
- PTERODACTYL_TOKEN  : client API key
- SERVER_ID          : short server identifier on the panel

Optional:
- DISCORD_API_URL    : defaults to https://discord.com/api/v10
- SCHEMATICS_DIR     : defaults to /plugins/WorldEdit/schematics
- HTTP_TIMEOUT       : seconds, defaults to 10
- LOG_LEVEL          : defaults to INFO
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

DEFAULT_DISCORD_API_URL = "https://discord.com/api/v10"
DEFAULT_SCHEMATICS_DIR = "/plugins/WorldEdit/schematics"

REQUIRED = (
    "PUBLIC_KEY",
    "BOT_TOKEN",
    "APPLICATION_ID",
    "PTERODACTYL_URL",
    "PTERODACTYL_TOKEN",
    "SERVER_ID",
)


class ConfigError(Exception):
    """Raised when the environment does not describe a usable deployment."""


@dataclass(frozen=True)
class Config:
    public_key: bytes
    bot_token: str
    application_id: str
    pterodactyl_url: str
    pterodactyl_token: str
    server_id: str
    discord_api_url: str = DEFAULT_DISCORD_API_URL
    schematics_dir: str = DEFAULT_SCHEMATICS_DIR
    http_timeout: float = 10.0
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Config":
        env = os.environ if environ is None else environ
        problems = [f"{name} is not set" for name in REQUIRED if not env.get(name)]

        public_key = b""
        if env.get("PUBLIC_KEY"):
            try:
                public_key = bytes.fromhex(env["PUBLIC_KEY"])
            except ValueError:
                problems.append("PUBLIC_KEY is not valid hex")
            else:
                if len(public_key) != 32:
                    problems.append("PUBLIC_KEY must be 32 bytes (64 hex characters)")

        timeout = 10.0
        if env.get("HTTP_TIMEOUT"):
            try:
                timeout = float(env["HTTP_TIMEOUT"])
            except ValueError:
                problems.append("HTTP_TIMEOUT must be a number of seconds")

        if problems:
            raise ConfigError("; ".join(problems))

        return cls(
            public_key=public_key,
            bot_token=env["BOT_TOKEN"],
            application_id=env["APPLICATION_ID"],
            pterodactyl_url=env["PTERODACTYL_URL"].rstrip("/"),
            pterodactyl_token=env["PTERODACTYL_TOKEN"],
            server_id=env["SERVER_ID"],
            discord_api_url=(env.get("DISCORD_API_URL") or DEFAULT_DISCORD_API_URL).rstrip("/"),
            schematics_dir=(env.get("SCHEMATICS_DIR") or DEFAULT_SCHEMATICS_DIR).rstrip("/"),
            http_timeout=timeout,
            log_level=(env.get("LOG_LEVEL") or "INFO").upper(),
        )

    def schematic_path(self, name: str) -> str:
        """Full panel path for a schematic stored under `name` (no extension)."""
        return f"{self.schematics_dir}/{name}.schematic"
