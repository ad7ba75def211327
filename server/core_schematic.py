# core_schematic.py
"""
Shared interaction logic (no Flask/Lambda imports here).
- Verifies the Ed25519 signature before anything else touches the request.
- Answers Discord's PING and re-registers the /schematic command on the side.
- Routes /schematic download|upload|list to handlers that talk to Pterodactyl.
- Every handler turns its own failures into a short channel message.

Returns (status_code, headers_dict, body_string) so both wrappers can serve it.
"""

from __future__ import annotations

import json
import logging
import re
import threading
from dataclasses import dataclass
from typing import Callable, Dict, Mapping, Tuple
from urllib.parse import urlsplit

from chunking import chunkify
from config import Config
from discord_api import DiscordClient
from interactions import CommandInvocation, Handshake, channel_message, classify, pong
from names import generate_name
from pterodactyl import PterodactylClient, fetch_file
from verification import has_signature_shape, verify_signature

logger = logging.getLogger(__name__)

SIGNATURE_HEADER = "X-Signature-Ed25519"
TIMESTAMP_HEADER = "X-Signature-Timestamp"

SCHEMATIC_EXTENSION = "schematic"
MAX_CHUNK_SIZE = 1950  # leaves room for the ``` fence under Discord's 2000 limit

# Names are interpolated into panel paths; keep them to a single path segment.
SAFE_NAME = re.compile(r"[A-Za-z0-9_-]+")

JSON_HEADERS = {"Content-Type": "application/json"}


@dataclass
class Clients:
    discord: DiscordClient
    pterodactyl: PterodactylClient

    def close(self) -> None:
        self.discord.close()
        self.pterodactyl.close()


def build_clients(config: Config) -> Clients:
    return Clients(discord=DiscordClient(config), pterodactyl=PterodactylClient(config))


def run_in_background(fn: Callable[[], None]) -> None:
    """Start fn on a daemon thread and return without waiting for it."""
    threading.Thread(target=fn, daemon=True).start()


def _header(headers: Mapping[str, str], name: str) -> str:
    """Case-insensitive header lookup (API Gateway lower-cases, Flask doesn't care)."""
    value = headers.get(name) or headers.get(name.lower())
    if value:
        return value
    wanted = name.lower()
    for key, val in headers.items():
        if key.lower() == wanted:
            return val
    return ""


def _reply(content: str) -> Tuple[int, dict, str]:
    return 200, JSON_HEADERS, json.dumps(channel_message(content))


# ---------- Subcommand handlers ----------

def handle_download(invocation: CommandInvocation, clients: Clients, config: Config) -> str:
    name = str(invocation.arguments.get("name") or "")
    if not SAFE_NAME.fullmatch(name):
        logger.warning("download rejected, unsafe schematic name %r", name)
        return "Invalid schematic name."

    filename = f"{name}.{SCHEMATIC_EXTENSION}"
    try:
        logger.debug("download start: %s", filename)
        url = clients.pterodactyl.get_download_link(config.schematic_path(name))
        # Discord pre-fetches links, which would burn the one-time URL; send the bytes instead.
        content = fetch_file(url, config.http_timeout)
        clients.discord.post_message(invocation.channel_id, file=(filename, content))
    except Exception:
        # most likely the file does not exist
        logger.exception("download failed: %s", filename)
        return "Failed to download the schematic file."

    logger.info("download ok: %s (%d bytes)", filename, len(content))
    return f"Downloaded the schematic file: `{filename}`"


def _extension(url: str) -> str:
    path = urlsplit(url).path
    return path.rsplit(".", 1)[-1] if "." in path else ""


def handle_upload(invocation: CommandInvocation, clients: Clients, config: Config) -> str:
    url = invocation.attachment_url("file") or ""
    if _extension(url) != SCHEMATIC_EXTENSION:
        logger.warning("upload rejected, not a .%s file: %s", SCHEMATIC_EXTENSION, url)
        return "Invalid file extension. Please upload a schematic file."

    name = generate_name()
    filename = f"{name}.{SCHEMATIC_EXTENSION}"
    try:
        logger.debug("upload start: %s -> %s", url, filename)
        content = fetch_file(url, config.http_timeout)
        clients.pterodactyl.write_file(config.schematic_path(name), content)
    except Exception:
        logger.exception("upload failed: %s", filename)
        return "Failed to upload the schematic file."

    logger.info("upload ok: %s (%d bytes)", filename, len(content))
    return f"Uploaded the schematic file: `{filename}`"


def handle_list(invocation: CommandInvocation, clients: Clients, config: Config) -> str:
    suffix = f".{SCHEMATIC_EXTENSION}"
    try:
        entries = clients.pterodactyl.list_directory(config.schematics_dir)
        names = [
            entry["name"][: -len(suffix)]
            for entry in entries
            if entry.get("is_file", True) and entry["name"].endswith(suffix)
        ]
        chunks = chunkify(names, MAX_CHUNK_SIZE)
        # One at a time: the channel must show pages in order.
        # A failure midway leaves the earlier pages posted.
        for chunk in chunks:
            clients.discord.post_message(invocation.channel_id, content="```" + chunk + "```")
    except Exception:
        # most likely the directory does not exist
        logger.exception("list failed: %s", config.schematics_dir)
        return "Failed to list the schematic files."

    logger.info("list ok: %d schematics in %d messages", len(names), len(chunks))
    return "Schematics on the server:"


Handler = Callable[[CommandInvocation, Clients, Config], str]

COMMAND_GROUPS = {"schematic"}

ROUTES: Dict[Tuple[str, str], Handler] = {
    ("schematic", "download"): handle_download,
    ("schematic", "upload"): handle_upload,
    ("schematic", "list"): handle_list,
}


def route(invocation: CommandInvocation, clients: Clients, config: Config) -> str:
    if invocation.name not in COMMAND_GROUPS:
        return "CommandGroup not found"
    handler = ROUTES.get((invocation.name, invocation.subcommand))
    if handler is None:
        return "Command not found"
    logger.debug("command: /%s %s", invocation.name, invocation.subcommand)
    return handler(invocation, clients, config)


# ---------- Pipeline ----------

def register_commands(discord: DiscordClient) -> None:
    try:
        discord.register_commands()
        logger.info("command registered")
    except Exception:
        logger.exception("command registration failed")
    finally:
        discord.close()


def handle_interaction(
    raw_body: bytes,
    headers: Mapping[str, str],
    config: Config,
    *,
    make_clients: Callable[[Config], Clients] = build_clients,
    spawn: Callable[[Callable[[], None]], None] = run_in_background,
) -> Tuple[int, dict, str]:
    """
    Entry point for one interaction request.
    Order matters: header shape -> signature -> anything that touches the network.
    """
    signature = _header(headers, SIGNATURE_HEADER)
    timestamp = _header(headers, TIMESTAMP_HEADER)
    if not has_signature_shape(signature, timestamp):
        logger.debug("missing or short signature/timestamp")
        return 401, {}, ""

    if not verify_signature(raw_body, signature, timestamp, config.public_key):
        logger.warning("unverified interaction")
        return 401, {}, ""

    try:
        body = json.loads(raw_body)
    except ValueError:
        logger.warning("interaction body is not JSON")
        return 400, {}, ""

    # Built only after verification so unsigned traffic costs nothing.
    clients = make_clients(config)

    interaction = classify(body)
    if isinstance(interaction, Handshake):
        logger.debug("interaction: ping")
        clients.pterodactyl.close()
        # Re-registering on every PING replaces a separate deploy step.
        # register_commands closes the discord session when it is done.
        spawn(lambda: register_commands(clients.discord))
        return 200, JSON_HEADERS, json.dumps(pong())

    try:
        if isinstance(interaction, CommandInvocation):
            logger.debug("interaction: application command")
            return _reply(route(interaction, clients, config))

        logger.warning("unknown interaction type: %r", interaction.type)
        return 400, {}, ""
    finally:
        clients.close()
