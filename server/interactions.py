# interactions.py
"""
Turns a parsed Discord interaction payload into one of three shapes:
  Handshake          : type 1, Discord's endpoint liveness probe
  CommandInvocation  : type 2, a slash command with one subcommand level
  Unknown            : anything else

Also builds the two response bodies this bot ever returns.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, Optional, Union


class InteractionType(IntEnum):
    PING = 1
    APPLICATION_COMMAND = 2


class InteractionResponseType(IntEnum):
    PONG = 1
    CHANNEL_MESSAGE_WITH_SOURCE = 4


@dataclass(frozen=True)
class Handshake:
    pass


@dataclass(frozen=True)
class Unknown:
    type: Any = None


@dataclass(frozen=True)
class CommandInvocation:
    name: str
    subcommand: Optional[str]
    arguments: Dict[str, Any] = field(default_factory=dict)
    channel_id: Optional[str] = None
    attachments: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    def attachment_url(self, option: str) -> Optional[str]:
        """Resolve an attachment option (its value is an attachment id) to the CDN url."""
        attachment_id = self.arguments.get(option)
        if attachment_id is None:
            return None
        return (self.attachments.get(str(attachment_id)) or {}).get("url")


Interaction = Union[Handshake, CommandInvocation, Unknown]


def classify(body: Any) -> Interaction:
    if not isinstance(body, dict):
        return Unknown()

    kind = body.get("type")
    # bool and float compare equal to the enum members; only a JSON integer counts
    if type(kind) is not int:
        return Unknown(kind)
    if kind == InteractionType.PING:
        return Handshake()
    if kind != InteractionType.APPLICATION_COMMAND:
        return Unknown(kind)

    data = body.get("data") or {}
    options = data.get("options") or []
    group = options[0] if options else {}
    arguments = {opt["name"]: opt.get("value") for opt in group.get("options") or []}

    return CommandInvocation(
        name=data.get("name", ""),
        subcommand=group.get("name"),
        arguments=arguments,
        channel_id=body.get("channel_id"),
        attachments=(data.get("resolved") or {}).get("attachments") or {},
    )


def pong() -> dict:
    return {"type": int(InteractionResponseType.PONG)}


def channel_message(content: str) -> dict:
    return {
        "type": int(InteractionResponseType.CHANNEL_MESSAGE_WITH_SOURCE),
        "data": {"content": content},
    }
