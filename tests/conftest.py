from __future__ import annotations

import pytest
from nacl.signing import SigningKey

from config import Config

TIMESTAMP = "1700000000"


class FakeDiscord:
    def __init__(self, fail_on=None, fail_register=False):
        self.messages = []
        self.registrations = 0
        self.fail_on = fail_on  # index of post_message call that raises
        self.fail_register = fail_register
        self.closed = False

    def close(self):
        self.closed = True

    def register_commands(self):
        self.registrations += 1
        if self.fail_register:
            raise RuntimeError("discord is down")
        return {}

    def post_message(self, channel_id, content=None, file=None):
        if self.fail_on is not None and len(self.messages) == self.fail_on:
            raise RuntimeError("rate limited")
        self.messages.append({"channel_id": channel_id, "content": content, "file": file})
        return {}


class FakePterodactyl:
    def __init__(self, files=None, link="https://panel.test/presigned/abc", fail=None):
        self.calls = []
        self.files = files or []
        self.link = link
        self.fail = fail or set()
        self.closed = False

    def close(self):
        self.closed = True

    def _record(self, name, *args):
        self.calls.append((name, *args))
        if name in self.fail:
            raise RuntimeError(f"{name} failed")

    def get_download_link(self, path):
        self._record("get_download_link", path)
        return self.link

    def list_directory(self, path):
        self._record("list_directory", path)
        return [{"name": n, "is_file": True} for n in self.files]

    def write_file(self, path, content):
        self._record("write_file", path, content)


@pytest.fixture
def signing_key():
    return SigningKey.generate()


@pytest.fixture
def config(signing_key):
    return Config(
        public_key=bytes(signing_key.verify_key),
        bot_token="bot-token",
        application_id="1234",
        pterodactyl_url="https://panel.test",
        pterodactyl_token="ptlc_token",
        server_id="abcd1234",
        http_timeout=5.0,
    )


@pytest.fixture
def sign(signing_key):
    def _sign(raw_body: bytes, timestamp: str = TIMESTAMP) -> dict:
        signature = signing_key.sign(timestamp.encode() + raw_body).signature.hex()
        return {"X-Signature-Ed25519": signature, "X-Signature-Timestamp": timestamp}

    return _sign
