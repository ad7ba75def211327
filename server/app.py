# app.py
"""
Flask wrapper for local development.
- Presents the interactions endpoint for Discord to hit (via ngrok).
- Passes the raw request bytes + headers to core_schematic.
"""

from functools import lru_cache

from dotenv import load_dotenv
from flask import Flask, make_response, request

from config import Config
from core_schematic import handle_interaction
from log_utils import configure_logging

# Load .env for local development (PUBLIC_KEY, BOT_TOKEN, PTERODACTYL_*, ...)
load_dotenv()

app = Flask(__name__)


@lru_cache(maxsize=1)
def get_config() -> Config:
    config = Config.from_env()
    configure_logging(config.log_level)
    return config


@app.route("/interactions", methods=["POST"])
def interactions():
    """
    Discord's "Interactions Endpoint URL".
    get_data() gives the untouched body, which the signature check needs.
    """
    status, headers, body = handle_interaction(request.get_data(), request.headers, get_config())
    resp = make_response(body, status)
    for k, v in headers.items():
        resp.headers[k] = v
    return resp


if __name__ == "__main__":
    get_config()
    # Run locally, then expose with ngrok so Discord can reach it.
    app.run(port=3000, debug=True)
