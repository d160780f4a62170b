import os
import sys
import json
import logging
from typing import Callable, List, Optional, Sequence

from flask import Flask, Response, jsonify, request

from .auth import is_authorized
from .config import load_config
from .errors import BalanceFetchError, ConfigError
from .models import Balance, Config
from .routes import to_pairs, to_text
from .wise_client import WiseClient

log = logging.getLogger("wise-balance-proxy")

FetchBalances = Callable[[], List[Balance]]

FETCH_FAILED = "Failed to fetch or parse data"


def create_app(config: Config, fetch_balances: Optional[FetchBalances] = None) -> Flask:
    """
    Build the Flask app around an immutable config.

    fetch_balances is any zero-arg callable returning balances or raising
    BalanceFetchError; it defaults to a live WiseClient.
    """
    if fetch_balances is None:
        fetch_balances = WiseClient(config).get_balances

    app = Flask(__name__)

    def _rejected() -> Optional[tuple]:
        if not config.require_token:
            return None
        if is_authorized(request.args.get("user_token"), config.user_token):
            return None
        log.warning("Rejected %s: missing or invalid user_token", request.path)
        return jsonify(error="Unauthorized"), 401

    def _load() -> Optional[List[Balance]]:
        try:
            return fetch_balances()
        except BalanceFetchError as e:
            log.error("Error: %s", e)
            return None

    @app.get("/healthz")
    def healthz():
        return "ok", 200

    @app.get("/raw")
    def raw():
        denied = _rejected()
        if denied:
            return denied
        balances = _load()
        if balances is None:
            return jsonify(error=FETCH_FAILED), 500
        try:
            body = json.dumps(to_pairs(balances), allow_nan=False)
        except (TypeError, ValueError):
            log.exception("Failed to encode JSON")
            return jsonify(error="Failed to encode JSON"), 500
        return Response(body, status=200, content_type="application/json")

    @app.get("/text")
    def text():
        denied = _rejected()
        if denied:
            return denied
        balances = _load()
        if balances is None:
            return jsonify(error=FETCH_FAILED), 500
        return Response(to_text(balances), status=200, content_type="text/plain")

    return app


def main(argv: Optional[Sequence[str]] = None) -> None:
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(message)s",
    )
    try:
        config = load_config(argv)
    except ConfigError as e:
        log.critical("%s", e)
        sys.exit(1)

    app = create_app(config)
    log.info(
        "Starting server on %s:%d (profile=%s, token check=%s)",
        config.host, config.port, config.profile_id, "on" if config.require_token else "off",
    )
    app.run(host=config.host, port=config.port, threaded=True)


if __name__ == "__main__":
    main()
