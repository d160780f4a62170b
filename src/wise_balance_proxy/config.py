import os
import argparse
from typing import List, Mapping, Optional, Sequence

from .errors import ConfigError
from .models import Config

_TRUTHY = {"1", "true", "yes", "on"}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wise-balance-proxy",
        description="Serve Wise account balances as JSON pairs (/raw) or plain text (/text).",
    )
    parser.add_argument("--api_key", "--api-key", dest="api_key", default="",
                        help="API key for authorization (can also be set via API_KEY environment variable)")
    parser.add_argument("--profile_id", "--profile-id", dest="profile_id", default="",
                        help="Profile ID to fetch data for (can also be set via PROFILE_ID environment variable)")
    parser.add_argument("--token", dest="token", default="",
                        help="Shared token callers must pass as ?user_token= (can also be set via USER_TOKEN)")
    parser.add_argument("--no-token-check", dest="no_token_check", action="store_true",
                        help="Serve without the user_token check (or DISABLE_TOKEN_CHECK=1)")
    parser.add_argument("--api-base-url", dest="api_base_url", default="",
                        help="Upstream base URL, e.g. the Wise sandbox (or WISE_API_URL)")
    parser.add_argument("--timeout", dest="timeout", default="",
                        help="Upstream request timeout in seconds (or HTTP_TIMEOUT_SEC); unset means no timeout")
    parser.add_argument("--log-response-body", dest="log_response_body", action="store_true",
                        help="Log the raw upstream JSON at DEBUG level (or LOG_RESPONSE_BODY=1)")
    parser.add_argument("--host", dest="host", default="", help="Bind address (or HOST)")
    parser.add_argument("--port", dest="port", default="", help="Listen port (or PORT), default 8080")
    return parser


def _flag_or_env(flag_value: str, environ: Mapping[str, str], name: str, default: str = "") -> str:
    # an empty flag falls back to the environment
    if flag_value:
        return flag_value
    return environ.get(name, "") or default


def _is_truthy(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in _TRUTHY


def _missing_message(names: List[str]) -> str:
    if len(names) == 1:
        joined = names[0]
    else:
        joined = ", ".join(names[:-1]) + " and " + names[-1]
    return f"{joined} {'is' if len(names) == 1 else 'are'} required either as flags or environment variables"


def load_config(argv: Optional[Sequence[str]] = None,
                environ: Optional[Mapping[str, str]] = None) -> Config:
    """
    Resolve the proxy configuration from command-line flags, then env vars.

    Raises ConfigError when a required value is empty in both places; the
    message names every required value, not just the missing ones.
    """
    if environ is None:
        environ = os.environ
    args = _build_parser().parse_args(argv)

    require_token = not (args.no_token_check or _is_truthy(environ.get("DISABLE_TOKEN_CHECK")))

    api_key = _flag_or_env(args.api_key, environ, "API_KEY")
    profile_id = _flag_or_env(args.profile_id, environ, "PROFILE_ID")
    user_token = _flag_or_env(args.token, environ, "USER_TOKEN")

    required = {"API_KEY": api_key, "PROFILE_ID": profile_id}
    if require_token:
        required["USER_TOKEN"] = user_token
    if not all(required.values()):
        raise ConfigError(_missing_message(list(required)))

    raw_timeout = _flag_or_env(args.timeout, environ, "HTTP_TIMEOUT_SEC")
    raw_port = _flag_or_env(args.port, environ, "PORT", "8080")
    try:
        timeout = float(raw_timeout) if raw_timeout else None
        port = int(raw_port)
    except ValueError as e:
        raise ConfigError(f"Invalid numeric setting: {e}") from e

    return Config(
        api_key=api_key,
        profile_id=profile_id,
        user_token=user_token or None,
        require_token=require_token,
        api_base_url=_flag_or_env(args.api_base_url, environ, "WISE_API_URL", "https://api.wise.com"),
        timeout=timeout,
        log_response_body=args.log_response_body or _is_truthy(environ.get("LOG_RESPONSE_BODY")),
        host=_flag_or_env(args.host, environ, "HOST", "0.0.0.0"),
        port=port,
    )
