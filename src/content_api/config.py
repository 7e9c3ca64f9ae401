"""Client configuration loaded from the environment.

Settings are read from a .env file using python-dotenv, then from the
process environment. Required values are validated up front so a
misconfigured client fails before any request is made.

Environment variables:
    CONFLUENCE_URL: Site root (e.g., https://yourinstance.atlassian.net/wiki)
    CONFLUENCE_USER: Account e-mail address
    CONFLUENCE_API_TOKEN: API token
    CONFLUENCE_TIMEOUT: Optional transport timeout in seconds (default: 30)
"""

import os
from typing import NamedTuple, Optional

from dotenv import load_dotenv

from .errors import ConfigError

DEFAULT_TIMEOUT = 30.0
API_PATH = "/rest/api"


class ClientConfig(NamedTuple):
    """Connection settings for the content API."""
    url: str
    user: str
    api_token: str
    timeout: float = DEFAULT_TIMEOUT

    @property
    def api_root(self) -> str:
        """REST API root the content endpoints hang off."""
        return self.url.rstrip("/") + API_PATH


def load_config(env_file: Optional[str] = None) -> ClientConfig:
    """Load the client configuration.

    Args:
        env_file: Optional path to a .env file. Defaults to python-dotenv's
            search for a .env file next to the caller.

    Returns:
        ClientConfig with url, user, api_token and timeout

    Raises:
        ConfigError: If a required variable is missing or the timeout is invalid
    """
    load_dotenv(env_file)

    url = os.getenv('CONFLUENCE_URL')
    user = os.getenv('CONFLUENCE_USER')
    api_token = os.getenv('CONFLUENCE_API_TOKEN')

    missing = []
    if not url:
        missing.append('CONFLUENCE_URL')
    if not user:
        missing.append('CONFLUENCE_USER')
    if not api_token:
        missing.append('CONFLUENCE_API_TOKEN')

    if missing:
        raise ConfigError(
            f"missing required environment variables: {', '.join(missing)}",
            config_field=missing[0],
        )

    timeout = _parse_timeout(os.getenv('CONFLUENCE_TIMEOUT'))

    return ClientConfig(url=url, user=user, api_token=api_token, timeout=timeout)  # type: ignore[arg-type]


def _parse_timeout(raw: Optional[str]) -> float:
    if raw is None or not raw.strip():
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError as e:
        raise ConfigError(
            f"'{raw}' is not a number", config_field='CONFLUENCE_TIMEOUT'
        ) from e
    if timeout <= 0:
        raise ConfigError(
            "timeout must be positive", config_field='CONFLUENCE_TIMEOUT'
        )
    return timeout
