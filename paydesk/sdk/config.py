"""Configuration management for Pay Desk.

Configuration lives in a single optional file:

profile.yaml - Login credentials for this installation
   - login.username: letters only
   - login.password: digits only

When no profile exists, the built-in credentials are used. The attempt
limit and pay bands are fixed and cannot be configured.

Config directory resolution:
1. PAYDESK_CONFIG_PATH environment variable (if set)
2. ~/.config/paydesk/ (XDG_CONFIG_HOME fallback)

Logging level comes from the LOG_LEVEL environment variable.
"""

import logging
import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from .schemas import Credentials


APP_NAME = "paydesk"
PROFILE_FILENAME = "profile.yaml"

DEFAULT_CREDENTIALS = Credentials(username="hgzy", password="1234")

logger = logging.getLogger(__name__)


class ProfileError(Exception):
    """Raised when profile.yaml exists but cannot be used."""
    pass


def configure_logging() -> None:
    """Configure root logging from the LOG_LEVEL environment variable.

    Defaults to WARNING so the interactive console stays clean.
    """
    log_level = os.environ.get("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.WARNING),
        format="%(asctime)s.%(msecs)03d %(levelname)s: %(message)s",
        datefmt="%H:%M:%S"
    )


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Resolution order:
    1. PAYDESK_CONFIG_PATH environment variable
    2. ~/.config/paydesk/ (XDG_CONFIG_HOME)

    Returns:
        Path to the configuration directory
    """
    # 1. Check environment variable
    env_path = os.environ.get("PAYDESK_CONFIG_PATH")
    if env_path:
        return Path(env_path)

    # 2. Fall back to XDG config path
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
    return Path(xdg_config_home) / APP_NAME


def get_profile_path() -> Path:
    """Get the path to profile.yaml (may not exist yet)."""
    return get_config_dir() / PROFILE_FILENAME


def load_profile(require_exists: bool = False) -> dict:
    """Load the profile from profile.yaml.

    Args:
        require_exists: If True, raises ProfileError if the file is missing

    Returns:
        Profile dictionary (empty dict if not required and not found)

    Raises:
        ProfileError: If the file is required but missing, is not valid
            YAML, or is not a mapping
    """
    profile_path = get_profile_path()

    if not profile_path.exists():
        if require_exists:
            raise ProfileError(f"No profile found at {profile_path}")
        return {}

    try:
        with open(profile_path, "r") as f:
            profile = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ProfileError(f"Invalid YAML in {profile_path}: {e}")

    if not isinstance(profile, dict):
        raise ProfileError(
            f"Profile must be a YAML dictionary, got {type(profile).__name__}"
        )

    return profile


def load_credentials(profile: Optional[dict] = None) -> Credentials:
    """Resolve the valid credential pair.

    Uses the profile's 'login' section when present, otherwise the
    built-in defaults.

    Args:
        profile: Optional profile dict (loads from file if not provided)

    Returns:
        Immutable Credentials

    Raises:
        ProfileError: If the 'login' section is present but invalid
    """
    if profile is None:
        profile = load_profile()

    login = profile.get("login")
    if login is None:
        logger.debug("no login section in profile, using default credentials")
        return DEFAULT_CREDENTIALS

    if not isinstance(login, dict):
        raise ProfileError("Profile 'login' section must be a mapping")

    # Unquoted 0123 loads as the int 83, so numbers are never converted back
    for key in ("username", "password"):
        value = login.get(key)
        if value is not None and not isinstance(value, str):
            raise ProfileError(
                f"Profile 'login.{key}' must be text, got {type(value).__name__}; "
                f"quote it in profile.yaml (e.g. password: \"0123\")"
            )

    try:
        credentials = Credentials(**login)
    except ValidationError as e:
        raise ProfileError(f"Invalid 'login' section in profile: {e}")

    logger.debug(f"credentials loaded from profile for user '{credentials.username}'")
    return credentials


def describe_credentials_source(profile: Optional[dict] = None) -> str:
    """Return 'profile' or 'default' depending on where credentials come from."""
    if profile is None:
        profile = load_profile()
    return "profile" if profile.get("login") is not None else "default"
