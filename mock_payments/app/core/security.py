from __future__ import annotations

import base64
import logging
import secrets
from typing import Optional

from fastapi import Depends, Header
from fastapi.security.utils import get_authorization_scheme_param

from .config import Settings, get_settings
from .errors import AuthenticationRequiredError, InvalidCredentialsError


logger = logging.getLogger(__name__)


def decode_basic_credentials(authorization: Optional[str]) -> tuple[str, str]:
    """Split a ``Basic`` Authorization header into username and password."""
    scheme, param = get_authorization_scheme_param(authorization)
    if not authorization or scheme.lower() != "basic" or not param:
        raise AuthenticationRequiredError("Authentication required")
    try:
        decoded = base64.b64decode(param, validate=True).decode("utf-8")
    except ValueError as exc:  # binascii.Error, UnicodeDecodeError, non-ASCII input
        raise AuthenticationRequiredError("Authentication required") from exc

    username, separator, password = decoded.partition(":")
    if not separator:
        raise AuthenticationRequiredError("Authentication required")
    return username, password


def require_basic_auth(
    authorization: Optional[str] = Header(default=None),
    settings: Settings = Depends(get_settings),
) -> None:
    if not settings.auth_enabled:
        return

    try:
        username, password = decode_basic_credentials(authorization)
    except AuthenticationRequiredError:
        logger.warning("auth.rejected", extra={"reason": "missing_or_malformed"})
        raise

    username_ok = secrets.compare_digest(
        username.encode("utf-8"), settings.auth_username.encode("utf-8")
    )
    password_ok = secrets.compare_digest(
        password.encode("utf-8"), settings.auth_password.encode("utf-8")
    )
    if not (username_ok and password_ok):
        logger.warning("auth.rejected", extra={"reason": "invalid_credentials"})
        raise InvalidCredentialsError("Invalid username or password")
