"""
Caller identification and the role gate used by the API routes.

Authentication itself is delegated: callers present an API token issued
elsewhere, and the token registry maps it to a user and its roles.
"""

import logging
from functools import lru_cache
from typing import Annotated, Dict, List, Optional

import yaml
from fastapi import Depends, Request
from fastapi.security.utils import get_authorization_scheme_param
from pydantic import BaseModel, Field, ValidationError

from ucsb_backend.api.exceptions import ForbiddenException
from ucsb_backend.permissions.principal import Principal
from ucsb_backend.settings import settings

logger = logging.getLogger(__name__)


class TokenEntry(BaseModel):
    token: str
    user_id: str
    roles: List[str] = Field(default_factory=list)


class TokenRegistry:
    """Maps API tokens to principals"""

    def __init__(self, entries: Optional[List[TokenEntry]] = None):
        self._principals: Dict[str, Principal] = {}
        for entry in entries or []:
            self._principals[entry.token] = Principal(user_id=entry.user_id, roles=entry.roles)

    @staticmethod
    def read_from_file(filename: str) -> "TokenRegistry":
        with open(filename, "r") as file:
            raw = yaml.safe_load(file) or {}
        return TokenRegistry([TokenEntry(**entry) for entry in raw.get("tokens", [])])

    def resolve(self, token: str) -> Optional[Principal]:
        return self._principals.get(token)

    def __len__(self):
        return len(self._principals)


@lru_cache()
def get_token_registry() -> TokenRegistry:

    if settings.AUTH_TOKENS_CONFIG is None:
        logger.warning("AUTH_TOKENS_CONFIG is not set, every request is anonymous")
        return TokenRegistry()

    try:
        registry = TokenRegistry.read_from_file(settings.AUTH_TOKENS_CONFIG)
    except (OSError, yaml.YAMLError, ValidationError) as e:
        logger.error(f"Could not load API tokens from {settings.AUTH_TOKENS_CONFIG}: {e}")
        return TokenRegistry()

    logger.info(f"Loaded {len(registry)} API tokens from {settings.AUTH_TOKENS_CONFIG}")
    return registry


def parse_bearer_token(request: Request) -> Optional[str]:
    """Return the bearer token of the request, if any"""

    authorization = request.headers.get("Authorization")
    if not authorization:
        return None

    scheme, param = get_authorization_scheme_param(authorization)

    if scheme.lower() != "bearer" or not param:
        logger.debug(f"Ignoring unsupported auth scheme: {scheme}")
        return None

    return param


def get_current_principal(
    token: Annotated[Optional[str], Depends(parse_bearer_token)]
) -> Optional[Principal]:
    """
    Resolve the caller of the current request.
    Anonymous callers yield None; the role gate rejects them.
    """
    if token is None:
        return None

    return get_token_registry().resolve(token)


def require_role(role: str):
    """
    Build a dependency that admits only callers holding ``role``.

    Routes take it as their first parameter so it runs before request
    parameters are validated and before any store access.
    """

    def guard(principal: Annotated[Optional[Principal], Depends(get_current_principal)]) -> Principal:
        if principal is None:
            raise ForbiddenException()

        if not principal.has_role(role):
            logger.info(f"User {principal.user_id} lacks role {role}")
            raise ForbiddenException()

        return principal

    return guard
