"""HTTP transport and authentication for the Azure DevOps REST API."""

from __future__ import annotations

import base64
import logging
from typing import Any

import requests

from azdo_vargroups.errors import AuthError, TransportError
from azdo_vargroups.models import (
    DEFAULT_BASE_URL_TEMPLATE,
    DEFAULT_TIMEOUT,
    ERROR_BODY_LIMIT,
    PROJECTS_ENDPOINT,
    ApiRequest,
    Session,
)


class HttpTransport:
    """Thin wrapper around requests that sends one ApiRequest and decodes the JSON reply."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, http: requests.Session | None = None):
        self.timeout = timeout
        self.http = http or requests.Session()
        self.logger = logging.getLogger("azdo-vargroups")

    def send(self, request: ApiRequest) -> Any:
        """Send the request. Raises TransportError on network failure or non-2xx status."""
        self.logger.debug(f"{request.method} {request.url}")
        try:
            resp = self.http.request(
                request.method,
                request.url,
                headers=request.headers,
                json=request.body,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise TransportError(
                f"{request.method} {request.url} failed: {e}", method=request.method, url=request.url
            ) from e

        if not 200 <= resp.status_code < 300:
            body = resp.text[:ERROR_BODY_LIMIT]
            self.logger.error(f"API error {resp.status_code}: {body}")
            raise TransportError(
                f"{request.method} {request.url} returned {resp.status_code}",
                method=request.method,
                url=request.url,
                status_code=resp.status_code,
                body=body,
            )

        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as e:
            raise TransportError(
                f"{request.method} {request.url} returned a non-JSON body",
                method=request.method,
                url=request.url,
                status_code=resp.status_code,
                body=resp.text[:ERROR_BODY_LIMIT],
            ) from e


def encode_auth_header(token: str) -> str:
    """Basic auth header for a personal access token (empty user name)."""
    encoded = base64.b64encode(f":{token}".encode("utf-8")).decode("ascii")
    return f"Basic {encoded}"


def authenticate(
    account_name: str,
    personal_access_token: str,
    base_url: str | None = None,
    transport: HttpTransport | None = None,
) -> Session:
    """
    Verify the token against the account and return a Session.

    The project list is used as the probe. Azure DevOps answers a bad token
    with a 401 or with a 203 HTML sign-in page, and an account the token
    cannot see with an empty list; all of these raise AuthError.
    """
    transport = transport or HttpTransport()
    url = (base_url or DEFAULT_BASE_URL_TEMPLATE.format(account=account_name)).rstrip("/")
    session = Session(base_url=url, auth_header=encode_auth_header(personal_access_token))

    probe = ApiRequest(method="GET", url=f"{session.base_url}{PROJECTS_ENDPOINT}", headers=session.headers)
    try:
        data = transport.send(probe)
    except TransportError as e:
        raise AuthError("invalid token or account") from e

    projects = data.get("value") if isinstance(data, dict) else data
    if not projects:
        raise AuthError("invalid token or account")

    transport.logger.info(f"Authenticated to {session.base_url} ({len(projects)} project(s) visible)")
    return session
