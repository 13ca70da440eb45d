"""
Identity service client for the hosted auth & profiles API.
"""

from typing import Any, Dict, Optional
import httpx

from ...config import IdentityServiceConfig
from ...core.exceptions import AuthError, IdentityServiceError, ProfileNotFoundError


_AUTH_REJECTION_CODES = {400, 401, 403, 422}
_NOT_FOUND_CODES = {404, 406}


def _error_message(response: httpx.Response) -> str:
    """Pull the human-readable error out of an identity service response."""
    try:
        body = response.json()
    except ValueError:
        return response.text or f"HTTP error {response.status_code}"
    if isinstance(body, dict):
        for key in ("error_description", "msg", "message", "error"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
    return f"HTTP error {response.status_code}"


class IdentityServiceClient:
    """Thin async client over the identity service REST endpoints."""

    def __init__(
        self,
        config: IdentityServiceConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config
        self.timeout = config.timeout
        self._transport = transport

    def _headers(self, access_token: Optional[str] = None) -> Dict[str, str]:
        headers = {"apikey": self.config.api_key or ""}
        if access_token:
            headers["Authorization"] = f"Bearer {access_token}"
        return headers

    async def _make_request(
        self,
        method: str,
        url: str,
        json: Optional[Dict] = None,
        params: Optional[Dict] = None,
        headers: Optional[Dict] = None,
    ) -> Any:
        """Make HTTP request with error handling."""
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.request(
                    method=method,
                    url=url,
                    json=json,
                    params=params,
                    headers=headers or {},
                )
                response.raise_for_status()
                if not response.content:
                    return {}
                return response.json()
        except httpx.TimeoutException:
            raise IdentityServiceError("Request timed out")
        except httpx.HTTPStatusError as e:
            code = e.response.status_code
            if code in _AUTH_REJECTION_CODES:
                raise AuthError(_error_message(e.response))
            raise IdentityServiceError(f"HTTP error {code}", status_code=code)
        except httpx.HTTPError as e:
            raise IdentityServiceError(f"Request failed: {str(e)}")
        except ValueError as e:
            raise IdentityServiceError(f"Invalid JSON response: {str(e)}")

    async def sign_in_with_password(self, email: str, password: str) -> Dict[str, Any]:
        """Exchange e-mail and password for a session."""
        return await self._make_request(
            "POST",
            self.config.get_token_url(),
            json={"email": email, "password": password},
            headers=self._headers(),
        )

    async def sign_up(
        self, email: str, password: str, metadata: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """Register a new account; the response holds a session only when no confirmation is pending."""
        return await self._make_request(
            "POST",
            self.config.get_signup_url(),
            json={"email": email, "password": password, "data": metadata or {}},
            headers=self._headers(),
        )

    async def sign_out(self, access_token: str) -> None:
        """Revoke the session behind ``access_token``."""
        await self._make_request(
            "POST",
            self.config.get_logout_url(),
            headers=self._headers(access_token),
        )

    async def get_user(self, access_token: str) -> Dict[str, Any]:
        """Get the user that owns ``access_token``."""
        return await self._make_request(
            "GET",
            self.config.get_user_url(),
            headers=self._headers(access_token),
        )

    async def get_profile_by_id(
        self, user_id: str, access_token: Optional[str] = None
    ) -> Dict[str, Any]:
        """Get the single profiles row whose id is ``user_id``."""
        headers = self._headers(access_token)
        headers["Accept"] = "application/vnd.pgrst.object+json"

        try:
            result = await self._make_request(
                "GET",
                self.config.get_profiles_url(),
                params={"id": f"eq.{user_id}", "select": "*"},
                headers=headers,
            )
        except IdentityServiceError as e:
            if e.status_code in _NOT_FOUND_CODES:
                raise ProfileNotFoundError(f"Profile not found for {user_id}") from e
            raise

        # Some gateways ignore the object Accept header and return an array
        if isinstance(result, list):
            if not result:
                raise ProfileNotFoundError(f"Profile not found for {user_id}")
            result = result[0]

        if not isinstance(result, dict) or not result:
            raise ProfileNotFoundError(f"Profile not found for {user_id}")

        return result

    def get_oauth_url(self) -> str:
        """Get the URL that starts the OAuth flow."""
        return self.config.get_authorize_url()
