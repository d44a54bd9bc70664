import asyncio
import httpx
from typing import Optional, Dict, Any
import logging

from config import Settings
from errors import (
    ApiError,
    AuthError,
    NasError,
    NasPermissionError,
    TransportError,
    PERMISSION_DENIED_CODE,
    SESSION_INVALID_CODES,
    describe_error_code,
)
from models.session import NasSession, FileEntry, parse_ssh_status
from utils.formatters import mask_params, to_curl_command

logger = logging.getLogger(__name__)

# Every DSM API is reachable through the same CGI entry point
ENTRY_ENDPOINT = "/webapi/entry.cgi"

AUTH_API = "SYNO.API.Auth"
AUTH_VERSION = 3
TERMINAL_API = "SYNO.Core.Terminal"
TERMINAL_VERSION = 1
FILE_LIST_API = "SYNO.FileStation.List"
FILE_LIST_VERSION = 2


def _error_code(payload: Dict[str, Any]) -> Optional[int]:
    error = payload.get("error")
    if not isinstance(error, dict):
        return None
    try:
        return int(error["code"])
    except (KeyError, TypeError, ValueError):
        return None


def _failure_message(operation: str, code: Optional[int], api: str) -> str:
    if code is None:
        return f"{operation} failed with unknown error"
    return f"{operation} failed with error code: {code} - {describe_error_code(code, api)}"


def _data(payload: Dict[str, Any]) -> Dict[str, Any]:
    data = payload.get("data")
    return data if isinstance(data, dict) else {}


class SynologyClient:
    """Client for the Synology DSM Web API holding a single login session.

    The session is created lazily: every NAS operation logs in first when no
    session is held. Operations are serialized, since DSM ties one sid to one
    identity and the bot only ever keeps one.
    """

    def __init__(
        self,
        base_url: str,
        username: str,
        password: str,
        force_ipv4: bool = False,
        timeout: float = 30.0,
        verify_ssl: bool = True,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.base_url = base_url.rstrip("/")
        self.username = username
        self._password = password
        self.force_ipv4 = force_ipv4
        self.session = NasSession()
        self._lock = asyncio.Lock()

        if transport is None and force_ipv4:
            # Binding the local side to 0.0.0.0 keeps the connection on IPv4
            transport = httpx.AsyncHTTPTransport(local_address="0.0.0.0", verify=verify_ssl)
            logger.debug("Forcing IPv4 for Synology API requests")

        self.client = httpx.AsyncClient(
            timeout=timeout,
            verify=verify_ssl,
            transport=transport
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "SynologyClient":
        return cls(
            base_url=settings.synology_nas_base_url,
            username=settings.synology_username,
            password=settings.synology_password,
            force_ipv4=settings.force_ipv4,
            timeout=settings.request_timeout,
            verify_ssl=settings.synology_verify_ssl,
        )

    @property
    def authenticated(self) -> bool:
        return self.session.authenticated

    async def close(self):
        await self.client.aclose()

    async def shutdown(self):
        """Best-effort logout followed by closing the HTTP client"""
        try:
            await self.logout()
        except NasError as e:
            logger.warning(f"Logout during shutdown failed: {e.message}")
        finally:
            await self.close()

    # Auth endpoints
    async def login(self) -> None:
        """Log in and store the session id. Re-authenticates if already logged in."""
        async with self._lock:
            await self._login()

    async def logout(self) -> None:
        """Log out and forget the session id. No-op when not logged in."""
        async with self._lock:
            await self._logout()

    # Terminal endpoints
    async def get_ssh_status(self) -> bool:
        """Check whether the SSH service is enabled"""
        async with self._lock:
            data = await self._call(
                TERMINAL_API, TERMINAL_VERSION, "get", "Get SSH service status"
            )
        enabled = parse_ssh_status(data)
        logger.info(f"SSH service status: {'enabled' if enabled else 'disabled'}")
        return enabled

    async def set_ssh_enabled(self, enabled: bool) -> None:
        """Enable or disable the SSH service"""
        logger.info(f"{'Enabling' if enabled else 'Disabling'} SSH service...")
        async with self._lock:
            await self._call(
                TERMINAL_API,
                TERMINAL_VERSION,
                "set",
                f"{'Enable' if enabled else 'Disable'} SSH service",
                enable_ssh="true" if enabled else "false"
            )
        logger.info(f"Successfully {'enabled' if enabled else 'disabled'} SSH service")

    # FileStation endpoints
    async def list_files(self, folder_path: str) -> list[FileEntry]:
        """List the content of a folder, e.g. /volume1/homes"""
        logger.info(f"Listing files in folder: {folder_path}")
        async with self._lock:
            data = await self._call(
                FILE_LIST_API,
                FILE_LIST_VERSION,
                "list",
                f"List files in {folder_path}",
                folder_path=folder_path
            )
        return [FileEntry.from_api(item) for item in data.get("files", []) if isinstance(item, dict)]

    # Internals, callers must hold the lock
    async def _login(self) -> None:
        logger.info("Logging in to Synology NAS...")
        params = {
            "api": AUTH_API,
            "version": AUTH_VERSION,
            "method": "login",
            "account": self.username,
            "passwd": self._password,
            "format": "sid",
        }
        try:
            payload = await self._get(params, "Login", AuthError)
        except AuthError:
            self.session.clear()
            raise

        sid = _data(payload).get("sid") if payload.get("success") else None
        if not sid:
            self.session.clear()
            code = _error_code(payload)
            message = _failure_message("Login", code, AUTH_API)
            logger.error(message)
            raise AuthError(message, code)

        self.session.sid = str(sid)
        logger.info("Successfully logged in to Synology NAS")

    async def _logout(self) -> None:
        if not self.session.authenticated:
            logger.debug("Not logged in, no need to logout")
            return

        logger.info("Logging out from Synology NAS...")
        params = {
            "api": AUTH_API,
            "version": AUTH_VERSION,
            "method": "logout",
            "_sid": self.session.sid,
        }
        try:
            payload = await self._get(params, "Logout", AuthError)
        finally:
            self.session.clear()

        if not payload.get("success"):
            code = _error_code(payload)
            message = _failure_message("Logout", code, AUTH_API)
            logger.error(message)
            raise AuthError(message, code)
        logger.info("Successfully logged out from Synology NAS")

    async def _ensure_login(self) -> None:
        if not self.session.authenticated:
            logger.debug("Not logged in. Attempting automatic login...")
            await self._login()

    async def _call(
        self,
        api: str,
        version: int,
        method: str,
        operation: str,
        **extra_params: str
    ) -> Dict[str, Any]:
        """Authenticated API call returning the response's data object"""
        await self._ensure_login()

        params = {
            "api": api,
            "version": version,
            "method": method,
            "_sid": self.session.sid,
            **extra_params,
        }
        payload = await self._get(params, operation, ApiError)
        if payload.get("success"):
            return _data(payload)

        code = _error_code(payload)
        if code == PERMISSION_DENIED_CODE:
            error = NasPermissionError(operation)
            logger.error(error.message)
            raise error

        message = _failure_message(operation, code, api)
        logger.error(message)
        if code in SESSION_INVALID_CODES:
            self.session.clear()
            raise AuthError(message, code)
        raise ApiError(message, code)

    async def _get(
        self,
        params: Dict[str, Any],
        operation: str,
        error_cls: type[NasError]
    ) -> Dict[str, Any]:
        """Send one GET to the entry point and decode the JSON envelope"""
        url = f"{self.base_url}{ENTRY_ENDPOINT}"
        logger.debug(f"Equivalent curl command: {to_curl_command(url, mask_params(params))}")

        try:
            response = await self.client.get(url, params=params)
        except httpx.TimeoutException as e:
            message = f"{operation} failed: request to {self.base_url} timed out"
            logger.error(message)
            raise TransportError(message) from e
        except httpx.RequestError as e:
            message = f"{operation} failed: could not reach {self.base_url} ({e.__class__.__name__})"
            logger.error(message)
            raise TransportError(message) from e

        if response.is_error:
            message = f"{operation} failed with HTTP status {response.status_code}"
            logger.error(message)
            raise error_cls(message)

        try:
            payload = response.json()
        except ValueError as e:
            message = f"{operation} failed: NAS returned a malformed response"
            logger.error(message)
            raise error_cls(message) from e

        if not isinstance(payload, dict):
            message = f"{operation} failed: NAS returned a malformed response"
            logger.error(message)
            raise error_cls(message)

        logger.debug(f"{operation} response success={payload.get('success')}")
        return payload
