"""Error types for configuration and Synology NAS calls"""

from typing import Optional


# Common DSM Web API error codes
COMMON_ERROR_CODES = {
    100: "Unknown error.",
    101: "No parameter of API, method or version.",
    102: "The requested API does not exist.",
    103: "The requested method does not exist.",
    104: "The requested version does not support the functionality.",
    105: "The logged in session does not have permission.",
    106: "Session timeout.",
    107: "Session interrupted by duplicated login.",
    108: "Failed to upload the file.",
    109: "The network connection is unstable or the system is busy.",
    110: "The network connection is unstable or the system is busy.",
    111: "The network connection is unstable or the system is busy.",
    112: "Preserve for other purpose.",
    113: "Preserve for other purpose.",
    114: "Lost parameters for this API.",
    115: "Not allowed to upload a file.",
    116: "Not allowed to perform for a demo site.",
    117: "The network connection is unstable or the system is busy.",
    118: "The network connection is unstable or the system is busy.",
    119: "Invalid session.",
    150: "Request source IP does not match the login IP.",
}

# SYNO.API.Auth specific error codes
AUTH_ERROR_CODES = {
    400: "No such account or incorrect password.",
    401: "Disabled account.",
    402: "Denied permission.",
    403: "2-factor authentication code required.",
    404: "Failed to authenticate 2-factor authentication code.",
    406: "Enforce to authenticate with 2-factor authentication code.",
    407: "Blocked IP source.",
    408: "Expired password cannot change.",
    409: "Expired password.",
    410: "Password must be changed.",
}

# SYNO.FileStation.* specific error codes
FILESTATION_ERROR_CODES = {
    400: "Invalid parameter of file operation.",
    401: "Unknown error of file operation.",
    402: "System is too busy.",
    403: "Invalid user does this file operation.",
    404: "Invalid group does this file operation.",
    405: "Invalid user and group does this file operation.",
    406: "Can't get user/group information from the account server.",
    407: "Operation not permitted.",
    408: "No such file or directory.",
    409: "Non-supported file system.",
    410: "Failed to connect internet-based file system (e.g., CIFS).",
    411: "Read-only file system.",
    412: "Filename too long in the non-encrypted file system.",
    413: "Filename too long in the encrypted file system.",
    414: "File already exists.",
    415: "Disk quota exceeded.",
    416: "No space left on device.",
    417: "Input/output error.",
    418: "Illegal name or path.",
    419: "Illegal file name.",
    420: "Illegal file name on FAT file system.",
    421: "Device or resource busy.",
}

PERMISSION_DENIED_CODE = 105
SESSION_INVALID_CODES = frozenset({106, 107, 119})


def describe_error_code(code: int, api: Optional[str] = None) -> str:
    """Human readable description of a DSM error code.

    Codes from 400 up are reused by every API with its own meaning, so they
    are only looked up in the table of the API that returned them.
    """
    if code in COMMON_ERROR_CODES:
        return COMMON_ERROR_CODES[code]
    if 120 <= code <= 149:
        return "Preserve for other purpose."
    if api == "SYNO.API.Auth" and code in AUTH_ERROR_CODES:
        return AUTH_ERROR_CODES[code]
    if api and api.startswith("SYNO.FileStation.") and code in FILESTATION_ERROR_CODES:
        return FILESTATION_ERROR_CODES[code]
    return "Unknown error code."


class ConfigError(Exception):
    """Missing or invalid configuration. Fatal, raised only at startup."""


class NasError(Exception):
    """Base class for every failure talking to the NAS.

    Attributes:
        message: Text suitable for showing directly in chat.
        code: DSM error code, when the NAS returned one.
    """

    def __init__(self, message: str, code: Optional[int] = None):
        self.message = message
        self.code = code
        super().__init__(message)


class AuthError(NasError):
    """Login or logout failed, or the session is no longer valid"""


class NasPermissionError(NasError):
    """The session lacks permission for the call (DSM error 105).

    DSM hands sessions opened over IPv6 no rights on SYNO.Core.Terminal,
    so the message always points at the IPv4 workaround.
    """

    def __init__(self, operation: str):
        message = (
            f"{operation} failed with error code {PERMISSION_DENIED_CODE} - "
            f"{describe_error_code(PERMISSION_DENIED_CODE)} "
            "Sessions opened over IPv6 are not allowed to control the terminal service. "
            "Connect over IPv4 by setting FORCE_IPV4=true and restart the bot."
        )
        super().__init__(message, PERMISSION_DENIED_CODE)


class ApiError(NasError):
    """Any other unsuccessful NAS response"""


class TransportError(NasError):
    """Network failure or timeout before a NAS response arrived"""
