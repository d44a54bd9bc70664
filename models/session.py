"""NAS session and response models"""

from dataclasses import dataclass
from typing import Any


@dataclass
class NasSession:
    """The single in-memory DSM session held by the client"""
    sid: str | None = None

    @property
    def authenticated(self) -> bool:
        return self.sid is not None

    def clear(self) -> None:
        self.sid = None


@dataclass(frozen=True)
class FileEntry:
    """One item of a FileStation folder listing"""
    name: str
    path: str
    is_dir: bool

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "FileEntry":
        return cls(
            name=str(data.get("name", "")),
            path=str(data.get("path", "")),
            is_dir=bool(data.get("isdir", False)),
        )


# DSM versions disagree on the key that carries the SSH flag
SSH_STATUS_KEYS = ("service_status", "enable_ssh", "enable", "status", "ssh_status")


def parse_ssh_status(data: dict[str, Any] | None) -> bool:
    """SSH is enabled if any of the known status keys is truthy"""
    if not data:
        return False
    return any(bool(data.get(key)) for key in SSH_STATUS_KEYS)
