"""Text formatting helpers for chat replies and request logging"""

from typing import Iterable, Mapping

import httpx

from models.session import FileEntry

MASK = "********"

# Telegram limits
MAX_MESSAGE_LENGTH = 4096
MAX_CALLBACK_ANSWER_LENGTH = 200


def mask_params(params: Mapping[str, object], secret_keys: Iterable[str] = ("passwd", "_sid")) -> dict[str, object]:
    """Copy of query params with secret values replaced"""
    secrets = set(secret_keys)
    return {key: (MASK if key in secrets else value) for key, value in params.items()}


def to_curl_command(url: str, params: Mapping[str, object]) -> str:
    """
    Render a GET request as an equivalent curl command for debug logs

    Args:
        url: Request URL without query string
        params: Query parameters, already masked

    Returns:
        Shell command string
    """
    full_url = str(httpx.URL(url, params={key: str(value) for key, value in params.items()}))
    return "curl -X GET '{}'".format(full_url.replace("'", "\\'"))


def truncate(text: str, limit: int) -> str:
    """Cut text to limit characters, marking the cut with an ellipsis"""
    if len(text) <= limit:
        return text
    return text[:limit - 1] + "…"


def format_file_list(folder_path: str, entries: list[FileEntry]) -> str:
    """Chat text for a folder listing, folders first"""
    if not entries:
        return f"No files found in {folder_path}."

    ordered = sorted(entries, key=lambda entry: (not entry.is_dir, entry.name.lower()))
    lines = [f"Files in {folder_path}:"]
    for entry in ordered:
        icon = "📁" if entry.is_dir else "📄"
        lines.append(f"{icon} {entry.name}")
    return truncate("\n".join(lines), MAX_MESSAGE_LENGTH)
