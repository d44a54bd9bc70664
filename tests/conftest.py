"""Shared fixtures: a fake DSM server, mocked Telegram updates and contexts"""

from unittest.mock import AsyncMock, Mock

import httpx
import pytest

from api_client import SynologyClient
from config import Settings

ALLOWED_CHAT_ID = 123456
STRANGER_CHAT_ID = 999999

ENV_VARS = [
    "TELEGRAM_BOT_TOKEN",
    "SYNOLOGY_NAS_BASE_URL",
    "SYNOLOGY_USERNAME",
    "SYNOLOGY_PASSWORD",
    "ALLOWED_CHAT_ID",
    "FORCE_IPV4",
    "LOG_LEVEL",
    "REQUEST_TIMEOUT",
    "SYNOLOGY_VERIFY_SSL",
]


def _ok(data=None) -> httpx.Response:
    body = {"success": True}
    if data is not None:
        body["data"] = data
    return httpx.Response(200, json=body)


def _fail(code: int) -> httpx.Response:
    return httpx.Response(200, json={"success": False, "error": {"code": code}})


class FakeNas:
    """In-memory stand-in for the DSM entry.cgi endpoint"""

    def __init__(self, password: str = "testpassword"):
        self.password = password
        self.ssh_enabled = False
        self.valid_sids: set[str] = set()
        self.logins = 0
        self.requests: list[dict[str, str]] = []
        self.terminal_error: int | None = None
        self.filestation_error: int | None = None
        self.timeout = False

    def calls(self, api: str, method: str | None = None) -> list[dict[str, str]]:
        return [
            params for params in self.requests
            if params.get("api") == api and (method is None or params.get("method") == method)
        ]

    def handler(self, request: httpx.Request) -> httpx.Response:
        params = dict(request.url.params)
        self.requests.append(params)

        if self.timeout:
            raise httpx.ReadTimeout("timed out", request=request)

        api = params.get("api")
        method = params.get("method")

        if api == "SYNO.API.Auth" and method == "login":
            if params.get("passwd") != self.password:
                return _fail(400)
            self.logins += 1
            sid = f"sid-{self.logins}"
            self.valid_sids.add(sid)
            return _ok({"sid": sid})

        if api == "SYNO.API.Auth" and method == "logout":
            self.valid_sids.discard(params.get("_sid"))
            return _ok()

        if params.get("_sid") not in self.valid_sids:
            return _fail(119)

        if api == "SYNO.Core.Terminal":
            if self.terminal_error is not None:
                return _fail(self.terminal_error)
            if method == "get":
                return _ok({"enable_ssh": self.ssh_enabled, "enable_telnet": False, "ssh_port": 22})
            if method == "set":
                self.ssh_enabled = params.get("enable_ssh") == "true"
                return _ok()

        if api == "SYNO.FileStation.List" and method == "list":
            if self.filestation_error is not None:
                return _fail(self.filestation_error)
            return _ok({
                "files": [
                    {"name": "notes.txt", "path": f"{params['folder_path']}/notes.txt", "isdir": False},
                    {"name": "photos", "path": f"{params['folder_path']}/photos", "isdir": True},
                ],
                "offset": 0,
                "total": 2,
            })

        return _fail(102)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every bot variable from the environment"""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        telegram_bot_token="123:abc",
        synology_nas_base_url="http://nas.local:5000/",
        synology_username="testuser",
        synology_password="testpassword",
        allowed_chat_id=ALLOWED_CHAT_ID,
    )


@pytest.fixture
def fake_nas():
    return FakeNas()


@pytest.fixture
def nas_client(fake_nas):
    """SynologyClient talking to the fake NAS"""
    return SynologyClient(
        base_url="http://nas.local:5000/",
        username="testuser",
        password="testpassword",
        transport=httpx.MockTransport(fake_nas.handler)
    )


@pytest.fixture
def mock_nas_client():
    """SynologyClient double for router and handler tests"""
    client = Mock(spec=SynologyClient)
    client.authenticated = True
    client.get_ssh_status = AsyncMock(return_value=True)
    client.set_ssh_enabled = AsyncMock()
    client.logout = AsyncMock()
    client.login = AsyncMock()
    client.list_files = AsyncMock(return_value=[])
    return client


@pytest.fixture
def mock_context(settings, mock_nas_client):
    """Mock telegram Context object"""
    context = Mock()
    context.bot_data = {"settings": settings, "nas_client": mock_nas_client}
    context.bot.send_message = AsyncMock()
    return context


def make_message_update(text: str, chat_id: int = ALLOWED_CHAT_ID):
    """Mock Update carrying a text message"""
    update = Mock()
    update.inline_query = None
    update.callback_query = None
    update.effective_user = Mock()
    update.effective_user.id = chat_id
    update.effective_user.first_name = "Alex"
    update.effective_chat = Mock()
    update.effective_chat.id = chat_id
    update.effective_message = Mock()
    update.effective_message.text = text
    update.effective_message.reply_text = AsyncMock()
    update.message = update.effective_message
    return update


def make_callback_update(data: str, chat_id: int = ALLOWED_CHAT_ID):
    """Mock Update carrying a button press"""
    update = Mock()
    update.inline_query = None
    update.effective_user = Mock()
    update.effective_user.id = chat_id
    update.effective_user.first_name = "Alex"
    update.effective_chat = Mock()
    update.effective_chat.id = chat_id
    update.callback_query = Mock()
    update.callback_query.data = data
    update.callback_query.answer = AsyncMock()
    update.callback_query.edit_message_text = AsyncMock()
    update.effective_message = Mock()
    update.effective_message.reply_text = AsyncMock()
    return update


def make_inline_update(query_text: str = "", user_id: int = ALLOWED_CHAT_ID):
    """Mock Update carrying an inline query"""
    update = Mock()
    update.callback_query = None
    update.effective_chat = None
    update.effective_user = Mock()
    update.effective_user.id = user_id
    update.effective_user.first_name = "Alex"
    update.inline_query = Mock()
    update.inline_query.query = query_text
    update.inline_query.from_user = update.effective_user
    update.inline_query.answer = AsyncMock()
    update.effective_message = None
    return update
