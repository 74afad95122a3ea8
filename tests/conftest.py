"""Shared fixtures for Syncthing MCP tests."""

import pytest
import respx

from mcp_server_syncthing.client import SyncthingClient
from mcp_server_syncthing.config import SyncthingConfig
from mcp_server_syncthing.dispatcher import ToolDispatcher


# ---------------------------------------------------------------------------
# Common Syncthing API response fixtures
# ---------------------------------------------------------------------------

DEVICE_ID_LOCAL = "AAAAAAA-AAAAAAA-AAAAAAA-AAAAAAA-AAAAAAA-AAAAAAA-AAAAAAA-AAAAAAA"
DEVICE_ID_REMOTE = "BBBBBBB-BBBBBBB-BBBBBBB-BBBBBBB-BBBBBBB-BBBBBBB-BBBBBBB-BBBBBBB"

FOLDER_ID = "test-folder"
API_KEY = "test-api-key-12345"
BASE_URL = "http://localhost:8384"


def make_folders() -> list:
    return [
        {
            "id": FOLDER_ID,
            "label": "Test Folder",
            "path": "/data/test",
            "type": "sendreceive",
            "paused": False,
            "devices": [{"deviceID": DEVICE_ID_LOCAL}, {"deviceID": DEVICE_ID_REMOTE}],
        },
        {
            "id": "photos",
            "label": "Photos",
            "path": "/data/photos",
            "type": "sendonly",
            "rescanIntervalS": 3600,
        },
    ]


def make_devices() -> list:
    return [
        {
            "deviceID": DEVICE_ID_LOCAL,
            "name": "local-dev",
            "addresses": ["dynamic"],
            "compression": "metadata",
        },
        {
            "deviceID": DEVICE_ID_REMOTE,
            "name": "remote-dev",
            "addresses": ["tcp://192.168.1.2:22000"],
            "introducer": False,
        },
    ]


def make_system_status(my_id: str = DEVICE_ID_LOCAL) -> dict:
    return {"myID": my_id, "uptime": 3600, "goroutines": 42}


def make_connections() -> dict:
    return {
        "total": {"inBytesTotal": 5120, "outBytesTotal": 10240},
        "connections": {
            DEVICE_ID_REMOTE: {
                "connected": True,
                "paused": False,
                "address": "192.168.1.2:22000",
                "type": "tcp-client",
                "crypto": "TLS1.3",
            },
        },
    }


def make_db_status(*, state: str = "idle") -> dict:
    return {
        "state": state,
        "globalFiles": 100,
        "globalBytes": 1000000,
        "localFiles": 100,
        "localBytes": 1000000,
        "needFiles": 0,
        "needBytes": 0,
    }


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def config():
    return SyncthingConfig(api_key=API_KEY, api_url=BASE_URL)


@pytest.fixture
def client(config):
    """A SyncthingClient for testing."""
    return SyncthingClient(config)


@pytest.fixture
def dispatcher(client):
    return ToolDispatcher(client)


@pytest.fixture
def mock_api():
    """Activate respx mock for the default Syncthing base URL.

    Pre-configures the listing endpoints; tests add or override routes on the
    returned router.
    """
    with respx.mock(base_url=BASE_URL, assert_all_called=False) as router:
        router.get("/rest/system/status").respond(json=make_system_status())
        router.get("/rest/config/folders").respond(json=make_folders())
        router.get("/rest/config/devices").respond(json=make_devices())
        router.get("/rest/system/connections").respond(json=make_connections())
        yield router
