import sys
from pathlib import Path
from typing import Generator

import pytest

# Ensure local source package (src/fluenthttp) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))

from fluenthttp import Http, HttpConfig  # noqa: E402
from fluenthttp.models.errors import TransportError  # noqa: E402
from tests.utils.transports import RecordingTransport  # noqa: E402


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    for name in (
        "FLUENTHTTP_TIMEOUT",
        "FLUENTHTTP_FOLLOW_REDIRECTS",
        "FLUENTHTTP_PROXY",
        "FLUENTHTTP_MAX_WORKERS",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_default_http() -> Generator[None, None, None]:
    """Give every test a fresh process-wide Http instance."""
    Http.set_default(None)
    yield
    default = Http._default
    Http.set_default(None)
    if default is not None:
        default.close()


@pytest.fixture
def base_url() -> str:
    return "https://test.fluenthttp.dev"


@pytest.fixture
def config() -> HttpConfig:
    return HttpConfig(timeout=5.0, max_workers=4)


@pytest.fixture
def http(config: HttpConfig) -> Generator[Http, None, None]:
    """An Http factory over the default httpx transport (mocked by httpx_mock)."""
    with Http(config=config) as http:
        yield http


@pytest.fixture
def recording_transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def unreachable_transport() -> RecordingTransport:
    return RecordingTransport(error=TransportError("Connection refused"))
