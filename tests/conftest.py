"""Shared test configuration and fixtures for releasemenu tests."""

import io

import pytest

from releasemenu.keys import Arrow, KeyEvent, KeyKind
from releasemenu.result import (
    ContainerUpdate,
    ControllerResult,
    ImageRef,
    Result,
    UpdateStatus,
)

DOWN = KeyEvent.of_arrow(Arrow.DOWN)
UP = KeyEvent.of_arrow(Arrow.UP)
LEFT = KeyEvent.of_arrow(Arrow.LEFT)
SPACE = KeyEvent.of_char(0x20)
ENTER = KeyEvent.of_char(0x0D)
ESCAPE = KeyEvent.of_char(0x1B)
INTERRUPT = KeyEvent.of_char(0x03)
UNKNOWN = KeyEvent(kind=KeyKind.UNKNOWN)


def make_update(container, current="registry/app:1.0", target="registry/app:1.1"):
    return ContainerUpdate(
        container=container,
        current=ImageRef.parse(current),
        target=ImageRef.parse(target),
    )


def make_result(status, error="", updates=()):
    return ControllerResult(status=UpdateStatus(status), error=error, per_container=list(updates))


def key_sequence(*keys):
    """Key reader that replays the given events in order."""
    events = iter(keys)
    return lambda: next(events)


class TtyStringIO(io.StringIO):
    """StringIO that claims to be a terminal."""

    def isatty(self):
        return True


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def mixed_results():
    """One controller of every status, with errors and updates."""
    return Result({
        "default:deployment/web": make_result("success", updates=[make_update("web")]),
        "default:deployment/api": make_result(
            "success", updates=[make_update("api"), make_update("sidecar")]
        ),
        "default:deployment/db": make_result("failed", error="image not found"),
        "kube-system:daemonset/agent": make_result("skipped", error="locked"),
        "default:deployment/cache": make_result(
            "ignored", error="excluded", updates=[make_update("cache")]
        ),
    })


@pytest.fixture
def mock_env(monkeypatch):
    """Clear releasemenu environment variables for isolated tests."""
    env_vars_to_clear = [
        "RELEASEMENU_VERBOSITY",
        "RELEASEMENU_TTY",
        "RELEASEMENU_NO_COLOR",
        "RELEASEMENU_LOG_DIR",
    ]
    for var in env_vars_to_clear:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def config_home(tmp_path, monkeypatch, mock_env):
    """Point the config loader at an empty directory under tmp_path."""
    import releasemenu.config

    config_dir = tmp_path / ".releasemenu"
    config_dir.mkdir()
    monkeypatch.setattr(releasemenu.config, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(releasemenu.config, "ENV_FILE", config_dir / ".env")
    monkeypatch.setattr(releasemenu.config, "SETTINGS_FILE", config_dir / "settings.json")
    return config_dir
