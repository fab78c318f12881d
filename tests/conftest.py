import pytest
from fastapi.testclient import TestClient

from hexboard.server import main
from hexboard.server.engine import GridController
from hexboard.shared.hex_math import ORIGIN


class Recorder:
    """Collects host callback invocations."""

    def __init__(self):
        self.calls = []

    def __call__(self, arg):
        self.calls.append(arg)


@pytest.fixture
def make_controller():
    """Returns a factory building a controller wired to fresh recorders."""
    def _make(range=1, initial_center=ORIGIN, levels=5, **kwargs):
        hooks = {
            "on_select": Recorder(),
            "on_hover_start": Recorder(),
            "on_hover_end": Recorder(),
            "on_highlight": Recorder(),
        }
        hooks.update(kwargs)
        controller = GridController(levels=levels, range=range, initial_center=initial_center, **hooks)
        return controller, hooks
    return _make


@pytest.fixture
def api(tmp_path, monkeypatch):
    """TestClient over a clean grid registry and an empty config dir."""
    monkeypatch.setattr(main, "CONFIG_DIR", str(tmp_path))
    main.grids.clear()
    with TestClient(main.app) as client:
        yield client
    main.grids.clear()
