import pytest
from core.impedance import Impedance
from inout.config import EngineConfig
from interaction.engine import InteractionEngine

CENTER = (200.0, 200.0)
RADIUS = 100.0


class CallbackRecorder:
    """Collects engine callbacks in emission order."""
    def __init__(self):
        self.events = []

    def on_direct_drag(self, z):
        self.events.append(("drag", z))

    def on_hover_change(self, hovering):
        self.events.append(("hover", hovering))

    def on_drag_change(self, dragging):
        self.events.append(("dragging", dragging))

    def names(self):
        return [name for name, _ in self.events]

    def impedances(self):
        return [value for name, value in self.events if name == "drag"]


@pytest.fixture
def recorder():
    return CallbackRecorder()

@pytest.fixture
def engine(recorder):
    eng = InteractionEngine(
        EngineConfig(),
        on_direct_drag=recorder.on_direct_drag,
        on_hover_change=recorder.on_hover_change,
        on_drag_change=recorder.on_drag_change,
    )
    eng.set_canvas(CENTER, RADIUS)
    return eng

@pytest.fixture
def mismatched_load():
    return Impedance(2.0, 0.0)

@pytest.fixture
def dummy_logger(caplog):
    caplog.set_level("DEBUG")
    return caplog
