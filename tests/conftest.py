"""Pytest fixtures for tests."""

from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from padsmith.models import Button, Macropad
from padsmith.services import MappingStore


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def default_macropad():
    """Factory-default 2x3 pad with one knob."""
    return Macropad.create_default(2, 3, 1)


@pytest.fixture
def mapped_macropad(default_macropad):
    """Default pad with a few keys bound on the first layer."""
    default_macropad.layers[0].buttons[0][0] = Button(delay=0, mapping="ctrl-c,ctrl-v")
    default_macropad.layers[0].buttons[1][2] = Button(delay=100, mapping="a,b,c")
    default_macropad.layers[0].knobs[0].cw = Button(delay=0, mapping="volup")
    default_macropad.layers[0].knobs[0].ccw = Button(delay=0, mapping="voldown")
    default_macropad.layers[1].knobs[0].press = Button(delay=0, mapping="mute")
    return default_macropad


@pytest.fixture
def store():
    """Mapping store."""
    return MappingStore()


@pytest.fixture
def mapping_path(temp_dir):
    """Path for a mapping file that does not exist yet."""
    return temp_dir / "mapping-test.json"
