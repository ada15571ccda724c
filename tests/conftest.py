import pytest

from landmark_graph.config import EngineConfig, set_engine_config

# A plausible lateral cephalogram tracing, image coordinates (y grows downwards).
TRACING = {
    "S": (60.0, 80.0),
    "N": (130.0, 70.0),
    "A": (132.0, 130.0),
    "B": (126.0, 175.0),
    "Po": (40.0, 100.0),
    "Or": (115.0, 100.0),
    "Ar": (50.0, 120.0),
    "Go": (60.0, 170.0),
    "Me": (120.0, 200.0),
    "Gn": (128.0, 196.0),
    "Pog": (130.0, 188.0),
    "UIA": (125.0, 125.0),
    "UIT": (138.0, 155.0),
    "LIA": (122.0, 180.0),
    "LIT": (135.0, 153.0),
    "Prn": (160.0, 115.0),
    "Ls": (150.0, 145.0),
    "Li": (147.0, 165.0),
    "Pog'": (142.0, 195.0),
}


@pytest.fixture
def tracing():
    return dict(TRACING)


@pytest.fixture(autouse=True)
def _default_engine_config():
    set_engine_config(EngineConfig())
    yield
    set_engine_config(EngineConfig())
