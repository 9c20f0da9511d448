import pytest

from config import DEMO_LINES, get_active_params
from models.line_equation import LineEquation


@pytest.fixture
def demo_lines():
    return [LineEquation.from_integers(a, b, c) for a, b, c in DEMO_LINES]


@pytest.fixture
def canvas_params():
    params = get_active_params()
    params.update({
        "CANVAS_HEIGHT": 400,
        "CANVAS_WIDTH": 400,
        "PIXELS_PER_UNIT": 20,
    })
    return params
