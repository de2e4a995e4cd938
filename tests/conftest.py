import numpy as np
import pytest


@pytest.fixture
def white_page():
    return np.full((160, 120, 3), 255, dtype=np.uint8)


@pytest.fixture
def text_page():
    """Light page with dark horizontal 'text' lines and a colored stamp."""
    page = np.full((200, 150, 3), 250, dtype=np.uint8)
    for y in range(20, 180, 12):
        page[y : y + 3, 15:135] = 30
    page[150:180, 90:130] = (200, 40, 40)
    return page


@pytest.fixture
def rng():
    return np.random.default_rng(1234)
