import pytest

from identcase.case_utils import try_convert
from identcase.styles import Style
from identcase.utils import set_debug_enabled


@pytest.fixture(autouse=True)
def reset_debug_mode():
    set_debug_enabled(False)
    yield
    set_debug_enabled(False)


@pytest.fixture
def sample_rows():
    values = ["user_full name!", "!!!"]
    return [(value, {style: try_convert(value, style) for style in Style}) for value in values]
