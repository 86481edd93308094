# -------------------------------------
import pytest
from bswp.logging import Logger
# -------------------------------------
@pytest.fixture
def logger():
    return Logger(4, False, False)
# -------------------------------------
