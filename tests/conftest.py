import random
import sys
from pathlib import Path

import pytest

# Add src to sys.path so we can import exam_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from exam_toolkit.bank import load_sample_questions  # noqa: E402


# Common test fixtures
@pytest.fixture
def sample_questions():
    """The ten bundled sample questions (Easy x3, Medium x4, Hard x3)."""
    return load_sample_questions()


@pytest.fixture
def rng():
    """Deterministic random source."""
    return random.Random(1234)
