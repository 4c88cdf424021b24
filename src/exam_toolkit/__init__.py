"""Top-level package for the exam toolkit.

Provides subpackages:
- exam_toolkit.core – question/exam models, schema validation, serialization
- exam_toolkit.bank – question repository, topic tree, relationship graph
- exam_toolkit.selection – exam generation algorithm
- exam_toolkit.cli – command-line driver
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    # In dev mode, read directly from pyproject.toml
    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        for line in pyproject.read_text(encoding="utf-8").splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.1.0"
                return line.split("=")[1].strip().strip('"').strip("'")

    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("exam-toolkit")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()

from .core.models import (  # noqa: E402
    ConfigurationError,
    Difficulty,
    DifficultyWeights,
    ExamConfig,
    ExamResult,
    Question,
    Topic,
)
from .bank import BankConfig, QuestionBank, QuestionRepository, create_default_bank  # noqa: E402
from .selection import generate_exam  # noqa: E402

__all__: list[str] = [
    "__version__",
    "ConfigurationError",
    "Difficulty",
    "DifficultyWeights",
    "ExamConfig",
    "ExamResult",
    "Question",
    "Topic",
    "BankConfig",
    "QuestionBank",
    "QuestionRepository",
    "create_default_bank",
    "generate_exam",
]
