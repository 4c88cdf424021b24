"""
Configuration for the exam toolkit.

Package-wide defaults. Per-call behaviour is configured with the frozen
dataclasses `ExamConfig` (exam generation) and `BankConfig` (which
indices a question bank maintains).
"""

from pathlib import Path

# Exam generation defaults
DEFAULT_NUM_QUESTIONS = 10
DEFAULT_DIFFICULTY_WEIGHTS = (1, 1, 1)  # Easy, Medium, Hard

# Relationship graph
MAX_INITIAL_RELATED_EDGES = 3
DEFAULT_RELATED_DEPTH = 2

# Topic hierarchy
ROOT_NODE_ID = "root"
ROOT_NODE_NAME = "All Topics"

# Bundled seed data
SAMPLE_QUESTIONS_PATH = Path(__file__).resolve().parent / "bank" / "data" / "sample_questions.jsonl"

# Logging
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
