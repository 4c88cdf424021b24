"""
Module: bank.samples

Purpose:
    Bundled sample questions (ids "1".."10": Easy x3, Medium x4, Hard x3)
    used to seed a bank at startup.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from exam_toolkit import config
from exam_toolkit.core.models import Question
from exam_toolkit.core.utils.serialization import load_questions_jsonl


def load_sample_questions(path: Optional[Path] = None) -> List[Question]:
    """
    Load the bundled sample questions.

    Args:
        path: Override for the sample file location

    Returns:
        Sample questions in file order
    """
    return load_questions_jsonl(path or config.SAMPLE_QUESTIONS_PATH, strict=True)
