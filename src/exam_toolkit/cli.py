"""
Command-line driver for the exam toolkit.

Thin wrapper over QuestionBank for manual use:

    exam-toolkit generate -n 5 --topic Arrays --topic Trees --seed 7
    exam-toolkit stats
    exam-toolkit related 3 --depth 2

Questions come from the bundled samples unless --bank points at a JSONL
file (one question object per line).
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from exam_toolkit import __version__, config
from exam_toolkit.bank import BankConfig, QuestionBank
from exam_toolkit.common.topics import resolve_topic, topic_labels
from exam_toolkit.core.models import ConfigurationError, DifficultyWeights, ExamConfig, Question
from exam_toolkit.core.schemas import ValidationError
from exam_toolkit.core.utils import load_questions_jsonl

logger = logging.getLogger(__name__)


def _topic_arg(value: str):
    try:
        return resolve_topic(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exam-toolkit",
        description="Manage a question bank and generate exams from it",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--bank", type=Path, help="JSONL file of questions (default: bundled samples)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Generate an exam")
    gen.add_argument("-n", "--num-questions", type=int, default=config.DEFAULT_NUM_QUESTIONS,
                     help="Number of questions")
    easy, medium, hard = config.DEFAULT_DIFFICULTY_WEIGHTS
    gen.add_argument("--easy", type=int, default=easy, help="Weight for Easy questions")
    gen.add_argument("--medium", type=int, default=medium, help="Weight for Medium questions")
    gen.add_argument("--hard", type=int, default=hard, help="Weight for Hard questions")
    gen.add_argument("--topic", dest="topics", action="append", type=_topic_arg, default=[],
                     help=f"Topic to include, repeatable ({', '.join(topic_labels())})")
    gen.add_argument("--answers", action="store_true", help="Show answers")

    sub.add_parser("stats", help="Show question counts")

    rel = sub.add_parser("related", help="Show questions related to a question")
    rel.add_argument("question_id", help="Starting question id")
    rel.add_argument("--depth", type=int, default=config.DEFAULT_RELATED_DEPTH,
                     help="Maximum hops from the starting question")

    return parser


def load_bank(path: Optional[Path], seed: Optional[int]) -> QuestionBank:
    """Build a bank from a JSONL file, or from the bundled samples."""
    if path is None:
        return QuestionBank.from_config(BankConfig(seed=seed, load_samples=True))

    bank = QuestionBank.from_config(BankConfig(seed=seed))
    questions = load_questions_jsonl(path)
    added = bank.add_many(questions)
    if added < len(questions):
        logger.warning(f"Skipped {len(questions) - added} questions with duplicate ids")
    logger.info(f"Loaded {added} questions from {path}")
    return bank


def _format_question(index: int, question: Question, show_answer: bool) -> List[str]:
    lines = [f"{index}. [{question.difficulty.value}] [{question.topic.value}] {question.text} (id={question.id})"]
    for letter, option in zip("abcdefghijklmnopqrstuvwxyz", question.options or ()):
        lines.append(f"   {letter}) {option}")
    if show_answer and question.answer:
        lines.append(f"   Answer: {question.answer}")
    return lines


def _cmd_generate(bank: QuestionBank, args: argparse.Namespace) -> int:
    exam_config = ExamConfig(
        num_questions=args.num_questions,
        difficulties=DifficultyWeights(easy=args.easy, medium=args.medium, hard=args.hard),
        topics=tuple(args.topics),
        seed=args.seed,
    )
    result = bank.generate_exam(exam_config)

    for i, question in enumerate(result.questions, 1):
        for line in _format_question(i, question, args.answers):
            print(line)

    if result.shortfall:
        print(
            f"Only {result.question_count} of {exam_config.num_questions} questions "
            f"were available for this configuration.",
            file=sys.stderr,
        )
    return 0


def _cmd_stats(bank: QuestionBank, args: argparse.Namespace) -> int:
    counts = bank.counts()
    print(f"Total: {counts.total}")
    for difficulty, n in counts.by_difficulty.items():
        print(f"  {difficulty.value}: {n}")
    for topic, n in counts.by_topic.items():
        print(f"  {str(topic)}: {n}")
    return 0


def _cmd_related(bank: QuestionBank, args: argparse.Namespace) -> int:
    if args.question_id not in bank:
        print(f"Unknown question id: {args.question_id}", file=sys.stderr)
        return 1
    related = bank.related(args.question_id, args.depth)
    if not related:
        print("No related questions")
    for i, question in enumerate(related, 1):
        for line in _format_question(i, question, False):
            print(line)
    return 0


_COMMANDS = {
    "generate": _cmd_generate,
    "stats": _cmd_stats,
    "related": _cmd_related,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=config.LOG_FORMAT,
    )

    try:
        bank = load_bank(args.bank, args.seed)
        return _COMMANDS[args.command](bank, args)
    except ConfigurationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2
    except (FileNotFoundError, ValidationError) as e:
        print(f"Could not load questions: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
