# abquiz/prompt.py
# Builds the scoring instruction sent to the model. Pure and deterministic:
# the same input always yields the same text.

import json
from typing import List, Sequence, Tuple

from .errors import ValidationError
from .models import Question

SYSTEM_PROMPT = 'You are an expert in analyzing behavioral characteristics of software engineers.'

PAIR_SEPARATOR = ' vs '


def split_pair(pair: str) -> Tuple[str, str]:
    """
    Split a characteristic pair like "Flexible vs Structured" into its
    two trait labels.
    """
    parts = pair.split(PAIR_SEPARATOR)
    if len(parts) != 2:
        raise ValidationError(f'invalid characteristic pair: {pair!r}')
    left, right = parts[0].strip(), parts[1].strip()
    if not left or not right:
        raise ValidationError(f'invalid characteristic pair: {pair!r}')
    return left, right


def build_score_prompt(
    questions: Sequence[Question],
    answers: Sequence[str],
    characteristics: Sequence[str]
) -> str:
    """
    Serialize questions, answers and characteristic pairs into a single
    instruction asking for a JSON object of paired percentage scores.

    Raises:
        ValidationError: answers and questions differ in length, no
            characteristics were given, or a pair is malformed.
    """
    if len(answers) != len(questions):
        raise ValidationError(
            f'length mismatch: {len(questions)} questions, {len(answers)} answers'
        )
    if not characteristics:
        raise ValidationError('no characteristics')

    pairs = [split_pair(c) for c in characteristics]

    lines: List[str] = [
        'Analyze all of the answers below collectively, as one person\'s '
        'responses, and score that person on each characteristic pair. '
        'Return ONLY a JSON object: no prose, no explanation, no code fences.',
        '',
        'Questions and Answers:',
    ]
    for i, (question, answer) in enumerate(zip(questions, answers), start=1):
        lines.append(f'{i}. Q: {question.text} / A: {answer}')

    lines += ['', 'Characteristic pairs:']
    lines += [f'- {c}' for c in characteristics]

    left, right = pairs[0]
    example = json.dumps({left: 62.5, right: 37.5})
    lines += [
        '',
        'Output format:',
        '- Use each trait label exactly as written above as a JSON key, '
        'two keys per pair.',
        '- Every score is a number with exactly one decimal digit (e.g. 62.5).',
        '- The two scores of each pair must sum to exactly 100.0.',
        f'Example for the first pair: {example}',
    ]
    return '\n'.join(lines)
