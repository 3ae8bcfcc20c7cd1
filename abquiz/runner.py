# abquiz/runner.py
import logging
import time
from typing import Optional, Sequence

from .llm_helper import TextGenerator
from .models import GenerationParams, Question, ScoreMap
from .normalizer import normalize_scores
from .prompt import SYSTEM_PROMPT, build_score_prompt

logger = logging.getLogger(__name__)


async def score(
    questions: Sequence[Question],
    answers: Sequence[str],
    characteristics: Sequence[str],
    generator: TextGenerator,
    params: Optional[GenerationParams] = None
) -> ScoreMap:
    """
    Score a set of answers: build the prompt, call the model once, and
    normalize its reply.

    Args:
        questions: Questions in display order
        answers: Selected option text per question, positionally aligned
        characteristics: Pair names like "Flexible vs Structured"
        generator: Text-generation backend
        params: Generation parameters (defaults: 512 tokens, temperature 0.2)

    Raises:
        ValidationError, ServiceError, ParseError. Nothing is retried here.
    """
    params = params or GenerationParams()
    prompt = build_score_prompt(questions, answers, characteristics)
    logger.info(f"Scoring {len(questions)} answers against {len(characteristics)} characteristic pairs")

    start = time.time()
    raw_text = await generator.generate(SYSTEM_PROMPT, prompt, params)
    logger.info(f"Model replied in {time.time() - start:.2f}s")
    logger.debug(f"Raw model text: {raw_text}")

    return normalize_scores(raw_text, characteristics)
