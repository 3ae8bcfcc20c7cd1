# abquiz/models.py
from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

ScoreMap = Dict[str, float]

NO_ANSWER = 'No answer'

DEFAULT_CHARACTERISTIC_PAIRS = [
    'Collaborative vs Independent',
    'Detail-oriented vs Big-picture thinker',
    'Proactive vs Reactive',
    'Flexible vs Structured',
    'Risk-taker vs Risk-averse',
    'Specialist vs Generalist',
    'Analytical vs Creative',
    'Fast-paced vs Methodical',
    'Introverted vs Extroverted',
    'Process-driven vs Results-driven',
]


class Question(BaseModel):
    """A forced-choice question. The UI sends `question`, `optionA`, `optionB`."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    text: str = Field(alias='question')
    option_a: str = Field(alias='optionA')
    option_b: str = Field(alias='optionB')


class GenerationParams(BaseModel):
    max_tokens: int = 512
    temperature: float = 0.2
    json_mode: bool = True


class AnalyzeRequest(BaseModel):
    questions: List[Question]
    answers: List[str]
    characteristics: Optional[List[str]] = None


def answer_for(question: Question, selected: Optional[str]) -> str:
    """Map a selection ("A", "B" or None) to the answer text sent for scoring."""
    if selected == 'A':
        return question.option_a
    if selected == 'B':
        return question.option_b
    return NO_ANSWER
