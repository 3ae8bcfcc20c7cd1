import pytest

from abquiz.models import Question


@pytest.fixture
def team_question():
    return Question(
        id='1',
        question='Would you rather work alone or in a team?',
        optionA='alone',
        optionB='in a team',
    )


@pytest.fixture
def three_questions():
    return [
        Question(id='1', text='Would you rather plan or improvise?', option_a='plan', option_b='improvise'),
        Question(id='2', text='Would you rather lead or follow?', option_a='lead', option_b='follow'),
        Question(id='3', text='Would you rather read or write?', option_a='read', option_b='write'),
    ]
