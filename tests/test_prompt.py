import pytest

from abquiz.errors import ValidationError
from abquiz.models import DEFAULT_CHARACTERISTIC_PAIRS
from abquiz.prompt import build_score_prompt, split_pair


def test_build_is_deterministic(three_questions):
    answers = ['plan', 'follow', 'write']
    chars = ['Flexible vs Structured', 'Analytical vs Creative']
    first = build_score_prompt(three_questions, answers, chars)
    second = build_score_prompt(list(three_questions), list(answers), list(chars))
    assert first == second


def test_build_lists_answers_and_pairs_in_order(three_questions):
    answers = ['plan', 'follow', 'write']
    chars = ['Flexible vs Structured', 'Analytical vs Creative']
    prompt = build_score_prompt(three_questions, answers, chars)

    lines = [
        '1. Q: Would you rather plan or improvise? / A: plan',
        '2. Q: Would you rather lead or follow? / A: follow',
        '3. Q: Would you rather read or write? / A: write',
    ]
    positions = [prompt.index(line) for line in lines]
    assert positions == sorted(positions)

    assert prompt.index('- Flexible vs Structured') < prompt.index('- Analytical vs Creative')
    assert prompt.index('Questions and Answers:') < positions[0]
    assert positions[-1] < prompt.index('Characteristic pairs:')


def test_build_states_output_contract(team_question):
    prompt = build_score_prompt([team_question], ['in a team'], ['Independent vs Collaborative'])
    assert 'ONLY a JSON object' in prompt
    assert 'exactly one decimal digit' in prompt
    assert 'sum to exactly 100.0' in prompt
    assert '{"Independent": 62.5, "Collaborative": 37.5}' in prompt
    assert prompt.index('ONLY a JSON object') < prompt.index('Q: ') < prompt.index('sum to exactly 100.0')


def test_build_rejects_length_mismatch(three_questions):
    with pytest.raises(ValidationError, match='length mismatch'):
        build_score_prompt(three_questions, ['plan', 'follow'], DEFAULT_CHARACTERISTIC_PAIRS)


def test_build_rejects_empty_characteristics(three_questions):
    with pytest.raises(ValidationError, match='no characteristics'):
        build_score_prompt(three_questions, ['plan', 'follow', 'write'], [])


def test_build_rejects_malformed_pair(team_question):
    with pytest.raises(ValidationError, match='invalid characteristic pair'):
        build_score_prompt([team_question], ['alone'], ['Independent and Collaborative'])


@pytest.mark.parametrize('pair,expected', [
    ('Flexible vs Structured', ('Flexible', 'Structured')),
    ('Detail-oriented vs Big-picture thinker', ('Detail-oriented', 'Big-picture thinker')),
    ('  Proactive vs Reactive ', ('Proactive', 'Reactive')),
])
def test_split_pair(pair, expected):
    assert split_pair(pair) == expected


@pytest.mark.parametrize('pair', ['Flexible', 'A vs B vs C', ' vs Right', 'Left VS Right'])
def test_split_pair_invalid(pair):
    with pytest.raises(ValidationError):
        split_pair(pair)


def test_default_pairs_are_well_formed():
    assert len(DEFAULT_CHARACTERISTIC_PAIRS) == 10
    for pair in DEFAULT_CHARACTERISTIC_PAIRS:
        split_pair(pair)
