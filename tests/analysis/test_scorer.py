"""ComplexityScorer tests"""

import pytest

from agentic_tools.analysis.scorer import (
    ACTION_VERBS,
    HIGH_COMPLEXITY_KEYWORDS,
    ComplexityScorer,
    count_matches,
    format_number,
)


@pytest.fixture
def scorer():
    return ComplexityScorer()


class TestBaseScore:
    def test_defaults_to_five(self, scorer, make_task):
        score, issues = scorer.score(make_task())
        assert score == 5
        assert issues == []

    def test_uses_existing_complexity(self, scorer, make_task):
        score, _ = scorer.score(make_task(complexity=3))
        assert score == 3

    def test_zero_complexity_falls_back_to_default(self, scorer, make_task):
        score, _ = scorer.score(make_task(complexity=0))
        assert score == 5

    def test_negative_complexity_floored_at_one(self, scorer, make_task):
        score, _ = scorer.score(make_task(complexity=-4))
        assert score == 1


class TestHeuristics:
    def test_long_name(self, scorer, make_task):
        score, issues = scorer.score(make_task(name='n' * 51))
        assert score == 6
        assert issues == ['Task name is very long, suggesting multiple concerns']

    def test_name_of_fifty_chars_not_penalized(self, scorer, make_task):
        score, _ = scorer.score(make_task(name='n' * 50))
        assert score == 5

    def test_three_high_complexity_keywords(self, scorer, make_task):
        task = make_task(details='Touch the database, the api and the security layer')
        score, issues = scorer.score(task)
        assert score == 7
        assert issues == ['Contains 3 high-complexity keywords']

    def test_two_high_complexity_keywords_not_penalized(self, scorer, make_task):
        score, issues = scorer.score(make_task(details='database and security'))
        assert score == 5
        assert issues == []

    def test_keyword_matching_is_case_insensitive(self, scorer, make_task):
        score, issues = scorer.score(make_task(details='DATABASE Api SeCuRiTy'))
        assert score == 7
        assert '3' in issues[0]

    def test_many_action_verbs(self, scorer, make_task):
        task = make_task(details='Implement the feature, create a form, build it and deploy')
        score, issues = scorer.score(task)
        assert score == 6
        assert issues == ['Contains 4 different action verbs, suggesting multiple tasks']

    def test_long_details(self, scorer, make_task):
        score, issues = scorer.score(make_task(details='x' * 501))
        assert score == 6
        assert issues == ['Task description is very detailed, suggesting high complexity']

    def test_high_estimate(self, scorer, make_task):
        score, issues = scorer.score(make_task(estimated_hours=21))
        assert score == 6
        assert issues == ['High time estimate (21 hours) suggests complexity']

    def test_fractional_estimate_in_issue(self, scorer, make_task):
        _, issues = scorer.score(make_task(estimated_hours=20.5))
        assert issues == ['High time estimate (20.5 hours) suggests complexity']

    @pytest.mark.parametrize('hours, shown', [
        (1234567, '1234567'),
        (20.0000001, '20.0000001'),
        (48.0, '48'),
    ])
    def test_estimate_shown_exactly(self, scorer, make_task, hours, shown):
        _, issues = scorer.score(make_task(estimated_hours=hours))
        assert issues == [f"High time estimate ({shown} hours) suggests complexity"]

    def test_estimate_of_twenty_not_penalized(self, scorer, make_task):
        score, _ = scorer.score(make_task(estimated_hours=20))
        assert score == 5

    def test_many_dependencies(self, scorer, make_task):
        score, issues = scorer.score(make_task(depends_on=['a', 'b', 'c', 'd']))
        assert score == 6
        assert issues == ['Many dependencies (4) suggest complex coordination']

    def test_three_dependencies_not_penalized(self, scorer, make_task):
        score, _ = scorer.score(make_task(depends_on=['a', 'b', 'c']))
        assert score == 5


class TestClamp:
    def test_every_heuristic_capped_at_ten(self, scorer, make_task):
        details = ' '.join(HIGH_COMPLEXITY_KEYWORDS + ACTION_VERBS) + ' ' + 'y' * 500
        task = make_task(
            name='n' * 60,
            details=details,
            estimated_hours=40,
            depends_on=['a', 'b', 'c', 'd', 'e'],
        )
        score, issues = scorer.score(task)
        assert score == 10
        assert len(issues) == 6

    @pytest.mark.parametrize('complexity', [None, -10, 1, 5, 10, 15])
    def test_score_within_bounds(self, scorer, make_task, complexity):
        task = make_task(complexity=complexity, name='n' * 60, estimated_hours=99)
        score, _ = scorer.score(task)
        assert 1 <= score <= 10

    def test_task_is_not_modified(self, scorer, make_task):
        task = make_task(details='Database API Security', complexity=4)
        scorer.score(task)
        assert task.details == 'Database API Security'
        assert task.complexity == 4


class TestThreshold:
    def test_score_equal_to_threshold_is_complex(self, scorer):
        assert scorer.is_complex(7, 7)

    def test_score_below_threshold_is_simple(self, scorer):
        assert not scorer.is_complex(6, 7)


class TestCountMatches:
    def test_counts_distinct_terms(self):
        assert count_matches('api api api', ['api', 'database']) == 1

    def test_substring_match(self):
        assert count_matches('subsystems', ['system']) == 1


class TestFormatNumber:
    def test_whole_float_drops_fraction(self):
        assert format_number(7.0) == '7'

    def test_fraction_kept(self):
        assert format_number(7.5) == '7.5'

    def test_large_integer_not_abbreviated(self):
        assert format_number(1234567) == '1234567'
