"""Tests for the heuristic strength analyzer."""

import pytest

from core.strength_utils import (
    MSG_COMMON,
    MSG_EXCELLENT,
    MSG_NO_DIGIT,
    MSG_NO_LOWER,
    MSG_NO_SYMBOL,
    MSG_NO_UPPER,
    MSG_REPEATED,
    MSG_TOO_SHORT,
    StrengthLevel,
    StrengthReport,
    analyze,
    count_repeats,
    has_common_pattern,
    strength_label,
)


def test_all_classes_twelve_chars():
    report = analyze("Aa1!Aa1!Aa1!")
    assert report.score == 85
    assert report.level == StrengthLevel.STRONG
    assert report.level == "Strong"
    assert report.feedback == (MSG_EXCELLENT,)


def test_repeated_runs():
    report = analyze("aaa111")
    # +30 variety, -20 for two runs, nothing for length
    assert report.score == 10
    assert report.level == StrengthLevel.VERY_WEAK
    assert report.feedback == (MSG_TOO_SHORT, MSG_NO_UPPER, MSG_NO_SYMBOL, MSG_REPEATED)


def test_common_pattern_penalised_once():
    report = analyze("password123")
    # 15 length + 30 variety - 20 once, although "123" matches as well
    assert report.score == 25
    assert report.level == StrengthLevel.WEAK
    assert report.feedback == (MSG_NO_UPPER, MSG_NO_SYMBOL, MSG_COMMON)


def test_empty_password():
    report = analyze("")
    assert report.score == 0
    assert report.level == StrengthLevel.VERY_WEAK
    assert report.feedback == (
        MSG_TOO_SHORT, MSG_NO_UPPER, MSG_NO_LOWER, MSG_NO_DIGIT, MSG_NO_SYMBOL,
    )


@pytest.mark.parametrize("password", ["a", "Ab1!", "Zx9#Wq7"])
def test_short_passwords(password):
    report = analyze(password)
    assert MSG_TOO_SHORT in report.feedback
    assert report.score <= 60
    assert report.feedback[0] == MSG_TOO_SHORT


def test_short_single_class_scores_low():
    assert analyze("zzq").score <= 15
    assert analyze("x").score == 15


def test_length_tiers():
    assert analyze("Xyzwvut1").score == 15 + 45
    assert analyze("Xyzwvut1").level == StrengthLevel.GOOD
    assert analyze("Xyzwvut1Mnpq").score == 25 + 45


def test_score_is_clamped_at_zero():
    report = analyze("aaabbbcccabc")
    # 25 + 15 - 30 for three runs - 20 for "abc"
    assert report.score == 0
    assert report.feedback == (MSG_NO_UPPER, MSG_NO_DIGIT, MSG_NO_SYMBOL, MSG_REPEATED, MSG_COMMON)


def test_count_repeats():
    assert count_repeats("aa") == 0
    assert count_repeats("aaa") == 1
    assert count_repeats("aaaaaa") == 1
    assert count_repeats("aaa-bbb-!!!!") == 3
    assert count_repeats("abab") == 0


def test_common_pattern_case_insensitive():
    assert has_common_pattern("MyQWERTYpad")
    assert has_common_pattern("xABCx")
    assert has_common_pattern("PassWord")
    assert not has_common_pattern("Tr0ub4dor&3")


@pytest.mark.parametrize("score,level", [
    (100, StrengthLevel.VERY_STRONG),
    (90, StrengthLevel.VERY_STRONG),
    (89, StrengthLevel.STRONG),
    (75, StrengthLevel.STRONG),
    (74, StrengthLevel.GOOD),
    (60, StrengthLevel.GOOD),
    (59, StrengthLevel.FAIR),
    (40, StrengthLevel.FAIR),
    (39, StrengthLevel.WEAK),
    (20, StrengthLevel.WEAK),
    (19, StrengthLevel.VERY_WEAK),
    (0, StrengthLevel.VERY_WEAK),
])
def test_strength_label_thresholds(score, level):
    assert strength_label(score) == level


def test_analyze_is_pure():
    assert analyze("Moon-Rain42#") == analyze("Moon-Rain42#")


def test_report_to_dict():
    report = StrengthReport(score=85, level=StrengthLevel.STRONG, feedback=(MSG_EXCELLENT,))
    assert report.to_dict() == {"score": 85, "level": "Strong", "feedback": [MSG_EXCELLENT]}
