"""Tests for results email composition."""

from wheel_of_life.core.email_templates import (
    CLOSING_LINE,
    RESULTS_SUBJECT,
    compose_results_email,
    greeting,
)
from wheel_of_life.core.schemas_assessment import AssessmentData
from wheel_of_life.core.scoring import score_assessment


def _health_result():
    return score_assessment(AssessmentData(satisfaction={"health": 7}, motivation={"health": 9}))


def test_greeting():
    assert greeting("Sam") == "Hi Sam,"
    assert greeting(None) == "Hello,"
    assert greeting("   ") == "Hello,"


def test_bodies_contain_top_three_only():
    email = compose_results_email(_health_result(), name="Sam")

    assert email.subject == RESULTS_SUBJECT
    for body in (email.html_body, email.text_body):
        assert "Hi Sam," in body
        assert "3. Romance / Love Life" in body
        assert "Personal Development" not in body
        assert CLOSING_LINE in body
    assert "1. Health & Fitness" in email.text_body
    assert "2. Friends & Family" in email.text_body
    assert "1. Health &amp; Fitness" in email.html_body
    assert "2. Friends &amp; Family" in email.html_body


def test_text_body_lists_scores():
    email = compose_results_email(_health_result())

    assert email.text_body.startswith("Hello,")
    assert "Current Satisfaction: 7/10" in email.text_body
    assert "Motivation to Improve: 9/10" in email.text_body
    assert "Priority Score: 27" in email.text_body


def test_html_escapes_name():
    email = compose_results_email(_health_result(), name="<b>Sam</b>")

    assert "<b>Sam</b>" not in email.html_body
    assert "Hi &lt;b&gt;Sam&lt;/b&gt;," in email.html_body
    assert "Health &amp; Fitness" in email.html_body
