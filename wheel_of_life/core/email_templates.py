"""Email bodies for Wheel of Life results."""

from dataclasses import dataclass
from html import escape

from wheel_of_life.core.categories import MAX_RATING
from wheel_of_life.core.insights import top_priorities
from wheel_of_life.core.schemas_assessment import ScoredResult

RESULTS_SUBJECT = "Your Wheel of Life Assessment Results"

INTRO_LINE = (
    "Thank you for completing your Wheel of Life assessment. "
    "Here are your personalized results:"
)

GROWTH_INSIGHTS = (
    "Your assessment reveals areas with the greatest potential for meaningful improvement. "
    "Focus on your highest priority areas first, as these represent the intersection of "
    "need and motivation.",
    "Remember: Small, consistent actions in high-priority areas often create momentum "
    "that spreads to other life domains.",
)

CLOSING_LINE = "Keep growing and remember to reassess periodically to track your progress!"

SIGNATURE_NAME = "Janette Possul"
SIGNATURE_TITLE = "Mental Health & Well-being Coach"
SIGNATURE_URL = "https://www.janettepossul.com"


@dataclass(frozen=True)
class ResultsEmail:
    subject: str
    html_body: str
    text_body: str


def greeting(name: str | None) -> str:
    if name and name.strip():
        return f"Hi {name.strip()},"
    return "Hello,"


def _render_html(result: ScoredResult, name: str | None) -> str:
    items = "".join(
        f"""
        <div style="background: #f4f1ec; padding: 15px; margin: 10px 0; border-radius: 10px;
                    border-left: 4px solid #e8e9ca;">
            <h3>{rank}. {escape(item.label)}</h3>
            <p>Current Satisfaction: <strong>{item.satisfaction}/{MAX_RATING}</strong></p>
            <p>Motivation to Improve: <strong>{item.motivation}/{MAX_RATING}</strong></p>
            <p>Priority Score: <strong>{item.priority}</strong></p>
        </div>"""
        for rank, item in enumerate(top_priorities(result), 1)
    )
    insights = "".join(f"<p>{paragraph}</p>" for paragraph in GROWTH_INSIGHTS)

    return f"""<!DOCTYPE html>
<html>
<head><meta charset="utf-8"></head>
<body style="font-family: Arial, sans-serif; line-height: 1.6; color: #1c1c1c;">
    <div style="max-width: 600px; margin: 0 auto; padding: 20px;">
        <h1 style="text-align: center;">Your Wheel of Life Results</h1>
        <p>{escape(greeting(name))}</p>
        <p>{INTRO_LINE}</p>
        <h2>Your Top Priority Areas:</h2>
        {items}
        <h2>Your Growth Insights:</h2>
        {insights}
        <div style="margin-top: 30px; padding-top: 20px; border-top: 1px solid #e8e9ca;
                    text-align: center; color: #666;">
            <p>{CLOSING_LINE}</p>
            <p><strong>{SIGNATURE_NAME}</strong><br>
            {SIGNATURE_TITLE}<br>
            <a href="{SIGNATURE_URL}" style="color: #1c1c1c; text-decoration: none;">www.janettepossul.com</a></p>
        </div>
    </div>
</body>
</html>
"""


def _render_text(result: ScoredResult, name: str | None) -> str:
    lines = [greeting(name), "", INTRO_LINE, "", "Your Top Priority Areas:"]
    for rank, item in enumerate(top_priorities(result), 1):
        lines.append(f"{rank}. {item.label}")
        lines.append(f"   Current Satisfaction: {item.satisfaction}/{MAX_RATING}")
        lines.append(f"   Motivation to Improve: {item.motivation}/{MAX_RATING}")
        lines.append(f"   Priority Score: {item.priority}")
    lines += ["", "Your Growth Insights:", *GROWTH_INSIGHTS, "", CLOSING_LINE, ""]
    lines += [SIGNATURE_NAME, SIGNATURE_TITLE, SIGNATURE_URL]
    return "\n".join(lines)


def compose_results_email(result: ScoredResult, name: str | None = None) -> ResultsEmail:
    """
    Compose the results email.

    Args:
        result: Scored assessment
        name: Optional recipient name for a personalized greeting

    Returns:
        ResultsEmail with subject, HTML body and plain text fallback
    """
    return ResultsEmail(
        subject=RESULTS_SUBJECT,
        html_body=_render_html(result, name),
        text_body=_render_text(result, name),
    )
