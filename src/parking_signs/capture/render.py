"""Text rendering of analysis verdicts."""

from parking_signs.domain.verdict import AnalysisVerdict


def render_verdict(verdict: AnalysisVerdict) -> list[str]:
    """Render a verdict block as display lines."""
    lines = [
        "✓ Parking Allowed" if verdict.can_park else "✗ No Parking",
        verdict.explanation,
    ]
    if verdict.restrictions:
        lines.append("Restrictions:")
        lines.extend(f"- {restriction}" for restriction in verdict.restrictions)
    if verdict.time_limit is not None:
        lines.append(f"Time limit: {verdict.time_limit} minutes")
    return lines
