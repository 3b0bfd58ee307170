"""Recent evaluation activity CLI flow."""

from core import get_siem_events, count_events_by_status


def review_activity_flow(count: int = 10) -> list[dict]:
    """Show the most recent password evaluations from the SIEM log.

    Args:
        count: Number of recent evaluations to show

    Returns:
        The evaluation events that were displayed
    """
    events = [
        e for e in get_siem_events(limit=10000)
        if e.get("event_type") == "password_evaluated"
    ][-count:]

    if not events:
        print("No password evaluations recorded yet.")
        return []

    print(f"\n=== Last {len(events)} Evaluations ===")
    for event in events:
        details = event.get("details", {})
        print(
            f"{event.get('timestamp', '?')} - {event.get('status', 'UNKNOWN')} - "
            f"total {details.get('total', '?')} - length {details.get('length', '?')} - "
            f"{details.get('match_reason', '?')} ({event.get('source', '?')})"
        )

    counts = count_events_by_status("password_evaluated")
    summary = ", ".join(f"{status}: {n}" for status, n in sorted(counts.items()))
    print(f"Totals: {summary}")

    return events
