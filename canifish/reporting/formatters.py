"""Output formatters for run summaries and fishing reports."""

import json
from datetime import datetime

from canifish.evaluation.aggregator import ScoreBucket, score_bucket
from canifish.models.forecast import parse_timestamp
from canifish.models.reporting import RunSummary
from canifish.models.window import FishingWindow, VerdictStatus

_STATUS_MARK = {
    VerdictStatus.PASS: "✓",
    VerdictStatus.PARTIAL: "~",
    VerdictStatus.FAIL: "✗",
    VerdictStatus.HARD_FAIL: "✗✗",
}

_SECTION_TITLES = {
    ScoreBucket.OPTIMAL: "✅ Optimal Conditions",
    ScoreBucket.PARTIAL: "⚠️ Partial Conditions",
    ScoreBucket.UNSUITABLE: "❌ Unsuitable Conditions",
}

_EMPTY_SECTION = {
    ScoreBucket.OPTIMAL: "No optimal fishing windows found for this period",
    ScoreBucket.PARTIAL: "No partial matches found for this period",
    ScoreBucket.UNSUITABLE: "No unsuitable conditions found for this period",
}


def format_summary_text(s: RunSummary) -> str:
    """Plain text summary for logging."""
    lines = [
        f"=== Fishing Check Complete ({s.location}) | Run {s.run_id[:8]} ===",
        f"Days: {s.days_total} forecast, {s.days_skipped} skipped",
        f"Windows: {s.windows_total} evaluated, {s.optimal} optimal, "
        f"{s.partial} partial, {s.unsuitable} unsuitable",
    ]
    if s.windows_total:
        lines.append(f"Best score: {s.best_score:.1f}% ({s.best_label})")
    if s.errors:
        lines.append(f"Errors: {len(s.errors)}")
    lines.append(f"Duration: {s.duration_seconds:.1f}s")
    return "\n".join(lines)


def format_subject(windows: list[FishingWindow], location_name: str, now: datetime) -> str:
    has_optimal = any(score_bucket(w.overall_score) == ScoreBucket.OPTIMAL for w in windows)
    emoji = "✅" if has_optimal else "❌"
    return f"{emoji} {location_name} Fishing Report {now:%Y-%m-%d %H:%M}"


def format_report_text(
    windows: list[FishingWindow], location_name: str, generated_at: datetime
) -> str:
    """Plain text fishing report grouped into optimal/partial/unsuitable sections."""
    grouped: dict[ScoreBucket, list[FishingWindow]] = {b: [] for b in ScoreBucket}
    for w in windows:
        grouped[score_bucket(w.overall_score)].append(w)

    lines = [
        "Fishing Conditions Report",
        f"Here's your latest fishing conditions report for {location_name}",
        "",
    ]
    for bucket in ScoreBucket:
        lines.append(_SECTION_TITLES[bucket])
        items = grouped[bucket]
        if not items:
            lines.append(f"  {_EMPTY_SECTION[bucket]}")
        for w in items:
            lines.extend(_format_window(w, bucket))
        lines.append("")
    lines.append(f"Generated at {generated_at:%Y-%m-%d %H:%M}")
    return "\n".join(lines)


def _format_window(w: FishingWindow, bucket: ScoreBucket) -> list[str]:
    c = w.candidate
    header = f"  {_format_date(w.date)} at {_format_time(w.low_tide_time)}"
    if bucket != ScoreBucket.OPTIMAL:
        header += f" [{w.overall_score:.1f}%]"
    lines = [header]

    if bucket == ScoreBucket.OPTIMAL:
        lines.extend([
            f"    Tide: {c.low_tide.height:g}m",
            f"    Swell: {c.swell.height:g}m {c.swell.period:g}s {c.swell.direction_text}",
            f"    Daylight: {w.verdicts.after_sunrise.rationale}, "
            f"{w.verdicts.before_sunset.rationale}",
            f"    Weather: {c.weather.precis}",
        ])
        return lines

    if bucket == ScoreBucket.UNSUITABLE:
        # Unsuitable windows only list what went wrong
        shown = w.verdicts.with_status(VerdictStatus.FAIL, VerdictStatus.HARD_FAIL)
    else:
        shown = w.verdicts.all()
    for v in shown:
        lines.append(f"    {_STATUS_MARK[v.status]} {v.rationale} [{v.status.value}]")
    return lines


def format_windows_json(windows: list[FishingWindow]) -> str:
    """JSON list of windows with every verdict."""
    data = [
        {
            "date": w.date,
            "low_tide_time": w.low_tide_time,
            "tide_height_m": w.candidate.low_tide.height,
            "swell": {
                "date_time": w.candidate.swell.date_time,
                "height_m": w.candidate.swell.height,
                "period_s": w.candidate.swell.period,
                "direction": w.candidate.swell.direction_text,
            },
            "weather": {
                "date_time": w.candidate.weather.date_time,
                "precis_code": w.candidate.weather.precis_code,
                "precis": w.candidate.weather.precis,
            },
            "hours_after_sunrise": round(w.candidate.hours_after_sunrise, 2),
            "hours_before_sunset": round(w.candidate.hours_before_sunset, 2),
            "overall_score": w.overall_score,
            "bucket": score_bucket(w.overall_score).value,
            "verdicts": {
                v.factor.value: {
                    "status": v.status.value,
                    "value": v.value,
                    "threshold": v.threshold,
                    "rationale": v.rationale,
                }
                for v in w.verdicts.all()
            },
        }
        for w in windows
    ]
    return json.dumps(data, indent=2, ensure_ascii=False)


def _format_date(date_str: str) -> str:
    dt = datetime.fromisoformat(date_str)
    return f"{dt:%a} {dt:%b} {dt.day}"


def _format_time(iso_str: str) -> str:
    dt = parse_timestamp(iso_str)
    return f"{dt.hour % 12 or 12}:{dt:%M} {'AM' if dt.hour < 12 else 'PM'}"
