"""Presentation helpers: localized labels, text export and the JSON report.

Nothing here does date arithmetic; results come from
``age_calculator.breakdown`` and ``age_calculator.anniversary``.
"""

import datetime
import logging

from age_calculator.anniversary import AnniversaryCountdown
from age_calculator.breakdown import AgeBreakdown, compute
from age_calculator.errors import InvalidRange

logger: logging.Logger = logging.getLogger(__name__)

TRANSLATIONS: dict[str, dict] = {
    "en": {
        "title": "Age Calculator",
        "birth_date_label": "Birth Date",
        "birth_date_prompt": "Please enter your birth date (YYYY-MM-DD, e.g. 1990-05-15): ",
        "years": "Years",
        "months": "Months",
        "days": "Days",
        "age_breakdown": "Age Breakdown",
        "detailed_stats": "Detailed Statistics",
        "total_weeks": "Total Weeks:",
        "total_days": "Total Days:",
        "total_hours": "Total Hours:",
        "total_minutes": "Total Minutes:",
        "total_seconds": "Total Seconds:",
        "next_birthday": "Next Birthday",
        "generated_on": "Generated on",
        "error_future_date": "Birth date cannot be in the future.",
        "error_no_date": "Please enter your birth date.",
        "error_invalid_date": "'{value}' is not a valid date. Please use the format YYYY-MM-DD (e.g. 1990-05-15).",
        "error_agent_unavailable": "The agent is not configured. Set MODEL_ARN to use --agent.",
        "birthday_today": "Happy Birthday!",
        "month_names": [
            "January", "February", "March", "April", "May", "June",
            "July", "August", "September", "October", "November", "December",
        ],
        "thousands_separator": ",",
    },
    "id": {
        "title": "Kalkulator Usia",
        "birth_date_label": "Tanggal Lahir",
        "birth_date_prompt": "Silakan masukkan tanggal lahir Anda (YYYY-MM-DD, mis. 1990-05-15): ",
        "years": "Tahun",
        "months": "Bulan",
        "days": "Hari",
        "age_breakdown": "Rincian Usia",
        "detailed_stats": "Statistik Detail",
        "total_weeks": "Total Minggu:",
        "total_days": "Total Hari:",
        "total_hours": "Total Jam:",
        "total_minutes": "Total Menit:",
        "total_seconds": "Total Detik:",
        "next_birthday": "Ulang Tahun Berikutnya",
        "generated_on": "Dibuat pada",
        "error_future_date": "Tanggal lahir tidak boleh di masa depan.",
        "error_no_date": "Silakan masukkan tanggal lahir Anda.",
        "error_invalid_date": "'{value}' bukan tanggal yang valid. Gunakan format YYYY-MM-DD (mis. 1990-05-15).",
        "error_agent_unavailable": "Agen belum dikonfigurasi. Atur MODEL_ARN untuk menggunakan --agent.",
        "birthday_today": "Selamat Ulang Tahun!",
        "month_names": [
            "Januari", "Februari", "Maret", "April", "Mei", "Juni",
            "Juli", "Agustus", "September", "Oktober", "November", "Desember",
        ],
        "thousands_separator": ".",
    },
}

SUPPORTED_LANGUAGES: tuple[str, ...] = tuple(TRANSLATIONS)


def labels(language: str) -> dict:
    """Return the label table for ``language``.

    Raises:
        ValueError: If ``language`` is not one of ``SUPPORTED_LANGUAGES``.
    """
    try:
        return TRANSLATIONS[language]
    except KeyError as exc:
        raise ValueError(
            f"Unsupported language {language!r}; expected one of {', '.join(SUPPORTED_LANGUAGES)}."
        ) from exc


def format_date_text(value: datetime.date, language: str = "en") -> str:
    """Format as ``"15 May, 1990"`` with localized month names."""
    month = labels(language)["month_names"][value.month - 1]
    return f"{value.day} {month}, {value.year}"


def format_number(value: int, language: str = "en") -> str:
    return f"{value:,}".replace(",", labels(language)["thousands_separator"])


def format_countdown(countdown: AnniversaryCountdown, language: str = "en") -> str:
    if countdown.is_today:
        return labels(language)["birthday_today"]
    r = countdown.remaining
    return f"{r.days}d {r.hours}h {r.minutes}m {r.seconds}s"


def format_summary(
    birth: datetime.date,
    now: datetime.date,
    breakdown: AgeBreakdown,
    language: str = "en",
) -> str:
    """Render the plain-text export of a calculation."""
    t = labels(language)
    lines = [
        t["title"],
        "",
        f"{t['birth_date_label']}: {format_date_text(birth, language)}",
        f"{t['generated_on']}: {format_date_text(now, language)}",
        "",
        f"{t['age_breakdown']}:",
        f"{t['years']}: {breakdown.years}",
        f"{t['months']}: {breakdown.months}",
        f"{t['days']}: {breakdown.days}",
        "",
        f"{t['detailed_stats']}:",
        f"{t['total_weeks']} {format_number(breakdown.total_weeks, language)}",
        f"{t['total_days']} {format_number(breakdown.total_days, language)}",
        f"{t['total_hours']} {format_number(breakdown.total_hours, language)}",
        f"{t['total_minutes']} {format_number(breakdown.total_minutes, language)}",
        f"{t['total_seconds']} {format_number(breakdown.total_seconds, language)}",
    ]
    return "\n".join(lines)


def build_age_report(birth_date: str, now: datetime.datetime) -> dict:
    """Build the JSON-ready age report for an ISO birth date string.

    Returns ``{"success": False, "error": ...}`` for malformed or future
    birth dates instead of raising.
    """
    try:
        birth = datetime.date.fromisoformat(birth_date)
    except ValueError:
        logger.debug("build_age_report rejected a %d-char birth date", len(birth_date))
        return {"error": "Birth date must be a valid YYYY-MM-DD date", "success": False}

    try:
        breakdown = compute(birth, now)
    except InvalidRange:
        return {"error": "Birth date cannot be in the future", "success": False}

    return {
        "success": True,
        "data": {
            "birthDate": birth_date,
            "calculatedOn": now.isoformat(),
            "age": {
                "years": breakdown.years,
                "months": breakdown.months,
                "days": breakdown.days,
            },
            "totals": {
                "weeks": breakdown.total_weeks,
                "days": breakdown.total_days,
                "hours": breakdown.total_hours,
                "minutes": breakdown.total_minutes,
                "seconds": breakdown.total_seconds,
            },
        },
    }
