"""Unit tests for age_calculator.report."""

import datetime
import json

import pytest

from age_calculator.anniversary import AnniversaryCountdown, CountdownRemaining
from age_calculator.breakdown import compute
from age_calculator.report import (
    SUPPORTED_LANGUAGES,
    TRANSLATIONS,
    build_age_report,
    format_countdown,
    format_date_text,
    format_number,
    format_summary,
    labels,
)


@pytest.mark.unit
class TestLabels:
    def test_supported_languages(self):
        assert SUPPORTED_LANGUAGES == ("en", "id")

    def test_languages_share_the_same_keys(self):
        assert set(TRANSLATIONS["en"]) == set(TRANSLATIONS["id"])

    def test_twelve_month_names_each(self):
        for language in SUPPORTED_LANGUAGES:
            assert len(labels(language)["month_names"]) == 12

    def test_unknown_language_raises(self):
        with pytest.raises(ValueError, match="fr"):
            labels("fr")


@pytest.mark.unit
class TestFormatting:
    def test_date_text_english(self):
        assert format_date_text(datetime.date(1990, 5, 15)) == "15 May, 1990"

    def test_date_text_indonesian(self):
        assert format_date_text(datetime.date(1990, 8, 1), "id") == "1 Agustus, 1990"

    def test_date_text_accepts_datetime(self):
        assert format_date_text(datetime.datetime(2024, 12, 31, 23, 59)) == "31 December, 2024"

    def test_number_grouping(self):
        assert format_number(1234567) == "1,234,567"
        assert format_number(1234567, "id") == "1.234.567"
        assert format_number(12) == "12"

    def test_countdown_text(self):
        countdown = AnniversaryCountdown(
            next_occurrence=datetime.datetime(2024, 3, 15),
            remaining=CountdownRemaining(days=12, hours=3, minutes=4, seconds=5),
            is_today=False,
        )
        assert format_countdown(countdown) == "12d 3h 4m 5s"

    def test_countdown_birthday_greeting(self):
        countdown = AnniversaryCountdown(
            next_occurrence=datetime.datetime(2024, 3, 15),
            remaining=CountdownRemaining(0, 0, 0, 0),
            is_today=True,
        )
        assert format_countdown(countdown) == "Happy Birthday!"
        assert format_countdown(countdown, "id") == "Selamat Ulang Tahun!"


@pytest.mark.unit
class TestFormatSummary:
    birth = datetime.date(1990, 5, 15)
    now = datetime.datetime(2024, 6, 20, 12, 0)

    def test_contains_breakdown_and_totals(self):
        breakdown = compute(self.birth, self.now)
        text = format_summary(self.birth, self.now, breakdown)
        assert text.splitlines()[0] == "Age Calculator"
        assert "Birth Date: 15 May, 1990" in text
        assert "Generated on: 20 June, 2024" in text
        assert f"Years: {breakdown.years}" in text
        assert f"Months: {breakdown.months}" in text
        assert f"Days: {breakdown.days}" in text
        assert f"Total Days: {format_number(breakdown.total_days)}" in text
        assert f"Total Seconds: {format_number(breakdown.total_seconds)}" in text

    def test_indonesian_labels(self):
        breakdown = compute(self.birth, self.now)
        text = format_summary(self.birth, self.now, breakdown, "id")
        assert text.startswith("Kalkulator Usia")
        assert "Tanggal Lahir: 15 Mei, 1990" in text
        assert "Tahun: 34" in text


@pytest.mark.unit
class TestBuildAgeReport:
    now = datetime.datetime(2024, 1, 1, 0, 0, 0)

    def test_success_payload(self):
        report = build_age_report("1990-01-01", self.now)
        assert report["success"] is True
        data = report["data"]
        assert data["birthDate"] == "1990-01-01"
        assert data["calculatedOn"] == "2024-01-01T00:00:00"
        assert data["age"] == {"years": 34, "months": 0, "days": 0}
        assert data["totals"]["days"] == 12418
        assert data["totals"]["weeks"] == 12418 // 7
        assert data["totals"]["seconds"] == 12418 * 86400

    def test_payload_is_json_serialisable(self):
        json.dumps(build_age_report("1990-01-01", self.now))

    def test_future_birth_date(self):
        report = build_age_report("2030-01-01", self.now)
        assert report == {"error": "Birth date cannot be in the future", "success": False}

    def test_malformed_birth_date(self):
        report = build_age_report("not-a-date", self.now)
        assert report["success"] is False
        assert "YYYY-MM-DD" in report["error"]
