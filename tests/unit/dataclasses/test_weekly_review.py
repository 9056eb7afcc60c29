"""
Tests for the weekly review dataclasses and codec.
"""
import pytest

from personal_os.dataclasses.weekly_review import (
    NARRATIVE_SECTIONS,
    TARGET_CAPTION,
    WeeklyReview,
    WeeklyReviewFormData,
    parse_weekly_review,
    serialize_weekly_review,
)
from personal_os.validators.review import ReviewValidator


@pytest.fixture
def weekly_form():
    """Complete weekly form data."""
    return WeeklyReviewFormData(
        date="2025-01-06",
        week_number=2,
        moved_needle="Hired the first engineer",
        noise_disguised_as_work="Tweaking slide decks",
        time_leaks="Slack",
        strategic_insight="Hiring is the bottleneck",
        adjustment_for_next_week="Two interviews per day",
        notes="Good week",
        duration=15,
    )


class TestParseWeeklyReview:
    """Tests for parse_weekly_review."""

    def test_complete_review(self, weekly_review_content):
        """Every field of a filled-in review is recovered."""
        review = parse_weekly_review(weekly_review_content, "/w/2024-12-30.md")

        assert review == WeeklyReview(
            file_path="/w/2024-12-30.md",
            date="2024-12-30",
            week_number=1,
            moved_needle="Closed the Series A round.",
            noise_disguised_as_work="Reorganizing the wiki.",
            time_leaks="Status meetings.",
            strategic_insight="Fewer, deeper projects win.",
            adjustment_for_next_week="Block mornings for deep work.",
            notes="Holiday week, lighter load.",
            duration=18,
        )

    def test_week_number_out_of_range(self, weekly_review_content):
        """Week numbers outside 1-53 are dropped."""
        content = weekly_review_content.replace(
            "**Week Number:** 1", "**Week Number:** 54"
        )
        assert parse_weekly_review(content).week_number is None

    def test_placeholders_ignored(self, weekly_review_content):
        """Bracket placeholders in quotes are treated as empty."""
        content = weekly_review_content.replace(
            "> Status meetings.", "> [Where did time go?]"
        )
        assert parse_weekly_review(content).time_leaks is None

    def test_notes_without_caption(self):
        """Notes fall back to the first content line when the caption is gone."""
        content = "## Optional: Notes\n\nJust a line.\n\n---\n"
        assert parse_weekly_review(content).notes == "Just a line."

    def test_notes_placeholder(self):
        """A placeholder under the notes caption is no note."""
        content = "## Optional: Notes\n\n*Anything else worth capturing?*\n\n[Notes]\n\n---\n"
        assert parse_weekly_review(content).notes is None

    def test_empty_document(self):
        """An empty document gives an empty record."""
        assert parse_weekly_review("") == WeeklyReview()

    def test_to_dict(self, weekly_review_content):
        """to_dict uses camelCase keys."""
        data = parse_weekly_review(weekly_review_content).to_dict()

        assert data["weekNumber"] == 1
        assert data["noiseDisguisedAsWork"] == "Reorganizing the wiki."
        assert data["duration"] == 18

    def test_list_item_fallbacks(self):
        """List items fall back to the filename date, 0 and empty strings."""
        item = WeeklyReview(file_path="/w/2025-01-06.md").to_list_item("2025-01-06")

        assert item.to_dict() == {
            "date": "2025-01-06",
            "type": "weekly",
            "weekNumber": 0,
            "movedNeedle": "",
            "filePath": "/w/2025-01-06.md",
        }


class TestSerializeWeeklyReview:
    """Tests for serialize_weekly_review."""

    def test_round_trip(self, weekly_form):
        """Every field survives serialize then parse."""
        review = parse_weekly_review(serialize_weekly_review(weekly_form))

        assert review.to_dict() == dict(weekly_form.to_dict(), filePath="")

    def test_section_order(self, weekly_form):
        """The five narrative sections and notes come in fixed order."""
        lines = serialize_weekly_review(weekly_form).split("\n")
        headings = [line[3:] for line in lines if line.startswith("## ")]

        assert headings == [heading for _, heading, _ in NARRATIVE_SECTIONS] + [
            "Optional: Notes"
        ]

    def test_footer_and_target(self, weekly_form):
        """The footer is followed by a blank line and the time target."""
        text = serialize_weekly_review(weekly_form)

        assert text.endswith(f"**Time to complete:** 15 minutes\n\n{TARGET_CAPTION}")

    def test_unset_duration(self, weekly_form):
        """An unset duration is written as the placeholder and reads back as None."""
        weekly_form.duration = None
        weekly_form.notes = None
        text = serialize_weekly_review(weekly_form)

        assert "**Time to complete:** ___ minutes" in text
        review = parse_weekly_review(text)
        assert review.duration is None
        assert review.notes is None


class TestValidatedRoundTrip:
    """Validated weekly payloads read back exactly as they were stored."""

    @pytest.mark.parametrize(
        "overrides",
        [
            {},
            {"notes": None, "duration": None},
            {"weekNumber": 53, "duration": 0},
            {
                "movedNeedle": "Signed 2 clients (finally!) & renewed 1: 'big' week",
                "timeLeaks": "[x] Slack, email | calendar",
                "notes": "> quoted aside, *starred* words",
            },
            {"notes": "**Time to complete:** 99 minutes", "duration": None},
        ],
        ids=["all-fields", "required-only", "edges", "punctuation", "footer-label-in-notes"],
    )
    def test_round_trip(self, weekly_payload, overrides):
        """Parsing the serialized form gives back every validated field."""
        form = ReviewValidator.validate_weekly(dict(weekly_payload, **overrides))
        review = parse_weekly_review(serialize_weekly_review(form))

        assert review.to_dict() == dict(form.to_dict(), filePath="")

    @pytest.mark.parametrize(
        "field,raw,stored",
        [
            ("movedNeedle", "a\nb", "a b"),
            ("strategicInsight", "  Hiring is the bottleneck  ", "Hiring is the bottleneck"),
            ("notes", "first\n\nsecond\n", "first second"),
        ],
    )
    def test_multiline_and_padded_text(self, weekly_payload, field, raw, stored):
        """Line breaks fold to spaces and padding is trimmed before writing."""
        form = ReviewValidator.validate_weekly(dict(weekly_payload, **{field: raw}))
        review = parse_weekly_review(serialize_weekly_review(form))

        assert form.to_dict()[field] == stored
        assert review.to_dict()[field] == stored
