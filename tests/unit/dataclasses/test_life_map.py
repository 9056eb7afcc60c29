"""
Tests for the Life Map dataclass and table codec.
"""
import pytest

from personal_os.dataclasses.enums import Domain
from personal_os.dataclasses.life_map import (
    TABLE_HEADER,
    TABLE_SEPARATOR,
    DomainScore,
    LifeMap,
    clamp_score,
    get_life_map_chart_data,
    parse_life_map,
    serialize_life_map,
    update_life_map_file,
)


class TestParseLifeMap:
    """Tests for parse_life_map."""

    def test_full_table(self, life_map_content):
        """All six rows are read with scores and assessments."""
        life_map = parse_life_map(life_map_content)

        assert life_map.domains[Domain.CAREER] == DomainScore(8, "Strong momentum, good team")
        assert life_map.domains[Domain.RELATIONSHIPS].score == 6
        assert life_map.domains[Domain.HEALTH].score == 5
        assert life_map.domains[Domain.MEANING].score == 7
        assert life_map.domains[Domain.FINANCES].assessment == "Stable and secure"
        assert life_map.domains[Domain.FUN].score == 4

    def test_empty_scores(self, empty_life_map_content):
        """Blank cells give score 0 and empty assessments."""
        life_map = parse_life_map(empty_life_map_content)

        assert life_map.is_empty
        assert all(life_map.domains[d] == DomainScore() for d in Domain)

    def test_no_table(self):
        """A document without a table gives six default domains."""
        life_map = parse_life_map("# Life Map\n\nNothing here yet.")

        assert set(life_map.domains) == set(Domain)
        assert life_map.is_empty

    def test_partial_rows(self):
        """Domains without rows keep defaults."""
        content = "| Career | 8 | Good |\n| Fun | 3 | Low |"
        life_map = parse_life_map(content)

        assert life_map.domains[Domain.CAREER].score == 8
        assert life_map.domains[Domain.FUN].score == 3
        assert life_map.domains[Domain.HEALTH] == DomainScore()

    def test_case_insensitive_domain(self):
        """Domain cells match regardless of case."""
        life_map = parse_life_map("| CAREER | 9 | Great |\n| health | 4 | Meh |")

        assert life_map.domains[Domain.CAREER].score == 9
        assert life_map.domains[Domain.HEALTH].score == 4

    def test_unknown_domain_ignored(self):
        """Rows for unknown domains are skipped."""
        life_map = parse_life_map("| Spirituality | 9 | x |\n| Career | 2 | y |")

        assert life_map.domains[Domain.CAREER].score == 2
        assert len(life_map.domains) == 6

    def test_last_duplicate_wins(self):
        """A later row for the same domain overwrites the earlier one."""
        life_map = parse_life_map("| Career | 3 | Old |\n| Career | 9 | New |")

        assert life_map.domains[Domain.CAREER] == DomainScore(9, "New")

    def test_score_cells_not_clamped(self):
        """Parsed scores are truncated but never clamped."""
        life_map = parse_life_map("| Career | 7.9 | x |\n| Fun | 42 | y |\n| Health | -3 | z |")

        assert life_map.domains[Domain.CAREER].score == 7
        assert life_map.domains[Domain.FUN].score == 42
        assert life_map.domains[Domain.HEALTH].score == -3

    def test_non_numeric_score(self):
        """Non-numeric score cells give 0."""
        life_map = parse_life_map("| Career | high | x |")
        assert life_map.domains[Domain.CAREER].score == 0

    def test_missing_assessment_cell(self):
        """A row without an assessment cell reads an empty assessment."""
        life_map = parse_life_map("| Career | 5")
        assert life_map.domains[Domain.CAREER] == DomainScore(5, "")


class TestChartData:
    """Tests for get_life_map_chart_data."""

    def test_fixed_order_and_labels(self, life_map_content):
        """Points come in fixed domain order with capitalized labels."""
        data = get_life_map_chart_data(parse_life_map(life_map_content))

        assert [item["domain"] for item in data] == [
            "Career", "Relationships", "Health", "Meaning", "Finances", "Fun",
        ]
        assert data[0] == {"domain": "Career", "score": 8}

    def test_empty_life_map(self):
        """Unset domains chart as 0."""
        assert all(item["score"] == 0 for item in LifeMap().chart_data())


class TestSerializeLifeMap:
    """Tests for serialize_life_map."""

    def test_canonical_table(self):
        """Header, separator and six rows in order, without trailing newline."""
        life_map = LifeMap({Domain.CAREER: DomainScore(8, "Good")})
        lines = serialize_life_map(life_map).split("\n")

        assert lines[0] == TABLE_HEADER
        assert lines[1] == TABLE_SEPARATOR
        assert lines[2] == "| Career | 8 | Good |"
        assert lines[3] == "| Relationships | 0 |  |"
        assert len(lines) == 8

    def test_round_trip(self, life_map_content):
        """Parsing the serialized table gives the same life map."""
        original = parse_life_map(life_map_content)
        assert parse_life_map(serialize_life_map(original)) == original

    @pytest.mark.parametrize(
        "domains",
        [
            {},
            {Domain.CAREER: DomainScore(0, "")},
            {
                Domain.CAREER: DomainScore(10, "Stable, secure & growing!"),
                Domain.FUN: DomainScore(1, "50% done (roughly); it's fine: mostly"),
            },
            {
                Domain.HEALTH: DomainScore(7, "Ran 5k - felt *great*"),
                Domain.MEANING: DomainScore(-3, ""),
            },
            {Domain.FINANCES: DomainScore(42, "Saved $1,000 [finally]")},
        ],
        ids=["unset", "score-zero", "punctuation", "markup-and-negative", "out-of-range"],
    )
    def test_round_trip_cases(self, domains):
        """Scores and single-cell assessments survive serialize then parse."""
        life_map = LifeMap(dict(domains))
        assert parse_life_map(serialize_life_map(life_map)) == life_map


class TestUpdateLifeMapFile:
    """Tests for update_life_map_file."""

    def test_replaces_only_table(self, life_map_content):
        """Prose before and after the table is preserved."""
        life_map = parse_life_map(life_map_content)
        life_map.domains[Domain.FUN] = DomainScore(9, "Much better")

        updated = update_life_map_file(life_map_content, life_map)

        assert "| Fun | 9 | Much better |" in updated
        assert "| Fun | 4 |" not in updated
        before, _, after = life_map_content.partition(TABLE_HEADER)
        assert updated.startswith(before)
        assert updated.endswith(after.split("| Fun | 4 | Neglected, needs attention |")[1])
        assert "**Total Score:** ___ / 60" in updated
        assert "More content here..." in updated

    def test_missing_header_appends(self):
        """Without a table the new table is appended after a newline."""
        content = "# Life Map\n\nIntro"
        updated = update_life_map_file(content, LifeMap())

        assert updated == content + "\n" + serialize_life_map(LifeMap())

    def test_idempotent(self, life_map_content):
        """Writing the parsed table back changes nothing in the table block."""
        life_map = parse_life_map(life_map_content)
        once = update_life_map_file(life_map_content, life_map)

        assert update_life_map_file(once, life_map) == once
        assert parse_life_map(once) == life_map


class TestLifeMapDataclass:
    """Tests for the LifeMap dataclass helpers."""

    def test_always_six_domains(self):
        """Missing domains are filled in on construction."""
        life_map = LifeMap({"career": DomainScore(5, "")})

        assert list(life_map.domains) == list(Domain)
        assert life_map.domains[Domain.CAREER].score == 5

    def test_unknown_domain_rejected(self):
        """An unknown domain key cannot be constructed."""
        with pytest.raises(ValueError, match="Unknown life map domain"):
            LifeMap({"spirituality": DomainScore()})

    def test_to_dict(self):
        """to_dict is keyed by domain key."""
        data = LifeMap({Domain.FUN: DomainScore(3, "Low")}).to_dict()

        assert data["domains"]["fun"] == {"score": 3, "assessment": "Low"}
        assert set(data["domains"]) == set(Domain.choices())

    def test_markdown_helpers(self, life_map_content):
        """The method forms match the codec functions."""
        life_map = LifeMap.from_markdown_text(life_map_content)

        assert life_map.to_markdown() == serialize_life_map(life_map)
        assert life_map.update_file_text(life_map_content) == update_life_map_file(
            life_map_content, life_map
        )

    def test_merge_update_clamps_scores(self):
        """Provided scores are truncated and clamped to 1-10."""
        life_map = LifeMap()
        life_map.merge_update({
            "career": {"score": 42},
            "health": {"score": 0},
            "fun": {"score": 7.8},
        })

        assert life_map.domains[Domain.CAREER].score == 10
        assert life_map.domains[Domain.HEALTH].score == 1
        assert life_map.domains[Domain.FUN].score == 7

    def test_merge_update_keeps_missing_fields(self):
        """Absent score or assessment keeps the current value."""
        life_map = LifeMap({Domain.CAREER: DomainScore(6, "Okay")})
        life_map.merge_update({"career": {"assessment": "Better"}})
        assert life_map.domains[Domain.CAREER] == DomainScore(6, "Better")

        life_map.merge_update({"career": {"score": 8}})
        assert life_map.domains[Domain.CAREER] == DomainScore(8, "Better")

    def test_merge_update_ignores_unknown(self):
        """Unknown domain keys in an update are ignored."""
        life_map = LifeMap()
        life_map.merge_update({"spirituality": {"score": 9}})
        assert life_map.is_empty

    def test_merge_update_trims_assessment(self):
        """Assessments are stored trimmed and read back unchanged."""
        life_map = LifeMap()
        life_map.merge_update({"career": {"score": 8, "assessment": "  Good, busy!  "}})

        assert life_map.domains[Domain.CAREER] == DomainScore(8, "Good, busy!")
        assert parse_life_map(serialize_life_map(life_map)) == life_map

    @pytest.mark.parametrize(
        "assessment,message",
        [
            ("Good | busy", r"must not contain '\|'"),
            ("Good\nbusy", "must be a single line"),
            ("Score is low on weekends", "must not contain the word 'Score'"),
            ("Domain expert now", "must not contain the word 'Domain'"),
        ],
    )
    def test_merge_update_rejects_unreadable_assessment(self, assessment, message):
        """Assessments that would break the table row are refused."""
        life_map = LifeMap({Domain.CAREER: DomainScore(6, "Okay")})

        with pytest.raises(ValueError, match=message):
            life_map.merge_update({"career": {"assessment": assessment}})
        assert life_map.domains[Domain.CAREER] == DomainScore(6, "Okay")


class TestClampScore:
    """Tests for clamp_score."""

    @pytest.mark.parametrize(
        "value,expected",
        [(0, 1), (-5, 1), (1, 1), (5.9, 5), (10, 10), (11, 10), (99.9, 10)],
    )
    def test_clamp(self, value, expected):
        """Scores are truncated then clamped."""
        assert clamp_score(value) == expected
