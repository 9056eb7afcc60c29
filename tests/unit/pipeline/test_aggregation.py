"""
Tests for Life Map aggregation from daily reviews.
"""
from personal_os.dataclasses.daily_review import DailyReview, DomainRatings
from personal_os.dataclasses.enums import Domain
from personal_os.dataclasses.life_map import DomainScore, LifeMap
from personal_os.pipeline.aggregation import (
    DomainScores,
    ReviewWithDomains,
    aggregate_domain_scores,
    build_dashboard_chart,
    combine_aggregated_with_derived,
    convert_to_chart_data,
    derive_domains_from_energy,
    get_energy_trend_data,
    is_data_empty,
    round_half_up,
    should_show_empty_state,
)


class TestAggregateDomainScores:
    """Tests for aggregate_domain_scores."""

    def test_empty_input(self):
        """No reviews give all zeros."""
        assert aggregate_domain_scores([]) == DomainScores()

    def test_single_review(self):
        """A single review's ratings are used as is."""
        reviews = [
            ReviewWithDomains(
                date="2026-01-01",
                domain_ratings={"career": 8, "relationships": 7, "health": 6,
                                "meaning": 5, "finances": 4, "fun": 3},
            )
        ]
        assert aggregate_domain_scores(reviews).to_dict() == {
            "career": 8, "relationships": 7, "health": 6,
            "meaning": 5, "finances": 4, "fun": 3,
        }

    def test_average_rounded(self):
        """Averages are rounded to the nearest integer."""
        reviews = [
            {"date": "2026-01-01", "domainRatings": {"career": 8}},
            {"date": "2025-12-31", "domainRatings": {"career": 7}},
            {"date": "2025-12-30", "domainRatings": {"career": 7}},
        ]
        assert aggregate_domain_scores(reviews).career == 7

    def test_half_rounds_up(self):
        """A .5 average rounds up."""
        reviews = [
            {"date": "2026-01-01", "domainRatings": {"fun": 7}},
            {"date": "2025-12-31", "domainRatings": {"fun": 6}},
        ]
        assert aggregate_domain_scores(reviews).fun == 7

    def test_zero_and_missing_ignored(self):
        """Zero, None and absent ratings do not count toward the average."""
        reviews = [
            {"date": "2026-01-01", "domainRatings": {"career": 8, "health": 0}},
            {"date": "2025-12-31", "domainRatings": {"career": 6, "health": None}},
            {"date": "2025-12-30"},
        ]
        scores = aggregate_domain_scores(reviews)

        assert scores.career == 7
        assert scores.health == 0
        assert scores.fun == 0

    def test_parsed_reviews(self):
        """Parsed DailyReview records are accepted directly."""
        reviews = [
            DailyReview(date="2026-01-01", domain_ratings=DomainRatings(meaning=9)),
            DailyReview(date="2025-12-31", domain_ratings=DomainRatings(meaning=5)),
        ]
        assert aggregate_domain_scores(reviews).meaning == 7


class TestDeriveDomainsFromEnergy:
    """Tests for derive_domains_from_energy."""

    def test_health_from_energy(self):
        """Average energy becomes the health score, other domains stay 0."""
        reviews = [
            {"date": "2026-01-01", "energyLevel": 8},
            {"date": "2025-12-31", "energyLevel": 6},
        ]
        assert derive_domains_from_energy(reviews) == DomainScores(health=7)

    def test_skips_missing_energy(self):
        """Reviews without energy are skipped."""
        reviews = [
            {"date": "2026-01-01", "energyLevel": 9},
            {"date": "2025-12-31"},
        ]
        assert derive_domains_from_energy(reviews).health == 9

    def test_no_energy(self):
        """Without energy data health is 0."""
        assert derive_domains_from_energy([{"date": "2026-01-01"}]) == DomainScores()


class TestCombine:
    """Tests for combine_aggregated_with_derived."""

    def test_aggregated_wins_when_non_zero(self):
        """Derived scores only fill zero domains."""
        combined = combine_aggregated_with_derived(
            DomainScores(career=8, health=6), DomainScores(health=9)
        )
        assert combined == DomainScores(career=8, health=6)

    def test_derived_fills_gap(self):
        """A zero aggregated health takes the derived value."""
        combined = combine_aggregated_with_derived(
            DomainScores(career=8), DomainScores(health=5)
        )
        assert combined == DomainScores(career=8, health=5)


class TestChartHelpers:
    """Tests for chart conversion and empty state checks."""

    def test_convert_to_chart_data(self):
        """Chart points use capitalized labels in fixed order."""
        data = convert_to_chart_data(DomainScores(career=8, fun=3))

        assert [item["domain"] for item in data] == [d.display_name for d in Domain]
        assert data[0] == {"domain": "Career", "score": 8}
        assert data[-1] == {"domain": "Fun", "score": 3}

    def test_is_data_empty(self):
        """Only all-zero or missing scores are empty."""
        assert is_data_empty([])
        assert is_data_empty([{"domain": "Career", "score": 0}])
        assert not is_data_empty([{"domain": "Career", "score": 0}, {"domain": "Fun", "score": 2}])

    def test_should_show_empty_state(self):
        """Reviews are enough to hide the empty state."""
        empty = [{"domain": "Career", "score": 0}]

        assert should_show_empty_state(empty, has_reviews=False)
        assert not should_show_empty_state(empty, has_reviews=True)
        assert not should_show_empty_state([{"domain": "Career", "score": 4}], has_reviews=False)

    def test_energy_trend(self):
        """Trend points keep input order and skip reviews without energy."""
        reviews = [
            {"date": "2026-01-02", "energyLevel": 6},
            {"date": "2026-01-01"},
            {"date": "2025-12-31", "energyLevel": 8.5},
        ]
        assert get_energy_trend_data(reviews) == [
            {"date": "2026-01-02", "energy": 6},
            {"date": "2025-12-31", "energy": 8.5},
        ]

    def test_round_half_up(self):
        """Halves round away from zero for positive values."""
        assert round_half_up(2.5) == 3
        assert round_half_up(7.33) == 7
        assert round_half_up(6.67) == 7


class TestBuildDashboardChart:
    """Tests for build_dashboard_chart."""

    def test_life_map_source(self):
        """A scored Life Map is used directly."""
        life_map = LifeMap({Domain.CAREER: DomainScore(9, "Great")})
        chart = build_dashboard_chart(life_map, [{"date": "2026-01-01", "energyLevel": 4}])

        assert chart["source"] == "life_map"
        assert chart["data"][0] == {"domain": "Career", "score": 9}
        assert chart["energyTrend"] == [{"date": "2026-01-01", "energy": 4}]
        assert chart["showEmptyState"] is False

    def test_reviews_source(self):
        """An empty Life Map falls back to review aggregation."""
        reviews = [
            {"date": "2026-01-01", "energyLevel": 8, "domainRatings": {"career": 6}},
            {"date": "2025-12-31", "energyLevel": 6},
        ]
        chart = build_dashboard_chart(LifeMap(), reviews)
        scores = {item["domain"]: item["score"] for item in chart["data"]}

        assert chart["source"] == "reviews"
        assert scores["Career"] == 6
        assert scores["Health"] == 7
        assert scores["Fun"] == 0

    def test_empty_state(self):
        """No Life Map scores and no reviews show the empty state."""
        chart = build_dashboard_chart(LifeMap(), [])

        assert chart["showEmptyState"] is True
        assert chart["energyTrend"] == []

    def test_reviews_without_data_hide_empty_state(self):
        """Reviews without ratings or energy still hide the empty state."""
        chart = build_dashboard_chart(LifeMap(), [{"date": "2026-01-01"}])

        assert is_data_empty(chart["data"])
        assert chart["showEmptyState"] is False
