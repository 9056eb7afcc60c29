#!/usr/bin/env python3
"""
aggregation.py
-------------------
Life Map scores derived from daily reviews.

When the Life Map table has not been filled in, the dashboard still draws
a radar chart from the daily reviews: the average of the per-domain
ratings recorded in each check-in, with the average energy level standing
in for the health domain when no health ratings exist.

Pipeline:
    reviews ─┬─> aggregate_domain_scores ───┐
             └─> derive_domains_from_energy ┴─> combine_aggregated_with_derived
                                                 └─> convert_to_chart_data

All functions are pure. A score of 0 means "no data" throughout.

Usage:
    reviews = daily_store.load_all()
    chart = build_dashboard_chart(life_map, reviews)
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence, TypedDict, Union

from personal_os.dataclasses.daily_review import DailyReview, DomainRatings
from personal_os.dataclasses.enums import Domain
from personal_os.dataclasses.life_map import ChartDataItem, LifeMap


# ----- Types -----
@dataclass
class ReviewWithDomains:
    """The slice of a daily review that aggregation reads."""

    date: str
    energy_level: Optional[float] = None
    domain_ratings: Optional[Mapping[str, Optional[float]]] = None

    @classmethod
    def from_review(cls, review: Union[DailyReview, Mapping[str, Any]]) -> ReviewWithDomains:
        """
        Build from a parsed DailyReview or a camelCase mapping.

        Examples:
            >>> ReviewWithDomains.from_review({"date": "2026-01-01", "energyLevel": 8})
            ReviewWithDomains(date='2026-01-01', energy_level=8, domain_ratings=None)
        """
        if isinstance(review, DailyReview):
            ratings = review.domain_ratings
            return cls(
                date=review.date or "",
                energy_level=review.energy_level,
                domain_ratings=ratings.to_dict() if ratings is not None else None,
            )

        ratings = review.get("domainRatings")
        if isinstance(ratings, DomainRatings):
            ratings = ratings.to_dict()
        return cls(
            date=review.get("date", ""),
            energy_level=review.get("energyLevel"),
            domain_ratings=ratings,
        )


ReviewInput = Union[ReviewWithDomains, DailyReview, Mapping[str, Any]]


@dataclass
class DomainScores:
    """One integer score per domain; 0 means no data."""

    career: int = 0
    relationships: int = 0
    health: int = 0
    meaning: int = 0
    finances: int = 0
    fun: int = 0

    def get(self, domain: Domain) -> int:
        return getattr(self, domain.value)

    def to_dict(self) -> Dict[str, int]:
        return {domain.value: self.get(domain) for domain in Domain}


class EnergyTrendItem(TypedDict):
    date: str
    energy: float


# ----- Helpers -----
def _coerce(reviews: Sequence[ReviewInput]) -> List[ReviewWithDomains]:
    return [
        review if isinstance(review, ReviewWithDomains) else ReviewWithDomains.from_review(review)
        for review in reviews
    ]


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves going up.

    Examples:
        >>> round_half_up(6.5)
        7
        >>> round_half_up(7.33)
        7
    """
    return math.floor(value + 0.5)


# ----- Aggregation -----
def aggregate_domain_scores(reviews: Sequence[ReviewInput]) -> DomainScores:
    """
    Average the per-domain ratings across reviews.

    Only ratings that are present and greater than 0 count; 0 is the
    "not rated" value of the check-in template. Averages are rounded half
    up. A domain without any rating scores 0.

    Examples:
        >>> aggregate_domain_scores([
        ...     {"date": "2026-01-01", "domainRatings": {"career": 8}},
        ...     {"date": "2025-12-31", "domainRatings": {"career": 6}},
        ... ]).career
        7
    """
    totals: Dict[Domain, List[float]] = {domain: [] for domain in Domain}

    for review in _coerce(reviews):
        if not review.domain_ratings:
            continue
        for domain in Domain:
            value = review.domain_ratings.get(domain.value)
            if _is_number(value) and value > 0:
                totals[domain].append(value)

    return DomainScores(
        **{
            domain.value: round_half_up(sum(values) / len(values)) if values else 0
            for domain, values in totals.items()
        }
    )


def derive_domains_from_energy(reviews: Sequence[ReviewInput]) -> DomainScores:
    """
    Derive a health score from the average energy level.

    Only health is derived; every other domain is 0.
    """
    energies = [
        review.energy_level
        for review in _coerce(reviews)
        if _is_number(review.energy_level)
    ]
    health = round_half_up(sum(energies) / len(energies)) if energies else 0
    return DomainScores(health=health)


def combine_aggregated_with_derived(
    aggregated: DomainScores, derived: DomainScores
) -> DomainScores:
    """Per domain: the aggregated score when non-zero, else the derived one."""
    return DomainScores(
        **{
            domain.value: aggregated.get(domain) or derived.get(domain)
            for domain in Domain
        }
    )


# ----- Chart helpers -----
def is_data_empty(data: Sequence[Mapping[str, Any]]) -> bool:
    """
    True when every chart point is 0 or missing (and for an empty list).

    Examples:
        >>> is_data_empty([{"domain": "Career", "score": None}])
        True
        >>> is_data_empty([])
        True
    """
    return all(not item.get("score") for item in data)


def should_show_empty_state(
    data: Sequence[Mapping[str, Any]], has_reviews: bool
) -> bool:
    """
    Show the empty state only when there is no chart data and no reviews.

    Having reviews is enough to draw the chart even if all scores are 0.
    """
    if not is_data_empty(data):
        return False
    return not has_reviews


def get_energy_trend_data(reviews: Sequence[ReviewInput]) -> List[EnergyTrendItem]:
    """Energy points for the trend chart, in input order, skipping reviews without energy."""
    return [
        {"date": review.date, "energy": review.energy_level}
        for review in _coerce(reviews)
        if _is_number(review.energy_level)
    ]


def convert_to_chart_data(scores: DomainScores) -> List[ChartDataItem]:
    """Radar chart points in fixed domain order with capitalized labels."""
    return [
        {"domain": domain.display_name, "score": scores.get(domain)}
        for domain in Domain
    ]


def build_dashboard_chart(
    life_map: LifeMap, reviews: Sequence[ReviewInput]
) -> Dict[str, Any]:
    """
    Assemble the dashboard chart payload.

    The Life Map table wins when any domain is scored. Otherwise scores
    come from the reviews.

    Returns:
        ``{"source", "data", "energyTrend", "showEmptyState"}`` where source
        is ``"life_map"`` or ``"reviews"``
    """
    coerced = _coerce(reviews)

    if not life_map.is_empty:
        source = "life_map"
        data = life_map.chart_data()
    else:
        source = "reviews"
        scores = combine_aggregated_with_derived(
            aggregate_domain_scores(coerced), derive_domains_from_energy(coerced)
        )
        data = convert_to_chart_data(scores)

    return {
        "source": source,
        "data": data,
        "energyTrend": get_energy_trend_data(coerced),
        "showEmptyState": should_show_empty_state(data, bool(coerced)),
    }
