#!/usr/bin/env python3
"""
Ranking & Pagination - order scored matches and cut the requested page.
"""

from dataclasses import dataclass, field
from typing import List

from core.scorer.models import MatchResult


@dataclass
class MatchPage:
    """One page of ranked matches.

    `has_more` is a hint: it is true whenever the page is full, even if
    nothing follows it.
    """
    matches: List[MatchResult] = field(default_factory=list)
    total: int = 0
    has_more: bool = False


def rank_matches(
    results: List[MatchResult],
    limit: int,
    offset: int = 0,
    require_availability: bool = True
) -> MatchPage:
    """
    Filter, sort and paginate scored matches.

    Ties keep retrieval order: `sorted` is stable and there is no
    secondary sort key.
    """
    if require_availability:
        results = [r for r in results if r.availability.units_available > 0]

    ranked = sorted(results, key=lambda r: r.score, reverse=True)

    offset = max(offset, 0)
    page = ranked[offset:offset + limit] if limit > 0 else []

    return MatchPage(
        matches=page,
        total=len(page),
        has_more=limit > 0 and len(page) == limit,
    )
