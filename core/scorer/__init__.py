#!/usr/bin/env python3
"""
Scoring Module - weighted multi-criteria residence scoring.

Public API:
- ScoringService: Main scoring service
- MatchResult / MatchDetails: Dataclasses for scored match results

Each sub-score lives in its own module:

- budget_score.py: Budget fit against the residence price range
- care_score.py: Acuity alignment and condition-specific capabilities
- location_score.py: City/region tiers (distance extension point)
- availability_score.py: Open units and report freshness
- responsiveness_score.py: Rating and response time
- reasons.py: Human-readable match reasons
- service.py: ScoringService orchestrator and composite score
"""

from core.scorer.models import MatchResult, MatchDetails
from core.scorer.service import ScoringService, calculate_composite_score

__all__ = ['ScoringService', 'MatchResult', 'MatchDetails', 'calculate_composite_score']
