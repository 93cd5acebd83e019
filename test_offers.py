#!/usr/bin/env python3
"""
Test suite for job security, the offer market and negotiation.

Tests:
1. Job security labels
2. Career stage and reputation
3. Job market by career stage
4. Negotiation rounds by AD patience
5. Custom patience decay tables
"""

import random
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from sideline.era import parse_salary
from sideline.models import OFFER_STATUSES, PATIENCE_TIERS, CareerLog, SaveHeader
from sideline.offers import (
    HOT_SEAT,
    IMMINENT_FIRING,
    SECURE,
    STABLE,
    UNDER_REVIEW,
    calculate_job_security,
    career_stage,
    decay_patience,
    find_offer,
    generate_job_market,
    job_security_score,
    missed_expectation,
    negotiate_offer,
    reputation_score,
    role_stage,
    starting_patience,
    team_to_job_offer,
)
from sideline.teams import get_team


def divider(title: str):
    print(f"\n{'=' * 60}")
    print(f"  {title}")
    print(f"{'=' * 60}")


def coach(role: str = "Head Coach", team_id: str = "iowa", record: str = "8-4",
          legacy: int = 0, history=None) -> SaveHeader:
    team = get_team(team_id) if team_id else None
    header = SaveHeader(
        date="December 1999",
        age=45,
        team=team.name if team else "Unemployed",
        conference=team.conference_for_year(1999) if team else "",
        role=role,
        season_record=record,
        coach_name="Sam Okafor",
        team_id=team_id,
        legacy_score=legacy,
        seed=17,
    )
    header.career_history = list(history or [])
    return header


def offer_for(team_id: str, role: str = "Head Coach"):
    return team_to_job_offer(get_team(team_id), 2000, role, random.Random(1))


# ──────────────────────────────────────────────
# TEST 1: Job Security
# ──────────────────────────────────────────────

def test_job_security_labels():
    divider("TEST 1: Job Security")

    cases = [
        ((11, 1, "Solid Program", 70, 4), SECURE),
        ((8, 4, "Solid Program", 50, 4), STABLE),
        ((6, 6, "Solid Program", 50, 4), UNDER_REVIEW),
        ((5, 7, "Solid Program", 50, 4), HOT_SEAT),
        ((2, 10, "Solid Program", 50, 4), IMMINENT_FIRING),
        ((5, 7, "Solid Program", 50, 1), UNDER_REVIEW),
    ]
    for args, expected in cases:
        got = calculate_job_security(*args)
        print(f"  {args} -> {got}")
        assert got == expected

    assert job_security_score(SECURE) == 85
    assert job_security_score("Hot Seat") == 25
    assert job_security_score("Who knows") == 50
    assert missed_expectation(7, 5, 4)
    assert not missed_expectation(7, 5, 3)
    assert not missed_expectation(0, 0, 5)
    print("  PASSED")


# ──────────────────────────────────────────────
# TEST 2: Career Stage
# ──────────────────────────────────────────────

def test_career_stage():
    divider("TEST 2: Career Stage")

    assert role_stage("Head Coach") == "head_coach"
    assert role_stage("Defensive Coordinator") == "coordinator"
    assert role_stage("Graduate Assistant") == "entry"

    assert career_stage(coach("Offensive Coordinator")) == "coordinator"
    assert career_stage(coach("Job Seeker", team_id="")) == "entry"

    fired_hc = coach("Job Seeker", team_id="",
                     history=[CareerLog(1999, "Iowa", "Head Coach", "3-9", "Fired")])
    assert career_stage(fired_hc) == "head_coach"
    assert career_stage(fired_hc, fired=True) == "coordinator"
    print("  PASSED")


def test_reputation_score():
    divider("TEST 2b: Reputation")

    base = reputation_score(coach(record="0-0"))
    winner = reputation_score(coach(record="12-0", legacy=200))
    loser = reputation_score(coach(record="1-11"))
    print(f"  base {base}, winner {winner}, loser {loser}")
    assert base == 20
    assert loser < base < winner
    assert 0 <= loser and winner <= 100
    print("  PASSED")


# ──────────────────────────────────────────────
# TEST 3: Job Market
# ──────────────────────────────────────────────

def test_entry_market():
    divider("TEST 3: Entry Market")

    for seed in range(10):
        offers = generate_job_market(coach("Job Seeker", team_id=""), random.Random(seed))
        assert 3 <= len(offers) <= 4
        for o in offers:
            assert o.role in ("Graduate Assistant", "Quality Control", "Position Coach")
            assert get_team(o.team_id).prestige <= 3
            if o.offer_type == "Interview":
                assert o.role in ("Graduate Assistant", "Quality Control")
            assert o.status == "New"
            assert o.ad_patience in PATIENCE_TIERS
            assert o.negotiation_rounds == 0
    print("  PASSED")


def test_head_coach_market_excludes_current_team():
    divider("TEST 3b: Head Coach Market")

    header = coach("Head Coach", team_id="iowa", record="10-2", legacy=150)
    for seed in range(10):
        offers = generate_job_market(header, random.Random(seed), exclude=("wisconsin",))
        ids = [o.team_id for o in offers]
        print(f"  seed {seed}: {ids}")
        assert "iowa" not in ids and "wisconsin" not in ids
        assert all(o.role == "Head Coach" for o in offers)
    print("  PASSED")


def test_offer_fields():
    divider("TEST 3c: Offer Fields")

    offer = offer_for("alabama")
    print(f"  {offer.to_dict()}")
    assert offer.id == "offer_alabama_2000"
    assert offer.team == "Alabama Crimson Tide"
    assert offer.prestige == "Blue Blood"
    assert offer.ad_patience == "Low"
    assert offer.contract_length == "8 years"
    assert "Private Jet Access" in offer.perks
    assert "{" not in offer.pitch
    assert find_offer([offer], "offer_alabama_2000") is offer
    assert find_offer([offer], "offer_nowhere") is None

    assert starting_patience(5) == "Low"
    assert starting_patience(3) == "Medium"
    assert starting_patience(1) == "High"
    print("  PASSED")


# ──────────────────────────────────────────────
# TEST 4: Negotiation
# ──────────────────────────────────────────────

def test_negotiation_low_patience_rescinds():
    divider("TEST 4: Low Patience")

    offer = offer_for("alabama")
    updated, line = negotiate_offer(offer)
    print(f"  {line}")
    assert updated.status == "Rescinded"
    assert updated.ad_patience == "Zero"
    assert offer.status == "New", "input offer must not change"

    again, line = negotiate_offer(updated)
    assert again.status == "Rescinded"
    assert again.negotiation_rounds == updated.negotiation_rounds
    print("  PASSED")


def test_negotiation_medium_patience():
    divider("TEST 4b: Medium Patience")

    offer = offer_for("iowa")
    first, _ = negotiate_offer(offer)
    second, _ = negotiate_offer(first)
    print(f"  {offer.salary} -> {first.salary} ({first.status}) -> {second.status}")
    assert first.status == "Negotiating"
    assert first.ad_patience == "Low"
    assert parse_salary(first.salary) > parse_salary(offer.salary)
    assert second.status == "Rescinded"
    print("  PASSED")


def test_negotiation_high_patience_reaches_final_offer():
    divider("TEST 4c: High Patience")

    offer = offer_for("eastern_washington", role="Position Coach")
    assert offer.ad_patience == "High"
    statuses = []
    current = offer
    salaries = [parse_salary(offer.salary)]
    for _ in range(3):
        current, _ = negotiate_offer(current)
        statuses.append(current.status)
        salaries.append(parse_salary(current.salary))
    print(f"  {statuses} {salaries}")
    assert statuses == ["Negotiating", "Final Offer", "Rescinded"]
    assert set(statuses) <= set(OFFER_STATUSES)
    assert salaries == sorted(salaries)
    assert current.negotiation_rounds == 3
    print("  PASSED")


# ──────────────────────────────────────────────
# TEST 5: Decay Tables
# ──────────────────────────────────────────────

def test_custom_decay_table():
    divider("TEST 5: Decay Tables")

    assert decay_patience("High", 0) == "High"
    assert decay_patience("High", 2) == "Low"
    assert decay_patience("Low", 5) == "Zero"
    assert decay_patience("Zero", 1) == "Zero"

    patient = {tier: 0 for tier in range(1, 6)}
    offer = offer_for("alabama")
    updated, _ = negotiate_offer(offer, patient)
    assert updated.status == "Negotiating"
    assert updated.ad_patience == "Low"

    harsh = {tier: 3 for tier in range(1, 6)}
    updated, _ = negotiate_offer(offer_for("eastern_washington", "Position Coach"), harsh)
    assert updated.status == "Rescinded"
    print("  PASSED")


def main():
    tests = [
        test_job_security_labels,
        test_career_stage,
        test_reputation_score,
        test_entry_market,
        test_head_coach_market_excludes_current_team,
        test_offer_fields,
        test_negotiation_low_patience_rescinds,
        test_negotiation_medium_patience,
        test_negotiation_high_patience_reaches_final_offer,
        test_custom_decay_table,
    ]

    passed = 0
    failed = 0
    for test_fn in tests:
        try:
            test_fn()
            passed += 1
        except Exception as e:
            failed += 1
            print(f"\n  FAILED: {test_fn.__name__}")
            print(f"    Error: {e}")
            import traceback
            traceback.print_exc()

    divider("RESULTS")
    print(f"  Passed: {passed}/{len(tests)}")
    print(f"  Failed: {failed}/{len(tests)}")

    if failed == 0:
        print("\n  ALL TESTS PASSED")
    else:
        print(f"\n  {failed} TEST(S) FAILED")
        sys.exit(1)


if __name__ == "__main__":
    main()
