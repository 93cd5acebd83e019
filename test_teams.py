#!/usr/bin/env python3
"""
Test suite for the team registry, era tables and seeded random streams.

Tests:
1. Catalog integrity
2. Era-aware conferences
3. Free-text team resolution
4. Job openings
5. Era salaries, bowls and postseason formats
6. Seeded random streams
"""

import random
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))

from sideline.era import (
    ARCHETYPES,
    format_salary,
    generate_salary,
    parse_salary,
    pick_bowl,
    postseason_format,
    salary_thousands,
    tactical_meta,
)
from sideline.rng import SeededRandom
from sideline.teams import (
    ALL_TEAMS,
    LEVELS,
    PRESTIGE_NAMES,
    conference_teams_in_year,
    fallback_team_details,
    find_team_by_name,
    generate_job_openings,
    get_team,
    prestige_from_label,
    prestige_label,
    resolve_team,
    rival_teams,
    string_hash,
    team_conference_in_year,
    teams_by_conference,
    teams_by_level,
    teams_by_prestige,
)


def divider(title: str):
    print(f"\n{'=' * 60}")
    print(f"  {title}")
    print(f"{'=' * 60}")


# ──────────────────────────────────────────────
# TEST 1: Catalog
# ──────────────────────────────────────────────

def test_catalog_integrity():
    divider("TEST 1: Catalog")

    ids = [t.team_id for t in ALL_TEAMS]
    assert len(ids) == len(set(ids)), "duplicate team ids"
    for level in LEVELS:
        count = len(teams_by_level(level))
        print(f"  {level:<8} {count} teams")
        assert count > 0
    for team in ALL_TEAMS:
        assert team.level in LEVELS
        assert 1 <= team.prestige <= 5
        assert len(team.colors) == 2
        for rival in rival_teams(team.team_id):
            assert rival.team_id != team.team_id
    print("  PASSED")


def test_prestige_labels():
    divider("TEST 1b: Prestige Labels")

    for tier, name in PRESTIGE_NAMES.items():
        assert prestige_label(tier) == name
        assert prestige_from_label(name) == tier
    assert prestige_label(9) == "Blue Blood"
    assert prestige_from_label("Contender") == 4
    assert prestige_from_label("nonsense", default=2) == 2
    print("  PASSED")


# ──────────────────────────────────────────────
# TEST 2: Conferences by Era
# ──────────────────────────────────────────────

def test_era_conferences():
    divider("TEST 2: Era Conferences")

    tamu = get_team("texas_am")
    for year, expected in [(1995, "SWC"), (1996, "Big 12"), (2011, "Big 12"), (2012, "SEC")]:
        print(f"  Texas A&M {year}: {tamu.conference_for_year(year)}")
        assert tamu.conference_for_year(year) == expected

    assert tamu in conference_teams_in_year("SWC", 1995)
    assert tamu not in conference_teams_in_year("SEC", 1995)
    dallas = get_team("dallas")
    assert dallas.conference_for_year(2000) == "NFC East"
    assert dallas in teams_by_conference("NFC East")
    assert team_conference_in_year("texas_am", 2005) == "Big 12"
    assert team_conference_in_year("nowhere", 2005) is None

    elite = teams_by_prestige(5)
    assert get_team("alabama") in elite
    assert all(t.prestige == 5 for t in elite)
    assert get_team("montana") in teams_by_prestige(1, 2)
    print("  PASSED")


# ──────────────────────────────────────────────
# TEST 3: Resolution
# ──────────────────────────────────────────────

def test_resolve_team():
    divider("TEST 3: Team Resolution")

    assert resolve_team("nebraska").team_id == "nebraska"
    assert resolve_team("ALABAMA").team_id == "alabama"
    assert find_team_by_name("Texas A&M Aggies").team_id == "texas_am"

    details = resolve_team("the Florida State faithful")
    print(f"  'the Florida State faithful' -> {details.team_id}")
    assert details.team_id == "florida_state"
    assert details.name == "the Florida State faithful"

    rivals = [t.team_id for t in rival_teams("alabama")]
    assert rivals[0] == "auburn"
    assert rival_teams("nowhere") == []
    print("  PASSED")


def test_fallback_details_are_stable():
    divider("TEST 3b: Fallback Details")

    first = resolve_team("Miskatonic Tech")
    second = resolve_team("Miskatonic Tech")
    print(f"  {first.to_dict()}")
    assert first.generated
    assert first.to_dict() == second.to_dict()
    assert first.colors[1] == "#cfb87c"
    assert fallback_team_details("Redlands").colors[0] == "#9e1b32"
    assert string_hash("") == 0
    assert string_hash("a") == 97
    print("  PASSED")


# ──────────────────────────────────────────────
# TEST 4: Job Openings
# ──────────────────────────────────────────────

def test_job_openings_respect_reputation():
    divider("TEST 4: Job Openings")

    openings = generate_job_openings(6, random.Random(2), "fcs", reputation=10,
                                     exclude=("montana",))
    for o in openings:
        print(f"  {o.team.name:<22} {o.role:<24} {o.attractiveness}")
        assert o.team.prestige <= 2
        assert o.team.level in ("fcs", "fbs-g5")
        assert o.team.team_id != "montana"
    scores = [o.attractiveness for o in openings]
    assert scores == sorted(scores, reverse=True)
    print("  PASSED")


# ──────────────────────────────────────────────
# TEST 5: Era Tables
# ──────────────────────────────────────────────

def test_salaries():
    divider("TEST 5: Salaries")

    gc = salary_thousands(1995, "Graduate Assistant", "Solid Program")
    hc = salary_thousands(1995, "Head Coach", "Solid Program")
    blue = salary_thousands(1995, "Head Coach", "Blue Blood")
    later = salary_thousands(2020, "Head Coach", "Solid Program")
    print(f"  1995 GA {gc}k, HC {hc}k, Blue Blood HC {blue}k, 2020 HC {later}k")
    assert gc < hc < blue
    assert later > hc

    assert format_salary(450) == "$450k/yr"
    assert format_salary(2500) == "$2.5M/yr"
    assert parse_salary("$2.5M/yr") == 2500
    assert parse_salary("$450k/yr") == 450
    assert parse_salary("a lot") == 0
    assert parse_salary(generate_salary(2010, "Offensive Coordinator", "Power Program")) > 0
    print("  PASSED")


def test_bowls_and_formats():
    divider("TEST 5b: Bowls and Formats")

    assert postseason_format(1995)["type"] == "Bowl Alliance"
    assert postseason_format(2005)["type"] == "BCS"
    assert postseason_format(2014)["slots"] == 4
    assert postseason_format(2024)["slots"] == 12

    rng = random.Random(4)
    for _ in range(20):
        name, city = pick_bowl(5, rng, wins=11)
        assert name.endswith("Bowl") and city
    assert pick_bowl(2, random.Random(9)) == pick_bowl(2, random.Random(9))
    assert {a["id"] for a in ARCHETYPES} >= {"offense_guru", "defense_beast"}
    assert "West Coast" in tactical_meta(1995)
    assert tactical_meta(1995) != tactical_meta(2024)
    print("  PASSED")


# ──────────────────────────────────────────────
# TEST 6: Seeded Streams
# ──────────────────────────────────────────────

def test_seeded_random():
    divider("TEST 6: Seeded Random")

    a = SeededRandom.derive(42, 7)
    b = SeededRandom.derive(42, 7)
    assert [a.next_int(1, 100) for _ in range(10)] == [b.next_int(1, 100) for _ in range(10)]
    c = SeededRandom.derive(42, 8)
    assert SeededRandom.derive(42, 7).random() != c.random()

    with pytest.raises(TypeError):
        SeededRandom("42")
    with pytest.raises(TypeError):
        SeededRandom.derive(42, True)
    with pytest.raises(ValueError):
        a.next_int(5, 1)
    with pytest.raises(ValueError):
        a.weighted_choice([], [])
    with pytest.raises(ValueError):
        a.weighted_choice(["x"], [0])
    assert a.weighted_choice(["x", "y"], [0, 1]) == "y"
    print("  PASSED")


def main():
    tests = [
        test_catalog_integrity,
        test_prestige_labels,
        test_era_conferences,
        test_resolve_team,
        test_fallback_details_are_stable,
        test_job_openings_respect_reputation,
        test_salaries,
        test_bowls_and_formats,
        test_seeded_random,
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
