#!/usr/bin/env python3
"""
Test suite for rosters, players and coaching staffs.

Tests:
1. Roster generation per level
2. Position limits on add / remove
3. Depth chart and team ratings
4. Offseason progression and recruiting classes
5. Player serialization
6. Coaching staff and chemistry
"""

import random
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))

from sideline.errors import RosterInvariantError
from sideline.models import LOYALTY_TIERS
from sideline.players import (
    GROUPS,
    OVR_MAX,
    OVR_MIN,
    POSITIONS,
    Player,
    generate_player,
    generate_recruit,
)
from sideline.rng import SeededRandom
from sideline.roster import (
    POSITION_COUNTS,
    ROSTER_TOTAL_MAX,
    STARTER_SLOTS,
    Roster,
    analyze_roster_strength,
    calculate_team_ratings,
    class_rank_from_stars,
    find_roster_needs,
    generate_recruiting_class,
    generate_roster,
    generate_staff,
    level_key,
    progress_roster_year,
    staff_chemistry,
)
from sideline.teams import get_team


def divider(title: str):
    print(f"\n{'=' * 60}")
    print(f"  {title}")
    print(f"{'=' * 60}")


# ──────────────────────────────────────────────
# TEST 1: Generation
# ──────────────────────────────────────────────

@pytest.mark.parametrize("team_id", ["nebraska", "montana", "dallas"])
def test_generate_roster_counts(team_id):
    divider(f"TEST 1: Roster Generation ({team_id})")

    team = get_team(team_id)
    roster = generate_roster(team, SeededRandom(11), year=1998)
    lvl = level_key(team.level)
    print(f"  {team.full_name}: {roster.total} players ({lvl})")

    for pos in POSITIONS:
        assert roster.count(pos) == POSITION_COUNTS[lvl][pos], f"{pos} count off"
    assert roster.total == sum(POSITION_COUNTS[lvl].values())
    assert roster.total <= ROSTER_TOTAL_MAX[lvl]
    for p in roster.all_players():
        assert OVR_MIN <= p.overall <= OVR_MAX
        assert p.player_id.startswith(f"{team_id}-1998-")
        if lvl == "nfl":
            assert p.stars is None and p.year == "PRO"
    roster.validate()
    print("  PASSED")


def test_generation_is_deterministic():
    divider("TEST 1b: Deterministic Rosters")

    team = get_team("alabama")
    a = generate_roster(team, SeededRandom(5), year=2001)
    b = generate_roster(team, SeededRandom(5), year=2001)
    assert a.to_dict() == b.to_dict()
    c = generate_roster(team, SeededRandom(6), year=2001)
    assert a.to_dict() != c.to_dict()
    print("  PASSED")


def test_prestige_lifts_talent():
    divider("TEST 1c: Prestige and Talent")

    strong = calculate_team_ratings(generate_roster(get_team("alabama"), SeededRandom(2)))
    weak = calculate_team_ratings(generate_roster(get_team("eastern_washington"), SeededRandom(2)))
    print(f"  Alabama {strong.overall} vs Eastern Washington {weak.overall}")
    assert strong.overall > weak.overall
    print("  PASSED")


# ──────────────────────────────────────────────
# TEST 2: Position Limits
# ──────────────────────────────────────────────

def test_add_respects_position_max():
    divider("TEST 2: Position Max")

    roster = generate_roster(get_team("nebraska"), SeededRandom(3))
    rng = random.Random(3)
    _, hi = roster.limits("K")
    n = 0
    while roster.count("K") < hi:
        n += 1
        roster.add(generate_player("K", "fbs-p5", rng, player_id=f"walkon-k{n}"))
    with pytest.raises(RosterInvariantError):
        roster.add(generate_player("K", "fbs-p5", rng, player_id="walkon-k-extra"))
    print(f"  K capped at {hi}")

    dup_id = roster.players["QB"][0].player_id
    with pytest.raises(RosterInvariantError):
        roster.add(generate_player("WR", "fbs-p5", rng, player_id=dup_id))
    print("  PASSED")


def test_remove_respects_position_min():
    divider("TEST 2b: Position Min")

    roster = generate_roster(get_team("nebraska"), SeededRandom(4))
    lo, _ = roster.limits("QB")
    while roster.count("QB") > lo:
        roster.remove(roster.players["QB"][-1].player_id)
    with pytest.raises(RosterInvariantError):
        roster.remove(roster.players["QB"][-1].player_id)
    print(f"  QB floor {lo} held")

    roster.remove(roster.players["QB"][-1].player_id, allow_short=True)
    with pytest.raises(RosterInvariantError):
        roster.validate()
    with pytest.raises(KeyError):
        roster.remove("nobody")
    print("  PASSED")


# ──────────────────────────────────────────────
# TEST 3: Depth Chart and Ratings
# ──────────────────────────────────────────────

def test_depth_chart_and_ratings():
    divider("TEST 3: Depth Chart")

    roster = generate_roster(get_team("iowa"), SeededRandom(9))
    for pos in POSITIONS:
        ovrs = [p.overall for p in roster.players[pos]]
        assert ovrs == sorted(ovrs, reverse=True), f"{pos} depth out of order"

    injured = roster.players["QB"][0]
    injured.injury_weeks = 3
    chart = roster.depth_chart()
    assert injured not in chart["QB"]
    for group, starters in chart.items():
        assert len(starters) <= STARTER_SLOTS[group]

    ratings = calculate_team_ratings(roster)
    print(f"  Ratings: {ratings.to_dict()}")
    assert OVR_MIN <= ratings.overall <= OVR_MAX
    assert set(ratings.units) == set(STARTER_SLOTS)
    print("  PASSED")


def test_roster_needs():
    divider("TEST 3b: Roster Needs")

    roster = generate_roster(get_team("iowa"), SeededRandom(9))
    strength = analyze_roster_strength(roster)
    assert set(strength) == set(GROUPS)
    assert sum(s["count"] for s in strength.values()) == roster.total
    for group, s in strength.items():
        assert s["starters"] >= s["depth"], f"{group} starters weaker than depth"

    roster.remove(roster.players["CB"][-1].player_id)
    needs = find_roster_needs(roster, threshold=0)
    print(f"  Needs: {needs}")
    assert needs == ["CB"]
    print("  PASSED")


# ──────────────────────────────────────────────
# TEST 4: Progression and Recruiting
# ──────────────────────────────────────────────

def test_progress_roster_year():
    divider("TEST 4: Offseason Progression")

    team = get_team("nebraska")
    roster = generate_roster(team, SeededRandom(21), year=1995)
    before = {p.player_id: p.age for p in roster.all_players()}
    report = progress_roster_year(roster, team, SeededRandom(22), year=1996)
    print(f"  Graduated {len(report.graduated)}, declared {len(report.declared)}, "
          f"signed {len(report.signed)}, breakouts {len(report.breakouts)}")

    roster.validate()
    assert report.departures > 0
    for pos in POSITIONS:
        assert roster.count(pos) >= POSITION_COUNTS["fbs"][pos]
    for p in roster.all_players():
        if p.player_id in before:
            assert p.age == before[p.player_id] + 1
            assert p.age <= 22
        else:
            assert p.age == 18 and p.stars is not None
    print("  PASSED")


def test_nfl_progression_signs_veterans():
    divider("TEST 4b: NFL Progression")

    team = get_team("dallas")
    roster = generate_roster(team, SeededRandom(30), year=2005)
    report = progress_roster_year(roster, team, SeededRandom(31), year=2006)
    roster.validate()
    assert report.graduated == [] and report.declared == []
    for p in report.signed:
        assert p.age == 22
    print("  PASSED")


def test_recruiting_class():
    divider("TEST 4c: Recruiting Class")

    team = get_team("florida")
    signees = generate_recruiting_class(team, random.Random(7), needs=["QB", "K"], size=12, year=2003)
    print(f"  Stars: {[p.stars for p in signees]}")
    assert len(signees) == 12
    assert {"QB", "K"} <= {p.position for p in signees}
    stars = [p.stars for p in signees]
    assert stars == sorted(stars, reverse=True)
    assert all(p.age == 18 for p in signees)

    rank = class_rank_from_stars(signees, team.prestige)
    assert 1 <= rank <= 100
    assert class_rank_from_stars([], 3) == 100

    recruit = generate_recruit("QB", random.Random(3), year=2001, stars=5)
    assert recruit.stars == 5 and recruit.age == 18 and recruit.year == "FR"
    print(f"  Class rank #{rank}")
    print("  PASSED")


# ──────────────────────────────────────────────
# TEST 5: Serialization
# ──────────────────────────────────────────────

def test_player_and_roster_dicts():
    divider("TEST 5: Serialization")

    roster = generate_roster(get_team("montana"), SeededRandom(12))
    restored = Roster.from_dict(roster.to_dict())
    assert restored.to_dict() == roster.to_dict()

    qb = roster.players["QB"][0]
    clone = Player.from_dict(qb.to_dict())
    assert clone.overall == qb.overall

    with pytest.raises(ValueError):
        Player(player_id="x", first_name="A", last_name="B", position="QB",
               physical=qb.physical, mental=qb.mental,
               attributes=roster.players["K"][0].attributes)
    print("  PASSED")


# ──────────────────────────────────────────────
# TEST 6: Staff
# ──────────────────────────────────────────────

def test_staff_generation():
    divider("TEST 6: Coaching Staff")

    staff = generate_staff(5, random.Random(1))
    for member in staff:
        print(f"  {member.role:<28} {member.name:<20} {member.rating} {member.loyalty}")
        assert 30 <= member.rating <= 95
        assert member.loyalty in LOYALTY_TIERS
    assert staff[0].role == "Offensive Coordinator"
    assert staff[1].role == "Defensive Coordinator"

    chem = staff_chemistry(staff)
    assert 30 <= chem <= 80
    assert staff_chemistry([]) == 50
    print(f"  Chemistry {chem}")
    print("  PASSED")


def main():
    tests = [
        lambda: test_generate_roster_counts("nebraska"),
        lambda: test_generate_roster_counts("montana"),
        lambda: test_generate_roster_counts("dallas"),
        test_generation_is_deterministic,
        test_prestige_lifts_talent,
        test_add_respects_position_max,
        test_remove_respects_position_min,
        test_depth_chart_and_ratings,
        test_roster_needs,
        test_progress_roster_year,
        test_nfl_progression_signs_veterans,
        test_recruiting_class,
        test_player_and_roster_dicts,
        test_staff_generation,
    ]

    passed = 0
    failed = 0
    for test_fn in tests:
        try:
            test_fn()
            passed += 1
        except Exception as e:
            failed += 1
            print(f"\n  FAILED: {getattr(test_fn, '__name__', 'test')}")
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
