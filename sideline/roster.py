"""
Sideline Saga Rosters

Level-aware roster generation, unit ratings, recruiting classes, offseason
progression, and the coaching staff that surrounds a head coach.

Key concepts:
- Position counts differ by level (FBS, FCS, NFL) and every roster must stay
  inside the [min, max] window for each position and under the level's
  total cap.  Violations raise RosterInvariantError.
- Team strength is the weighted blend of starter overalls by unit.
- Each offseason players age, develop, graduate, declare or retire, and a
  recruiting class refills whatever fell below the floor.

Usage:
    from sideline.roster import generate_roster, calculate_team_ratings

    roster = generate_roster(team, rng, year=1998)
    ratings = calculate_team_ratings(roster)
    report = progress_roster_year(roster, team, rng, year=1999)
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, TYPE_CHECKING

from sideline.errors import RosterInvariantError
from sideline.names import generate_coach_name
from sideline.players import (
    GROUPS,
    POSITION_GROUPS,
    POSITIONS,
    Player,
    apply_development,
    college_year_for_age,
    generate_player,
)

if TYPE_CHECKING:
    from sideline.teams import Team


# ──────────────────────────────────────────────
# POSITION COUNTS & LIMITS
# ──────────────────────────────────────────────

POSITION_COUNTS: Dict[str, Dict[str, int]] = {
    "fbs": {
        "QB": 4, "RB": 5, "FB": 1, "WR": 10, "TE": 4,
        "LT": 3, "LG": 3, "C": 3, "RG": 3, "RT": 3,
        "DE": 5, "DT": 4, "NT": 2, "OLB": 5, "MLB": 4, "ILB": 4,
        "CB": 7, "FS": 3, "SS": 3, "K": 2, "P": 2, "LS": 1,
    },
    "fcs": {
        "QB": 3, "RB": 4, "FB": 1, "WR": 7, "TE": 3,
        "LT": 2, "LG": 2, "C": 2, "RG": 2, "RT": 2,
        "DE": 4, "DT": 3, "NT": 1, "OLB": 4, "MLB": 3, "ILB": 3,
        "CB": 5, "FS": 2, "SS": 2, "K": 1, "P": 1, "LS": 1,
    },
    "nfl": {
        "QB": 2, "RB": 4, "FB": 1, "WR": 6, "TE": 3,
        "LT": 2, "LG": 2, "C": 2, "RG": 2, "RT": 2,
        "DE": 4, "DT": 3, "NT": 1, "OLB": 4, "MLB": 2, "ILB": 2,
        "CB": 5, "FS": 2, "SS": 2, "K": 1, "P": 1, "LS": 1,
    },
}

# 53 active plus the two-man game-day flex
ROSTER_TOTAL_MAX = {"fbs": 105, "fcs": 95, "nfl": 55}

_MUST_HAVE = ("QB", "K", "P")


def level_key(level: str) -> str:
    if level.startswith("fbs"):
        return "fbs"
    if level in POSITION_COUNTS:
        return level
    raise ValueError(f"Unknown level '{level}'")


def _build_limits() -> Dict[str, Dict[str, Tuple[int, int]]]:
    limits = {}
    for lvl, counts in POSITION_COUNTS.items():
        table = {}
        for pos, n in counts.items():
            lo = n - math.ceil(n * 0.5)
            if pos in _MUST_HAVE:
                lo = max(1, lo)
            table[pos] = (lo, math.ceil(n * 1.5))
        limits[lvl] = table
    return limits


POSITION_LIMITS = _build_limits()

# Starters per group used for unit ratings
STARTER_SLOTS = {
    "QB": 1, "RB": 2, "WR": 4, "TE": 2, "OL": 5,
    "DL": 4, "LB": 3, "DB": 4, "K": 1, "P": 1,
}

OFFENSE_WEIGHTS = {"QB": 0.25, "RB": 0.15, "WR": 0.20, "TE": 0.10, "OL": 0.30}
DEFENSE_WEIGHTS = {"DL": 0.30, "LB": 0.35, "DB": 0.35}


# ──────────────────────────────────────────────
# ROSTER
# ──────────────────────────────────────────────

@dataclass
class Roster:
    """Players by position, each list ordered by depth (starter first)."""
    team_id: str
    level: str
    players: Dict[str, List[Player]] = field(default_factory=dict)

    def count(self, position: str) -> int:
        return len(self.players.get(position, []))

    @property
    def total(self) -> int:
        return sum(len(v) for v in self.players.values())

    def all_players(self) -> List[Player]:
        return [p for pos in POSITIONS for p in self.players.get(pos, [])]

    def find(self, player_id: str) -> Optional[Player]:
        for p in self.all_players():
            if p.player_id == player_id:
                return p
        return None

    def limits(self, position: str) -> Tuple[int, int]:
        return POSITION_LIMITS[level_key(self.level)][position]

    def validate(self):
        lvl = level_key(self.level)
        for pos in POSITIONS:
            lo, hi = POSITION_LIMITS[lvl][pos]
            n = self.count(pos)
            if n < lo or n > hi:
                raise RosterInvariantError(
                    f"{self.team_id}: {pos} count {n} outside [{lo}, {hi}]"
                )
        if self.total > ROSTER_TOTAL_MAX[lvl]:
            raise RosterInvariantError(
                f"{self.team_id}: {self.total} players exceeds cap of {ROSTER_TOTAL_MAX[lvl]}"
            )
        seen = set()
        for p in self.all_players():
            if p.player_id in seen:
                raise RosterInvariantError(f"{self.team_id}: duplicate player id {p.player_id}")
            seen.add(p.player_id)

    def add(self, player: Player, validate: bool = True):
        _, hi = self.limits(player.position)
        if self.count(player.position) >= hi:
            raise RosterInvariantError(
                f"{self.team_id}: {player.position} already at max ({hi})"
            )
        if self.find(player.player_id) is not None:
            raise RosterInvariantError(f"{self.team_id}: duplicate player id {player.player_id}")
        self.players.setdefault(player.position, []).append(player)
        self.sort_depth(player.position)
        if validate:
            self.validate()

    def remove(self, player_id: str, allow_short: bool = False) -> Player:
        player = self.find(player_id)
        if player is None:
            raise KeyError(player_id)
        lo, _ = self.limits(player.position)
        if not allow_short and self.count(player.position) - 1 < lo:
            raise RosterInvariantError(
                f"{self.team_id}: removing {player.full_name} drops {player.position} below {lo}"
            )
        self.players[player.position].remove(player)
        return player

    def sort_depth(self, position: str):
        self.players.get(position, []).sort(key=lambda p: (p.injured, -p.overall))

    def by_group(self) -> Dict[str, List[Player]]:
        grouped: Dict[str, List[Player]] = {g: [] for g in GROUPS}
        for p in self.all_players():
            grouped[p.group].append(p)
        return grouped

    def depth_chart(self) -> Dict[str, List[Player]]:
        """Healthy starters by group, best overall first."""
        chart = {}
        for group, players in self.by_group().items():
            healthy = sorted((p for p in players if not p.injured),
                             key=lambda p: -p.overall)
            chart[group] = healthy[:STARTER_SLOTS[group]]
        return chart

    def to_dict(self) -> dict:
        return {
            "team_id": self.team_id,
            "level": self.level,
            "players": {pos: [p.to_dict() for p in ps] for pos, ps in self.players.items()},
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Roster":
        return cls(
            team_id=d["team_id"],
            level=d["level"],
            players={pos: [Player.from_dict(p) for p in ps]
                     for pos, ps in d.get("players", {}).items()},
        )


# ──────────────────────────────────────────────
# TEAM RATINGS
# ──────────────────────────────────────────────

@dataclass
class TeamRatings:
    offense: int
    defense: int
    special_teams: int
    overall: int
    units: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "offense": self.offense,
            "defense": self.defense,
            "special_teams": self.special_teams,
            "overall": self.overall,
            "units": dict(self.units),
        }


def _unit_rating(starters: List[Player]) -> float:
    if not starters:
        return 50.0
    return sum(p.overall for p in starters) / len(starters)


def calculate_team_ratings(roster: Roster) -> TeamRatings:
    chart = roster.depth_chart()
    units = {g: _unit_rating(chart[g]) for g in GROUPS}
    offense = sum(units[g] * w for g, w in OFFENSE_WEIGHTS.items())
    defense = sum(units[g] * w for g, w in DEFENSE_WEIGHTS.items())
    special = (units["K"] + units["P"]) / 2
    overall = offense * 0.45 + defense * 0.45 + special * 0.10
    return TeamRatings(
        offense=round(offense),
        defense=round(defense),
        special_teams=round(special),
        overall=round(overall),
        units={g: round(v) for g, v in units.items()},
    )


def analyze_roster_strength(roster: Roster) -> Dict[str, dict]:
    """Per-group summary: starter average, depth average, head count."""
    chart = roster.depth_chart()
    summary = {}
    for group, players in roster.by_group().items():
        starters = chart[group]
        summary[group] = {
            "starters": round(_unit_rating(starters)),
            "depth": round(_unit_rating(players)) if players else 0,
            "count": len(players),
        }
    return summary


def find_roster_needs(roster: Roster, threshold: int = 70) -> List[str]:
    """Positions that are thin (below generation count) or weak at the top."""
    counts = POSITION_COUNTS[level_key(roster.level)]
    needs = []
    for pos in POSITIONS:
        players = roster.players.get(pos, [])
        if len(players) < counts[pos]:
            needs.append(pos)
        elif players and max(p.overall for p in players) < threshold:
            needs.append(pos)
    return needs


# ──────────────────────────────────────────────
# ROSTER GENERATION
# ──────────────────────────────────────────────

def determine_player_tier(depth: int, count: int, prestige: int, rng: random.Random) -> int:
    """Starters skew higher; prestige lifts the whole depth chart."""
    share = depth / max(1, count)
    if share < 0.34:
        base = 3
    elif share < 0.67:
        base = 2
    else:
        base = 1
    bonus = (prestige - 3) * 0.5 + rng.uniform(-0.6, 0.9)
    return max(1, min(5, round(base + bonus)))


def _age_for_depth(level: str, depth: int, count: int, rng: random.Random) -> int:
    if level_key(level) == "nfl":
        return rng.randint(22, 33)
    share = depth / max(1, count)
    if share < 0.34:
        return rng.randint(20, 22)
    if share < 0.67:
        return rng.randint(19, 21)
    return rng.randint(18, 20)


def generate_roster(team: "Team", rng: random.Random, year: int = 1995) -> Roster:
    counts = POSITION_COUNTS[level_key(team.level)]
    roster = Roster(team_id=team.team_id, level=team.level)
    serial = 0
    for pos in POSITIONS:
        n = counts[pos]
        players = []
        for depth in range(n):
            serial += 1
            tier = determine_player_tier(depth, n, team.prestige, rng)
            players.append(generate_player(
                pos, team.level, rng,
                tier=tier,
                age=_age_for_depth(team.level, depth, n, rng),
                year=year,
                player_id=f"{team.team_id}-{year}-{serial:03d}",
            ))
        roster.players[pos] = players
        roster.sort_depth(pos)
    roster.validate()
    return roster


# ──────────────────────────────────────────────
# RECRUITING CLASS
# ──────────────────────────────────────────────

# Share of a recruiting class by position (roughly mirrors roster needs)
_CLASS_DISTRIBUTION: List[Tuple[str, float]] = [
    ("QB", 0.05), ("RB", 0.06), ("FB", 0.01), ("WR", 0.12), ("TE", 0.05),
    ("LT", 0.04), ("LG", 0.04), ("C", 0.03), ("RG", 0.04), ("RT", 0.04),
    ("DE", 0.07), ("DT", 0.05), ("NT", 0.02), ("OLB", 0.06), ("MLB", 0.04),
    ("ILB", 0.04), ("CB", 0.09), ("FS", 0.04), ("SS", 0.04),
    ("K", 0.01), ("P", 0.01), ("LS", 0.01),
]


def determine_recruit_star_rating(prestige: int, rng: random.Random) -> int:
    roll = rng.random() + prestige * 0.08
    if roll > 1.35:
        return 5
    if roll > 1.10:
        return 4
    if roll > 0.70:
        return 3
    if roll > 0.30:
        return 2
    return 1


def generate_recruiting_class(
    team: "Team",
    rng: random.Random,
    needs: Optional[List[str]] = None,
    size: int = 20,
    year: int = 1995,
) -> List[Player]:
    """
    Sign a class of 18-year-olds.  Needs are filled first, the rest follow the
    national position distribution.  Sorted by stars then overall.
    """
    positions = list(needs or [])[:size]
    pool, weights = zip(*_CLASS_DISTRIBUTION)
    while len(positions) < size:
        positions.append(rng.choices(pool, weights=weights, k=1)[0])

    signees = []
    for i, pos in enumerate(positions):
        stars = determine_recruit_star_rating(team.prestige, rng)
        p = generate_player(pos, team.level, rng, tier=stars, age=18, year=year,
                            player_id=f"{team.team_id}-r{year}-{i + 1:03d}")
        p.stars = stars
        signees.append(p)
    signees.sort(key=lambda p: (-(p.stars or 0), -p.overall))
    return signees


def class_rank_from_stars(signees: List[Player], prestige: int) -> int:
    """Rough national class ranking (1 = best) from average stars."""
    if not signees:
        return 100
    avg = sum(p.stars or 1 for p in signees) / len(signees)
    return max(1, min(100, round(90 - (avg - 1) * 22 - prestige * 3)))


# ──────────────────────────────────────────────
# OFFSEASON PROGRESSION
# ──────────────────────────────────────────────

@dataclass
class ProgressionReport:
    graduated: List[str] = field(default_factory=list)
    declared: List[str] = field(default_factory=list)
    retired: List[str] = field(default_factory=list)
    signed: List[Player] = field(default_factory=list)
    breakouts: List[Tuple[str, int]] = field(default_factory=list)   # (name, ovr delta)

    @property
    def departures(self) -> int:
        return len(self.graduated) + len(self.declared) + len(self.retired)


def progress_roster_year(
    roster: Roster,
    team: "Team",
    rng: random.Random,
    year: int = 1995,
) -> ProgressionReport:
    """Age, develop, and turn over a roster for the coming season.  Mutates."""
    report = ProgressionReport()
    nfl = level_key(roster.level) == "nfl"

    for player in roster.all_players():
        player.age += 1
        player.injury_weeks = 0
        leaving = None
        if nfl:
            if player.age > 38 or (player.age > 32 and rng.random() < 0.20):
                leaving = report.retired
        else:
            if player.age > 22:
                leaving = report.graduated
            elif player.age >= 21 and player.overall >= 80 and rng.random() < 0.30:
                leaving = report.declared
        if leaving is not None:
            roster.remove(player.player_id, allow_short=True)
            leaving.append(player.full_name)
            continue

        if not nfl:
            player.year = college_year_for_age(player.age)
        delta = apply_development(player, rng)
        if delta >= 4:
            report.breakouts.append((player.full_name, delta))

    # refill toward the generation counts
    counts = POSITION_COUNTS[level_key(roster.level)]
    needs = []
    for pos in POSITIONS:
        needs.extend([pos] * max(0, counts[pos] - roster.count(pos)))
    if needs:
        if nfl:
            for i, pos in enumerate(needs):
                tier = determine_player_tier(counts[pos] - 1, counts[pos], team.prestige, rng)
                rookie = generate_player(pos, roster.level, rng, tier=tier, age=22, year=year,
                                         player_id=f"{team.team_id}-fa{year}-{i + 1:03d}")
                roster.add(rookie, validate=False)
                report.signed.append(rookie)
        else:
            signees = generate_recruiting_class(team, rng, needs=needs, size=len(needs), year=year)
            for p in signees:
                roster.add(p, validate=False)
                report.signed.append(p)

    for pos in POSITIONS:
        roster.sort_depth(pos)
    roster.validate()
    return report


# ──────────────────────────────────────────────
# COACHING STAFF
# ──────────────────────────────────────────────

STAFF_ROLES = ["Offensive Coordinator", "Defensive Coordinator",
               "Special Teams Coordinator", "QB Coach", "OL Coach", "DB Coach"]

OFFENSE_STYLES = ["Pro Style", "Spread", "Air Raid", "Power Run", "West Coast", "Option"]
DEFENSE_STYLES = ["4-3 Base", "3-4", "Nickel", "46 Bear", "Tampa 2", "3-3-5"]

_LOYALTY_SCORE = {"High": 80, "Medium": 55, "Low": 30, "Rival": 10}


@dataclass
class StaffMember:
    name: str
    role: str
    rating: int
    style: str
    loyalty: str = "Medium"

    def to_dict(self) -> dict:
        return {"name": self.name, "role": self.role, "rating": self.rating,
                "style": self.style, "loyalty": self.loyalty}

    @classmethod
    def from_dict(cls, d: dict) -> "StaffMember":
        return cls(**d)


def generate_staff(prestige: int, rng: random.Random) -> List[StaffMember]:
    """A head coach's inherited staff; better programs employ better assistants."""
    staff = []
    for role in STAFF_ROLES:
        if role.startswith("Offensive") or role in ("QB Coach", "OL Coach"):
            style = rng.choice(OFFENSE_STYLES)
        elif role.startswith("Defensive") or role == "DB Coach":
            style = rng.choice(DEFENSE_STYLES)
        else:
            style = "Special Teams"
        rating = max(30, min(95, round(rng.gauss(45 + prestige * 7, 8))))
        loyalty = rng.choices(["High", "Medium", "Low"], weights=[2, 5, 3], k=1)[0]
        staff.append(StaffMember(generate_coach_name(rng), role, rating, style, loyalty))
    return staff


def staff_chemistry(staff: List[StaffMember]) -> int:
    if not staff:
        return 50
    return round(sum(_LOYALTY_SCORE.get(s.loyalty, 50) for s in staff) / len(staff))
