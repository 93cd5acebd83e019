"""
Sideline Saga Team Registry

Immutable catalog of college programs and NFL franchises, era-aware
conference lookups, the free-text resolver used for display data, and the
job-opening pool the carousel draws from.

Resolution order for ``resolve_team``:
    1. exact team id
    2. exact name (case-insensitive)
    3. substring match against names, then nicknames (longest first)
    4. procedural fallback hashed from the input string

The fallback never touches the game rng: the same unknown name renders the
same colors in every session and every save.

Usage:
    from sideline.teams import get_team, resolve_team, generate_job_openings

    team = get_team("nebraska")
    team.conference_for_year(1995)       # -> "Big 8"
    resolve_team("Florida Gators").team_id   # -> "florida"
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from sideline.team_data import TEAM_ROWS


# ──────────────────────────────────────────────
# PRESTIGE
# ──────────────────────────────────────────────

PRESTIGE_NAMES: Dict[int, str] = {
    5: "Blue Blood",
    4: "Power Program",
    3: "Solid Program",
    2: "Rebuild Project",
    1: "Bottom Feeder",
}

# Win percentage a program's fans and board consider par
PRESTIGE_WIN_EXPECTATIONS: Dict[int, float] = {
    5: 0.75,
    4: 0.65,
    3: 0.55,
    2: 0.40,
    1: 0.30,
}

_PRESTIGE_ALIASES = {
    "contender": 4,
    "rebuild": 2,
}

LEVELS = ("fcs", "fbs-g5", "fbs-p5", "nfl")


def prestige_label(prestige: int) -> str:
    return PRESTIGE_NAMES[max(1, min(5, prestige))]


def prestige_from_label(label: str, default: int = 3) -> int:
    """Reverse of PRESTIGE_NAMES; unknown labels map to ``default``."""
    key = (label or "").strip().lower()
    for tier, name in PRESTIGE_NAMES.items():
        if name.lower() == key:
            return tier
    return _PRESTIGE_ALIASES.get(key, default)


# ──────────────────────────────────────────────
# TEAM
# ──────────────────────────────────────────────

@dataclass(frozen=True)
class Team:
    team_id: str
    name: str
    nickname: str
    level: str
    conference: str
    prestige: int
    colors: Tuple[str, str]
    stadium: str
    location: str
    primary_rival: str = ""
    rivals: Tuple[str, ...] = ()
    fanbase_passion: int = 50
    era_conferences: Dict[int, str] = field(default_factory=dict, hash=False)
    division: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.name} {self.nickname}"

    @property
    def prestige_label(self) -> str:
        return prestige_label(self.prestige)

    def conference_for_year(self, year: int) -> str:
        """League grouping in ``year``: conference for colleges, division for the NFL."""
        current = self.division or self.conference
        best = None
        for start in sorted(self.era_conferences):
            if start <= year:
                best = self.era_conferences[start]
        return best or current

    def to_dict(self) -> dict:
        return {
            "team_id": self.team_id,
            "name": self.name,
            "nickname": self.nickname,
            "level": self.level,
            "conference": self.conference,
            "division": self.division,
            "prestige": self.prestige,
            "prestige_label": self.prestige_label,
            "colors": list(self.colors),
            "stadium": self.stadium,
            "location": self.location,
            "primary_rival": self.primary_rival,
            "rivals": list(self.rivals),
            "fanbase_passion": self.fanbase_passion,
            "era_conferences": {str(k): v for k, v in self.era_conferences.items()},
        }


def _team_from_row(row: tuple) -> Team:
    (team_id, name, nickname, level, conference, prestige, colors, stadium,
     location, primary_rival, rivals, passion, eras) = row
    division = ""
    if level == "nfl":
        division = conference
        conference = conference.split()[0]
    return Team(
        team_id=team_id,
        name=name,
        nickname=nickname,
        level=level,
        conference=conference,
        prestige=prestige,
        colors=tuple(colors),
        stadium=stadium,
        location=location,
        primary_rival=primary_rival,
        rivals=tuple(rivals),
        fanbase_passion=passion,
        era_conferences=dict(eras),
        division=division,
    )


ALL_TEAMS: List[Team] = [_team_from_row(r) for r in TEAM_ROWS]
TEAMS: Dict[str, Team] = {t.team_id: t for t in ALL_TEAMS}


# ──────────────────────────────────────────────
# LOOKUPS
# ──────────────────────────────────────────────

def get_team(team_id: str) -> Optional[Team]:
    return TEAMS.get(team_id)


def find_team_by_name(name: str) -> Optional[Team]:
    key = (name or "").strip().lower()
    for team in ALL_TEAMS:
        if team.name.lower() == key or team.full_name.lower() == key:
            return team
    return None


def teams_by_level(level: str) -> List[Team]:
    return [t for t in ALL_TEAMS if t.level == level]


def teams_by_conference(conference: str) -> List[Team]:
    """Current affiliation; NFL teams match on conference or division."""
    return [t for t in ALL_TEAMS if conference in (t.conference, t.division)]


def teams_by_prestige(min_prestige: int, max_prestige: int = 5) -> List[Team]:
    return [t for t in ALL_TEAMS if min_prestige <= t.prestige <= max_prestige]


def rival_teams(team_id: str) -> List[Team]:
    team = get_team(team_id)
    if team is None:
        return []
    rivals = []
    for rid in (team.primary_rival,) + team.rivals:
        rival = get_team(rid)
        if rival is not None and rival not in rivals:
            rivals.append(rival)
    return rivals


def team_conference_in_year(team_id: str, year: int) -> Optional[str]:
    team = get_team(team_id)
    if team is None:
        return None
    return team.conference_for_year(year)


def conference_teams_in_year(conference: str, year: int) -> List[Team]:
    """Every catalog team whose grouping in ``year`` was ``conference``."""
    return [t for t in ALL_TEAMS if t.conference_for_year(year) == conference]


# ──────────────────────────────────────────────
# FREE-TEXT RESOLUTION
# ──────────────────────────────────────────────

@dataclass
class TeamDetails:
    """Display identity for any team name, catalog or not."""
    name: str
    nickname: str
    colors: Tuple[str, str]
    stadium: str
    rivals: List[str]
    location: str
    team_id: Optional[str] = None
    level: Optional[str] = None
    conference: Optional[str] = None
    prestige: Optional[int] = None

    @property
    def generated(self) -> bool:
        return self.team_id is None

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "nickname": self.nickname,
            "colors": list(self.colors),
            "stadium": self.stadium,
            "rivals": list(self.rivals),
            "location": self.location,
            "team_id": self.team_id,
            "level": self.level,
            "conference": self.conference,
            "prestige": self.prestige,
        }


_FALLBACK_COLORS = [
    ("#c1272d", "#ffffff"),   # red/white
    ("#00274c", "#ffcb05"),   # blue/yellow
    ("#005a9c", "#ffffff"),   # blue/white
    ("#4f2d7f", "#ffffff"),   # purple/white
    ("#006747", "#cfb87c"),   # green/gold
    ("#000000", "#cfb87c"),   # black/gold
    ("#800000", "#ffffff"),   # maroon/white
    ("#ff7300", "#000000"),   # orange/black
]


def string_hash(text: str) -> int:
    """Java-style 32-bit string hash (h*31 + c), signed."""
    h = 0
    for ch in text:
        h = (ord(ch) + (h << 5) - h) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return h


def fallback_team_details(name: str) -> TeamDetails:
    primary, secondary = _FALLBACK_COLORS[abs(string_hash(name)) % len(_FALLBACK_COLORS)]
    n = name.lower()
    if "red" in n or "state" in n:
        primary = "#9e1b32"
    if "blue" in n or "kentucky" in n:
        primary = "#005a9c"
    if "green" in n or "north" in n:
        primary = "#006747"
    if "gold" in n or "tech" in n:
        secondary = "#cfb87c"
    if "purple" in n:
        primary = "#4f2d7f"
    if "orange" in n:
        primary = "#ff7300"
    return TeamDetails(
        name=name,
        nickname="Athletes",
        colors=(primary, secondary),
        stadium=f"{name} Stadium",
        rivals=["Conference Rival"],
        location="Campus",
    )


def _details_from_team(team: Team, display_name: str) -> TeamDetails:
    return TeamDetails(
        name=display_name,
        nickname=team.nickname,
        colors=team.colors,
        stadium=team.stadium,
        rivals=[r.name for r in rival_teams(team.team_id)],
        location=team.location,
        team_id=team.team_id,
        level=team.level,
        conference=team.conference,
        prestige=team.prestige,
    )


def resolve_team(name_or_id: str) -> TeamDetails:
    team = get_team(name_or_id)
    if team is not None:
        return _details_from_team(team, team.name)
    team = find_team_by_name(name_or_id)
    if team is not None:
        return _details_from_team(team, team.name)

    # "Florida State Seminoles" must not resolve to Florida
    text = name_or_id.lower()
    for attr in ("name", "nickname"):
        candidates = sorted(ALL_TEAMS, key=lambda t: len(getattr(t, attr)), reverse=True)
        for team in candidates:
            if getattr(team, attr).lower() in text:
                return _details_from_team(team, name_or_id)

    return fallback_team_details(name_or_id)


# ──────────────────────────────────────────────
# JOB OPENINGS
# ──────────────────────────────────────────────

OPENING_ROLES = ["Head Coach", "Offensive Coordinator", "Defensive Coordinator", "Position Coach"]


@dataclass
class JobOpening:
    team: Team
    role: str
    attractiveness: int


def opening_attractiveness(team: Team, role: str) -> int:
    score = team.prestige * 15 + team.fanbase_passion * 0.2
    if role == "Head Coach":
        score += 10
    if team.level == "nfl":
        score += 15
    return min(100, max(1, round(score)))


def generate_job_openings(
    count: int,
    rng: random.Random,
    min_level: str = "fcs",
    reputation: int = 50,
    exclude: Tuple[str, ...] = (),
) -> List[JobOpening]:
    """
    Reputation-gated openings, best first.  Every level up to one step above
    ``min_level`` are in play and the prestige ceiling rises every 25
    reputation points.
    """
    start = LEVELS.index(min_level)
    levels = LEVELS[:start + 2]
    ceiling = reputation // 25 + 2
    pool = [t for t in ALL_TEAMS
            if t.level in levels and t.prestige <= ceiling and t.team_id not in exclude]
    rng.shuffle(pool)

    openings = []
    for team in pool[:count]:
        if team.prestige >= 4 and reputation < 70:
            role = OPENING_ROLES[min(3, rng.randint(1, 3))]
        elif reputation >= 80:
            role = OPENING_ROLES[rng.randint(0, 1)]
        else:
            role = rng.choice(OPENING_ROLES)
        openings.append(JobOpening(team, role, opening_attractiveness(team, role)))
    openings.sort(key=lambda o: o.attractiveness, reverse=True)
    return openings
