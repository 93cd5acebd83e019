"""
Sideline Saga Era Tables

Calendar-aware reference data: coaching salary bands, conference landscape,
postseason formats, bowl games, the tactical meta, and a one-line historical
backdrop for each season from 1995 on.

Usage:
    from sideline.era import era_for_year, postseason_format, generate_salary

    era_for_year(2007)                           # -> 2005
    postseason_format(2016)["type"]              # -> "CFP (4-Team)"
    generate_salary(2012, "Head Coach", "Blue Blood")   # -> "$3.8M/yr"
"""

from __future__ import annotations

import random
from typing import Dict, List, Optional, Tuple


# ──────────────────────────────────────────────
# SALARY BANDS (thousands of dollars / year)
# ──────────────────────────────────────────────

SALARY_BY_ERA: Dict[int, Dict[str, Tuple[int, int]]] = {
    1995: {"hc": (150, 500),    "coord": (75, 200),    "pos": (40, 100)},
    2000: {"hc": (300, 1200),   "coord": (150, 400),   "pos": (75, 200)},
    2005: {"hc": (500, 2500),   "coord": (250, 800),   "pos": (100, 350)},
    2010: {"hc": (800, 4000),   "coord": (400, 1500),  "pos": (150, 500)},
    2015: {"hc": (1200, 6000),  "coord": (600, 2500),  "pos": (200, 800)},
    2020: {"hc": (2000, 10000), "coord": (1000, 4000), "pos": (300, 1200)},
    2025: {"hc": (2500, 12000), "coord": (1500, 5000), "pos": (400, 1500)},
}

# Yearly drift applied between era anchors
ANNUAL_INFLATION = 0.03

SALARY_PRESTIGE_MULTIPLIERS = {
    "Blue Blood": 1.5,
    "Power Program": 1.2,
    "Rebuild Project": 0.8,
    "Rebuild": 0.8,
    "Bottom Feeder": 0.6,
}

_ERA_YEARS = sorted(SALARY_BY_ERA)


def era_for_year(year: int) -> int:
    """Most recent era anchor at or before ``year`` (clamped to the table)."""
    era = _ERA_YEARS[0]
    for anchor in _ERA_YEARS:
        if anchor <= year:
            era = anchor
    return era


def role_salary_key(role: str) -> str:
    r = role.lower()
    if "head" in r:
        return "hc"
    if "coord" in r or r in ("oc", "dc") or r.startswith("oc ") or r.startswith("dc "):
        return "coord"
    return "pos"


def salary_thousands(year: int, role: str, prestige_label: str) -> int:
    """Deterministic era-scaled salary in thousands.

    Midpoint of the era band, inflated by ANNUAL_INFLATION for each year
    past the anchor, times the prestige multiplier.
    """
    era = era_for_year(year)
    lo, hi = SALARY_BY_ERA[era][role_salary_key(role)]
    base = (lo + hi) / 2
    drift = (1 + ANNUAL_INFLATION) ** max(0, year - era)
    mult = SALARY_PRESTIGE_MULTIPLIERS.get(prestige_label, 1.0)
    return int(round(base * drift * mult))


def format_salary(thousands: int) -> str:
    if thousands >= 1000:
        return f"${thousands / 1000:.1f}M/yr"
    return f"${thousands}k/yr"


def generate_salary(year: int, role: str, prestige_label: str) -> str:
    return format_salary(salary_thousands(year, role, prestige_label))


def parse_salary(label: str) -> int:
    """Inverse of format_salary, in thousands.  Unparseable labels give 0."""
    text = label.replace("$", "").replace("/yr", "").strip()
    try:
        if text.endswith("M"):
            return int(round(float(text[:-1]) * 1000))
        if text.endswith("k"):
            return int(round(float(text[:-1])))
        return int(round(float(text)))
    except ValueError:
        return 0


# ──────────────────────────────────────────────
# POSTSEASON
# ──────────────────────────────────────────────

POSTSEASON_FORMATS = [
    {"start": 1990, "end": 1997, "type": "Bowl Alliance", "slots": 2,
     "desc": "No guaranteed title game; the polls pair #1 and #2 when bowl ties allow."},
    {"start": 1998, "end": 2013, "type": "BCS", "slots": 2,
     "desc": "#1 meets #2 in the BCS title game. Computer rankings carry real weight."},
    {"start": 2014, "end": 2023, "type": "CFP (4-Team)", "slots": 4,
     "desc": "A committee seeds four teams; semifinals rotate through the New Year's Six."},
    {"start": 2024, "end": 2099, "type": "CFP (12-Team)", "slots": 12,
     "desc": "Twelve teams, five conference-champion auto bids, campus games in round one."},
]


def postseason_format(year: int) -> dict:
    for fmt in POSTSEASON_FORMATS:
        if fmt["start"] <= year <= fmt["end"]:
            return fmt
    return POSTSEASON_FORMATS[0]


# (name, city, minimum prestige to be invited)
BOWL_GAMES: List[Tuple[str, str, int]] = [
    ("Rose Bowl", "Pasadena", 5),
    ("Sugar Bowl", "New Orleans", 4),
    ("Orange Bowl", "Miami", 4),
    ("Fiesta Bowl", "Glendale", 4),
    ("Cotton Bowl", "Arlington", 3),
    ("Citrus Bowl", "Orlando", 3),
    ("Gator Bowl", "Jacksonville", 3),
    ("Holiday Bowl", "San Diego", 2),
    ("Liberty Bowl", "Memphis", 2),
    ("Sun Bowl", "El Paso", 2),
    ("Independence Bowl", "Shreveport", 1),
    ("Las Vegas Bowl", "Las Vegas", 1),
    ("Motor City Bowl", "Detroit", 1),
    ("Humanitarian Bowl", "Boise", 1),
]


def pick_bowl(prestige: int, rng: random.Random, wins: int = 6) -> Tuple[str, str]:
    """Seeded bowl invite: the bigger the program and record, the bigger the bowl."""
    tier = min(5, max(1, prestige + (1 if wins >= 10 else 0) - (1 if wins <= 6 else 0)))
    # invited to anything at or below the tier, but bowls near the tier first
    near = [(name, city) for name, city, floor in BOWL_GAMES if tier - 1 <= floor <= tier]
    pool = near or [(name, city) for name, city, floor in BOWL_GAMES if floor <= tier]
    return rng.choice(pool)


# ──────────────────────────────────────────────
# TACTICAL META
# ──────────────────────────────────────────────

def tactical_meta(year: int) -> str:
    if year < 2000:
        return "I-formation and option football rule; the West Coast passing game is the modern edge."
    if year < 2008:
        return "The spread option is spreading fast. Tampa 2 and speed over size on defense."
    if year < 2014:
        return "Hurry-up no-huddle and the read option are the fashion. Nickel is the new base."
    if year < 2020:
        return "RPOs and the Air Raid are mainstream. Defenses answer with 3-3-5 and pattern-match coverage."
    return "Wide zone, simulated pressure, and portal-built depth. Quarterbacks must threaten with their legs."


# ──────────────────────────────────────────────
# HISTORICAL BACKDROP
# ──────────────────────────────────────────────

HISTORICAL_EVENTS: Dict[int, str] = {
    1995: "Nebraska steamrolls everyone. The Southwest Conference is playing its last season.",
    1996: "The Big 12 kicks off. Florida avenges its loss to Florida State in the Sugar Bowl.",
    1997: "A defensive back wins the Heisman and Michigan and Nebraska split the crown.",
    1998: "The BCS arrives and Tennessee claims its first title game.",
    1999: "Florida State goes wire-to-wire while Virginia Tech's freshman quarterback dazzles.",
    2000: "Oklahoma is back on top. The spread is still called a gimmick.",
    2001: "Miami fields a roster for the ages; the calendar is scrambled in September.",
    2002: "Ohio State stuns Miami in a double-overtime Fiesta Bowl.",
    2003: "LSU and USC split the title and the BCS takes heat from every direction.",
    2004: "Auburn runs the table and is left out of the title game.",
    2005: "Texas and USC meet in Pasadena in an instant classic.",
    2006: "Boise State's trick plays topple Oklahoma in the Fiesta Bowl.",
    2007: "Appalachian State beats Michigan and a two-loss LSU wins it all.",
    2008: "Florida's spread option takes the title after a famous locker-room promise.",
    2009: "Alabama beats Texas and a dynasty takes shape in Tuscaloosa.",
    2010: "Auburn rides a transfer quarterback to the title. Realignment rumors explode.",
    2011: "An all-SEC rematch for the title has fans demanding a playoff.",
    2012: "A redshirt freshman wins the Heisman. Texas A&M and Missouri join the SEC.",
    2013: "The Kick Six. Florida State ends the SEC's title streak.",
    2014: "The four-team College Football Playoff begins.",
    2015: "Alabama and Clemson meet for the first time with the title on the line.",
    2016: "Clemson gets its revenge on the final play.",
    2017: "UCF claims a title of its own and Alabama wins on 2nd-and-26.",
    2018: "The transfer portal opens. Clemson routs Alabama in the final.",
    2019: "LSU posts one of the best offensive seasons ever played.",
    2020: "A pandemic season: empty stadiums, canceled games, free eligibility.",
    2021: "Name, image and likeness rules take effect. Georgia breaks through.",
    2022: "Georgia repeats while TCU crashes the bracket.",
    2023: "Michigan wins amid a sign-stealing scandal. The Pac-12 comes apart.",
    2024: "The twelve-team playoff begins in a super-conference landscape.",
}


def historical_event(year: int) -> Optional[str]:
    return HISTORICAL_EVENTS.get(year)


# ──────────────────────────────────────────────
# COACH ARCHETYPES
# ──────────────────────────────────────────────

ARCHETYPES = [
    {
        "id": "offense_guru",
        "label": "The Offensive Whiz Kid",
        "description": "A young film junkie obsessed with passing concepts.",
        "start_role": "Offensive Graduate Assistant",
        "offensive_scheme": "West Coast",
        "defensive_scheme": "4-3 Base",
    },
    {
        "id": "defense_beast",
        "label": "The Iron Curtain",
        "description": "A former walk-on linebacker who believes in discipline and contact.",
        "start_role": "Defensive Graduate Assistant",
        "offensive_scheme": "Pro Style",
        "defensive_scheme": "46 Bear",
    },
    {
        "id": "legacy_son",
        "label": "The Legacy Hire",
        "description": "Raised by a famous coach. Doors open easily; expectations are crushing.",
        "start_role": "Quality Control Assistant",
        "offensive_scheme": "Pro Style",
        "defensive_scheme": "4-3 Base",
    },
    {
        "id": "analytics_nerd",
        "label": "The Moneyball Pioneer",
        "description": "An economics major who never played, bringing spreadsheets to the sideline.",
        "start_role": "Quality Control Assistant",
        "offensive_scheme": "Spread",
        "defensive_scheme": "Nickel",
    },
    {
        "id": "culture_guy",
        "label": "The Locker Room Leader",
        "description": "A special teams ace and motivator; culture first, X's and O's second.",
        "start_role": "Special Teams Graduate Assistant",
        "offensive_scheme": "Power Run",
        "defensive_scheme": "4-3 Base",
    },
]

ARCHETYPES_BY_ID = {a["id"]: a for a in ARCHETYPES}
