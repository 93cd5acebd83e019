"""
Sideline Saga Job Market

Job security scoring, the reputation-gated offer market, and the
negotiation rules for a single offer.

Negotiation rules (one round per negotiate action):
    - AD patience falls by the decay-table steps for the offer's prestige
      tier; it never rises
    - Zero patience rescinds the offer for good
    - Low patience on an offer already in talks becomes a Final Offer
    - otherwise the offer is Negotiating and the salary moves up 5%

Usage:
    from sideline.offers import generate_job_market, negotiate_offer

    offers = generate_job_market(header, rng)
    offer, line = negotiate_offer(offers[0])
"""

from __future__ import annotations

import logging
import random
from typing import Dict, List, Optional, Tuple

from sideline.era import format_salary, parse_salary, salary_thousands
from sideline.models import CareerLog, JobOffer, SaveHeader
from sideline.teams import (
    LEVELS,
    PRESTIGE_WIN_EXPECTATIONS,
    Team,
    generate_job_openings,
    get_team,
    prestige_from_label,
    prestige_label,
)

_log = logging.getLogger("sideline.offers")


# ──────────────────────────────────────────────
# JOB SECURITY
# ──────────────────────────────────────────────

SECURE = "Secure - Extension Talks"
STABLE = "Stable"
UNDER_REVIEW = "Under Review"
HOT_SEAT = "Hot Seat"
IMMINENT_FIRING = "Imminent Firing"

JOB_SECURITY_SCORES: Dict[str, int] = {
    SECURE: 85,
    STABLE: 70,
    UNDER_REVIEW: 45,
    HOT_SEAT: 25,
    IMMINENT_FIRING: 10,
}


def calculate_job_security(
    wins: int,
    losses: int,
    prestige: str,
    fan_sentiment: int,
    years_at_job: int,
) -> str:
    """
    Security label from performance against the program's expectation.

    score = (win% - expectation) + honeymoon + (fan - 50) / 200
    where the honeymoon is 0.1 through a coach's second year.
    """
    games = wins + losses
    win_pct = wins / games if games else 0.5
    tier = prestige_from_label(prestige, default=0)
    expectation = PRESTIGE_WIN_EXPECTATIONS.get(tier, 0.5)

    honeymoon = 0.1 if years_at_job <= 2 else 0.0
    score = (win_pct - expectation) + honeymoon + (fan_sentiment - 50) / 200

    if score > 0.15:
        return SECURE
    if score > 0.05:
        return STABLE
    if score > -0.10:
        return UNDER_REVIEW
    if score > -0.20:
        return HOT_SEAT
    return IMMINENT_FIRING


def job_security_score(label: str) -> int:
    """0-100 number for a security label.  Unknown labels read as 50."""
    for key, score in JOB_SECURITY_SCORES.items():
        if label == key or label.startswith(key.split(" - ")[0]):
            return score
    return 50


def missed_expectation(wins: int, losses: int, prestige: int) -> bool:
    games = wins + losses
    if games == 0:
        return False
    return wins / games < PRESTIGE_WIN_EXPECTATIONS.get(prestige, 0.5)


# ──────────────────────────────────────────────
# OFFERS
# ──────────────────────────────────────────────

ENTRY_ROLES = ["Graduate Assistant", "Quality Control", "Position Coach"]
COORDINATOR_ROLES = ["Offensive Coordinator", "Defensive Coordinator"]
HEAD_COACH = "Head Coach"

# Interview-only openings
INTERVIEW_ROLES = ("Graduate Assistant", "Quality Control")
INTERVIEW_ODDS = 0.25

PREMIUM_PERKS = ["Private Jet Access", "Recruiting Budget Increase", "Staff Salary Pool"]
BASE_PERKS = ["Base Perks"]

_PITCHES = [
    "We need someone to restore glory to {nickname} football.",
    "The {nickname} faithful are hungry for a winner.",
    "{name} is ready to compete at the highest level.",
    "We believe you're the right fit for {nickname} culture.",
    "This is a chance to build something special here.",
]


def starting_patience(prestige: int) -> str:
    if prestige >= 4:
        return "Low"
    if prestige >= 2:
        return "Medium"
    return "High"


def format_money(thousands: int) -> str:
    if thousands >= 1000:
        return f"${thousands / 1000:.1f}M"
    return f"${thousands}k"


def team_to_job_offer(
    team: Team,
    year: int,
    role: str,
    rng: random.Random,
    offer_type: str = "Offer",
) -> JobOffer:
    label = prestige_label(team.prestige)
    salary = salary_thousands(year, role, label)
    pitch = _PITCHES[rng.randrange(len(_PITCHES))]
    return JobOffer(
        id=f"offer_{team.team_id}_{year}",
        team=team.full_name,
        team_id=team.team_id,
        role=role,
        conference=team.conference_for_year(year),
        prestige=label,
        salary=format_salary(salary),
        contract_length=f"{3 + team.prestige} years",
        buyout=format_money(int(round(salary * 0.5))),
        pitch=pitch.format(name=team.name, nickname=team.nickname),
        perks=list(PREMIUM_PERKS if team.prestige >= 4 else BASE_PERKS),
        status="New",
        ad_patience=starting_patience(team.prestige),
        offer_type=offer_type,
    )


def reputation_score(header: SaveHeader) -> int:
    """0-100 standing in the industry: legacy plus how the last season went."""
    rep = 20 + header.legacy_score // 5
    if header.games_played():
        rep += round((header.win_pct() - 0.5) * 40)
    return max(0, min(100, rep))


STAGE_ORDER = ["entry", "coordinator", "head_coach"]


def role_stage(role: str) -> str:
    if role == HEAD_COACH:
        return "head_coach"
    if "Coordinator" in role:
        return "coordinator"
    return "entry"


def career_stage(header: SaveHeader, fired: bool = False) -> str:
    """
    Which rung of the ladder the market treats this coach as standing on.
    Unemployed coaches are judged by their last job, one step down when
    they were fired out of it.
    """
    if header.employed and not fired:
        return role_stage(header.role)
    if not header.career_history:
        return "entry"
    last: CareerLog = header.career_history[-1]
    stage = role_stage(last.role)
    if fired:
        stage = STAGE_ORDER[max(0, STAGE_ORDER.index(stage) - 1)]
    return stage


def _market_floor(header: SaveHeader) -> str:
    team = get_team(header.team_id) if header.team_id else None
    if team is None:
        return "fcs"
    # one level of slack below the current job
    return LEVELS[max(0, LEVELS.index(team.level) - 1)]


def generate_job_market(
    header: SaveHeader,
    rng: random.Random,
    count: Optional[int] = None,
    fired: bool = False,
    exclude: Tuple[str, ...] = (),
) -> List[JobOffer]:
    """
    3-4 offers for the coming carousel.

    Entry-level coaches see GA, Quality Control and Position Coach jobs at
    prestige 1-3.  Coordinators see coordinator jobs plus head jobs at
    programs well below their ceiling.  Head coaches see head jobs.
    """
    if count is None:
        count = rng.randint(3, 4)
    stage = career_stage(header, fired)
    reputation = reputation_score(header)
    year = header.year
    excluded = tuple(exclude) + ((header.team_id,) if header.team_id else ())

    if stage == "entry":
        openings = generate_job_openings(count, rng, "fcs", reputation=25,
                                         exclude=excluded)
    else:
        openings = generate_job_openings(count, rng, _market_floor(header),
                                         reputation=reputation, exclude=excluded)
    ceiling = reputation // 25 + 2

    offers = []
    for opening in openings:
        team = opening.team
        if stage == "entry":
            role = ENTRY_ROLES[rng.randrange(len(ENTRY_ROLES))]
        elif stage == "coordinator":
            if team.prestige <= max(1, ceiling - 2) and rng.random() < 0.4:
                role = HEAD_COACH
            else:
                role = COORDINATOR_ROLES[rng.randrange(len(COORDINATOR_ROLES))]
        else:
            role = HEAD_COACH

        offer_type = "Offer"
        if role in INTERVIEW_ROLES and rng.random() < INTERVIEW_ODDS:
            offer_type = "Interview"
        offers.append(team_to_job_offer(team, year, role, rng, offer_type))

    _log.debug(f"job market for {header.coach_name}: stage={stage} rep={reputation} "
               f"offers={[o.id for o in offers]}")
    return offers


# ──────────────────────────────────────────────
# NEGOTIATION
# ──────────────────────────────────────────────

# prestige tier -> patience steps lost per round
DEFAULT_PATIENCE_DECAY: Dict[int, int] = {1: 1, 2: 1, 3: 1, 4: 1, 5: 1}

COUNTER_RAISE = 0.05

_PATIENCE_ORDER = ["High", "Medium", "Low", "Zero"]


def decay_patience(patience: str, steps: int) -> str:
    idx = _PATIENCE_ORDER.index(patience) if patience in _PATIENCE_ORDER else 1
    return _PATIENCE_ORDER[min(len(_PATIENCE_ORDER) - 1, idx + max(0, steps))]


def find_offer(offers: List[JobOffer], offer_id: str) -> Optional[JobOffer]:
    for offer in offers:
        if offer.id == offer_id:
            return offer
    return None


def negotiate_offer(
    offer: JobOffer,
    decay_table: Optional[Dict[int, int]] = None,
) -> Tuple[JobOffer, str]:
    """
    Run one negotiation round.  Returns a new JobOffer and a resolution
    line; the offer passed in is not modified.
    """
    updated = JobOffer.from_dict(offer.to_dict())
    if updated.status == "Rescinded":
        return updated, f"The {offer.team} have stopped returning your calls."

    table = decay_table if decay_table is not None else DEFAULT_PATIENCE_DECAY
    tier = prestige_from_label(offer.prestige)
    updated.ad_patience = decay_patience(offer.ad_patience, table.get(tier, 1))
    updated.negotiation_rounds = offer.negotiation_rounds + 1

    if updated.ad_patience == "Zero":
        updated.status = "Rescinded"
        line = f"The {offer.team} pulled the offer. Their athletic director is done talking."
    elif updated.ad_patience == "Low" and offer.status in ("Negotiating", "Final Offer"):
        updated.status = "Final Offer"
        line = f"The {offer.team} say this is their final offer."
    else:
        updated.status = "Negotiating"
        raised = int(round(parse_salary(offer.salary) * (1 + COUNTER_RAISE)))
        updated.salary = format_salary(raised)
        line = f"Your agent pushed the {offer.team} to {updated.salary}. Talks continue."

    _log.debug(f"negotiate {offer.id}: {offer.ad_patience}->{updated.ad_patience} "
               f"status={updated.status}")
    return updated, line
