"""
Sideline Saga Turn Engine

Deterministic state machine: (prior TurnLog, action) -> next TurnLog.

Phase calendar:
    Offseason (Feb)  -> Preseason (Aug)
    Preseason        -> Regular Season (Sep, games 1-4)
    Regular Season   -> Regular Season (Oct 5-8, Nov 9-12)
                     -> Postseason (Dec, 6+ wins) or Carousel (Dec, bowl-ineligible)
    Postseason       -> Carousel (Jan of next year, one bowl game)
    Carousel         -> Offseason (Feb) on accept / decline-all

Resolution order for an action:
    1. rock_bottom_recovery from a game-over state
    2. negotiation (calendar frozen, only offers change)
    3. phase rules above
    4. narrative regeneration
    5. turn_id + 1

The prior turn is never modified.  Every draw comes from a stream derived
from (session seed, turn id), so replaying the same actions from the same
opening turn reproduces the same career byte for byte.

Usage:
    from sideline.turn_engine import new_career, advance_turn

    turn = new_career(seed=42, coach_name="Pat Doyle")
    turn = advance_turn(turn, f"offer_accept_{turn.job_offers[0].id}", "Take it")
    turn = advance_turn(turn, "advance", "Continue")
"""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict, List, Optional, Tuple

from sideline.corpus import ChoiceTemplate, find_choice
from sideline.era import ARCHETYPES_BY_ID, generate_salary, pick_bowl, postseason_format
from sideline.errors import RecordInvariantError, SidelineError
from sideline.models import (
    CAROUSEL,
    OFFSEASON,
    PHASE_TRANSITIONS,
    POSTSEASON,
    PRESEASON,
    REGULAR_SEASON,
    CareerLog,
    Connection,
    Financials,
    GameResult,
    JobOffer,
    SaveHeader,
    SeasonSummary,
    TeamStats,
    TurnLog,
    drift_loyalty,
    format_date,
    format_record,
    network_upsert,
    parse_record,
)
from sideline.names import generate_coach_name
from sideline.narrative import NarrativeContext, generate_narrative, season_summary_line
from sideline.offers import (
    HEAD_COACH,
    HOT_SEAT,
    IMMINENT_FIRING,
    SECURE,
    STABLE,
    STAGE_ORDER,
    UNDER_REVIEW,
    calculate_job_security,
    find_offer,
    generate_job_market,
    missed_expectation,
    negotiate_offer,
    role_stage,
)
from sideline.rng import SeededRandom
from sideline.roster import (
    TeamRatings,
    calculate_team_ratings,
    class_rank_from_stars,
    generate_roster,
    generate_staff,
    progress_roster_year,
    staff_chemistry,
)
from sideline.teams import (
    ALL_TEAMS,
    PRESTIGE_WIN_EXPECTATIONS,
    Team,
    conference_teams_in_year,
    get_team,
    prestige_from_label,
    prestige_label,
    string_hash,
    teams_by_level,
)

_log = logging.getLogger("sideline.turn_engine")


# ──────────────────────────────────────────────
# TUNABLES
# ──────────────────────────────────────────────

GAMES_PER_SEASON = 12
GAMES_PER_BLOCK = 4
BOWL_ELIGIBLE_WINS = 6
MAX_SEASON_GAMES = GAMES_PER_SEASON + 1
NON_CONFERENCE_GAMES = 4
INTERVIEW_SUCCESS = 0.80

LEGACY_PER_WIN = 3
LEGACY_WINNING_SEASON = 10
LEGACY_BOWL_WIN = 25
LEGACY_CONFERENCE_TITLE = 50

FALLBACK_OPPONENTS = [
    "State", "Tech", "A&M", "Tigers", "Bulldogs", "Bears", "Wildcats",
    "Spartans", "Wolverines", "Buckeyes", "Longhorns", "Sooners",
    "Ducks", "Trojans", "Irish", "Seminoles", "Hurricanes", "Gators",
]

RECOVERY_ACTION = "rock_bottom_recovery"
DECLINE_ALL_ACTION = "decline_all_offers"
GENERIC_ACTIONS = ("advance", "continue")
ACCEPT_PREFIX = "offer_accept_"
DECLINE_PREFIX = "offer_decline_"
NEGOTIATE_PREFIX = "offer_negotiate_"

PLACEHOLDER_TEAM = "Division III Placeholder"

_BOARD_FEEDBACK = {
    SECURE: "The board is ready to talk about an extension.",
    STABLE: "The board is satisfied with the direction of the program.",
    UNDER_REVIEW: "The board expects clear improvement next season.",
    HOT_SEAT: "The board's patience is running out.",
    IMMINENT_FIRING: "The board has seen enough.",
}

_SEED_MASK = 0x7FFFFFFF


def _stream(seed: int, salt: str, year: int) -> SeededRandom:
    """Side stream keyed by (seed, salt, year), independent of the turn stream."""
    return SeededRandom.derive(seed ^ (string_hash(salt) & _SEED_MASK), year)


def _clamp(value: int, lo: int = 0, hi: int = 100) -> int:
    return max(lo, min(hi, value))


def _ordinal(n: int) -> str:
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


# ──────────────────────────────────────────────
# PROGRAM SNAPSHOTS
# ──────────────────────────────────────────────

@dataclass(frozen=True)
class ProgramSnapshot:
    """Read-only view of a program's roster for one season."""
    ratings: TeamRatings
    featured_player: Tuple[str, str]
    qb_situation: str
    top_signee: str
    class_rank: int


def _qb_situation(ovr: int) -> str:
    if ovr >= 80:
        return "Established Starter"
    if ovr >= 70:
        return "Solid Starter"
    if ovr >= 60:
        return "Developing"
    return "Unsettled"


@lru_cache(maxsize=128)
def program_snapshot(team_id: str, seed: int, year: int) -> Optional[ProgramSnapshot]:
    """
    Seeded roster for ``team_id`` going into ``year``: last year's roster
    aged one offseason, with its incoming class.  Cached; never mutate.
    """
    team = get_team(team_id)
    if team is None:
        return None
    rng = _stream(seed, f"roster:{team_id}", year)
    roster = generate_roster(team, rng, year - 1)
    report = progress_roster_year(roster, team, rng, year)
    ratings = calculate_team_ratings(roster)

    chart = roster.depth_chart()
    starters = [p for players in chart.values() for p in players]
    star = max(starters, key=lambda p: (p.overall, p.player_id))
    qbs = chart.get("QB") or []

    top_signee = ""
    class_rank = 0
    if report.signed:
        best = max(report.signed, key=lambda p: (p.stars or 0, p.overall, p.player_id))
        if best.stars:
            top_signee = f"{best.full_name} ({best.stars}-star {best.position})"
        else:
            top_signee = f"{best.full_name} ({best.position})"
        if team.level != "nfl":
            class_rank = class_rank_from_stars(report.signed, team.prestige)

    return ProgramSnapshot(
        ratings=ratings,
        featured_player=(star.full_name, star.position),
        qb_situation=_qb_situation(qbs[0].overall if qbs else 50),
        top_signee=top_signee,
        class_rank=class_rank,
    )


def season_opponents(team: Team, year: int, seed: int) -> List[Team]:
    """Conference slate for ``year`` followed by seeded non-conference games."""
    conference = team.conference_for_year(year)
    league = [t for t in conference_teams_in_year(conference, year) if t.team_id != team.team_id]
    others = [t for t in teams_by_level(team.level)
              if t.team_id != team.team_id and t.conference_for_year(year) != conference]
    rng = _stream(seed, f"schedule:{team.team_id}", year)
    rng.shuffle(others)
    return league + others[:NON_CONFERENCE_GAMES]


def bowl_matchup(header: SaveHeader) -> Tuple[str, str, Optional[Team]]:
    """(bowl, city, opponent) for the season in ``header``.  Same answer every call."""
    team = get_team(header.team_id) if header.team_id else None
    prestige = team.prestige if team else 1
    rng = _stream(header.seed, f"bowl:{header.team_id or header.team}", header.year)

    if team is not None and team.level == "nfl":
        name, city = "Wild Card Round", team.location
    else:
        name, city = pick_bowl(prestige, rng, header.wins)

    level = team.level if team else "fcs"
    candidates = sorted(
        (t for t in ALL_TEAMS
         if t.level == level and t.team_id != header.team_id and abs(t.prestige - prestige) <= 1),
        key=lambda t: t.team_id,
    )
    opponent = rng.choice(candidates) if candidates else None
    return name, city, opponent


# ──────────────────────────────────────────────
# GAME MODEL
# ──────────────────────────────────────────────

def _team_prestige(header: SaveHeader) -> int:
    team = get_team(header.team_id) if header.team_id else None
    if team is not None:
        return team.prestige
    return prestige_from_label(header.stats.prestige, default=1)


def _era_score_mod(year: int) -> float:
    if year >= 2015:
        return 1.15
    if year >= 2005:
        return 1.05
    return 1.0


def _opponent_rating(prestige: int) -> int:
    return 45 + prestige * 8


def _win_probability(base: float, our_rating: float, opp_prestige: int, prestige: int) -> float:
    diff = our_rating - _opponent_rating(opp_prestige)
    strength = (1 / (1 + math.exp(-diff / 8)) - 0.5) * 0.5
    p = base + strength + (prestige - opp_prestige) * 0.08
    return max(0.1, min(0.9, p))


def _score_game(won: bool, year: int, rng: random.Random) -> Tuple[int, int]:
    mod = _era_score_mod(year)
    ours = _clamp(int(rng.random() * 28 * mod) + 14, 7, 63)
    if won:
        theirs = int(rng.random() * (ours - 3)) + 7
        if theirs >= ours:
            theirs = max(0, ours - 1)
    else:
        theirs = ours + int(rng.random() * 14) + 3
    return ours, theirs


def _base_win_pct(header: SaveHeader, prestige: int) -> float:
    w, l, t = parse_record(header.season_record)
    base = PRESTIGE_WIN_EXPECTATIONS.get(prestige, 0.5)
    played = w + l + t
    if played:
        base = (base + w / played) / 2
    return base + (header.fan_sentiment - 50) / 500


def _our_rating(header: SaveHeader, prestige: int) -> float:
    snapshot = program_snapshot(header.team_id, header.seed, header.year) if header.team_id else None
    if snapshot is None:
        return _opponent_rating(prestige)
    return snapshot.ratings.overall


def _record_game(header: SaveHeader, game: GameResult, prestige: int, rng: random.Random):
    """Fold one result into the header: record, streak, fans, legacy, poll."""
    w, l, t = parse_record(header.season_record)
    rank = header.stats.ap_rank
    if game.won:
        w += 1
        header.streak = header.streak + 1 if header.streak > 0 else 1
        header.career_wins += 1
        header.legacy_score += LEGACY_PER_WIN
        upset = game.opponent_prestige - prestige >= 2
        header.fan_sentiment = _clamp(header.fan_sentiment + (4 if upset else 2))
        if rank:
            rank = max(1, rank - rng.randint(1, 3))
        elif w + l + t >= GAMES_PER_BLOCK and w / (w + l + t) >= 0.75:
            rank = 25
    else:
        l += 1
        header.streak = header.streak - 1 if header.streak < 0 else -1
        header.career_losses += 1
        upset = prestige - game.opponent_prestige >= 2
        header.fan_sentiment = _clamp(header.fan_sentiment - (4 if upset else 2))
        if rank:
            rank += rng.randint(3, 8)
            if rank > 25:
                rank = 0
    header.stats.ap_rank = rank
    header.season_record = format_record(w, l, t)
    header.last_game = game


def _unit_rank(rating: int, field_size: int) -> int:
    return max(1, min(field_size, round((90 - rating) * field_size / 50)))


def _conference_place(win_pct: float) -> int:
    if win_pct >= 0.85:
        return 1
    return 2 + int((0.85 - win_pct) * 10)


def _refresh_standing(header: SaveHeader):
    """Unit ranks, conference place and job security after games."""
    team = get_team(header.team_id) if header.team_id else None
    snapshot = program_snapshot(header.team_id, header.seed, header.year) if team else None
    if snapshot is not None:
        field_size = 32 if team.level == "nfl" else 130
        header.stats.off_rank = _unit_rank(snapshot.ratings.offense, field_size)
        header.stats.def_rank = _unit_rank(snapshot.ratings.defense, field_size)
    if header.games_played():
        header.stats.conf_standing = _ordinal(_conference_place(header.win_pct()))
        w, l, _ = parse_record(header.season_record)
        header.job_security = calculate_job_security(
            w, l, header.stats.prestige, header.fan_sentiment, header.years_at_job)


def simulate_game_block(header: SaveHeader, games: int, rng: random.Random) -> List[GameResult]:
    """
    Play ``games`` games for the header's team.  Mutates ``header`` in place
    and returns the results in order.
    """
    prestige = _team_prestige(header)
    team = get_team(header.team_id) if header.team_id else None
    year = header.year
    base = _base_win_pct(header, prestige)
    our_rating = _our_rating(header, prestige)
    schedule = season_opponents(team, year, header.seed) if team else []
    played = header.games_played()

    results = []
    for i in range(games):
        index = played + i
        if schedule:
            opp = schedule[index % len(schedule)]
            opponent, opp_prestige = opp.name, opp.prestige
        else:
            opponent = FALLBACK_OPPONENTS[rng.randrange(len(FALLBACK_OPPONENTS))]
            opp_prestige = prestige
        won = rng.random() < _win_probability(base, our_rating, opp_prestige, prestige)
        ours, theirs = _score_game(won, year, rng)
        game = GameResult(
            week=index + 1,
            opponent=opponent,
            our_score=ours,
            their_score=theirs,
            opponent_prestige=opp_prestige,
            rank_before=header.stats.ap_rank,
        )
        _record_game(header, game, prestige, rng)
        results.append(game)

    _refresh_standing(header)
    return results


def check_record_invariant(header: SaveHeader):
    """Raise RecordInvariantError when the record cannot belong to this phase."""
    games = header.games_played()
    phase = header.timeline_phase
    if phase == REGULAR_SEASON and games > GAMES_PER_SEASON:
        raise RecordInvariantError(
            f"{header.season_record} is {games} games; the regular season stops at {GAMES_PER_SEASON}")
    if games > MAX_SEASON_GAMES:
        raise RecordInvariantError(f"{header.season_record} exceeds {MAX_SEASON_GAMES} games")
    if phase in (PRESEASON, OFFSEASON) and games:
        raise RecordInvariantError(f"{phase} must start from 0-0, found {header.season_record}")
    if header.wins < 0 or header.losses < 0:
        raise RecordInvariantError(f"negative record {header.season_record}")


# ──────────────────────────────────────────────
# TURN STATE
# ──────────────────────────────────────────────

@dataclass
class _Step:
    """Working state for one turn.  Owns a private copy of the header."""
    header: SaveHeader
    offers: List[JobOffer]
    summary: Optional[SeasonSummary]
    game_over: bool
    games: List[GameResult] = field(default_factory=list)
    opponent: str = ""
    bowl: Tuple[str, str] = ("", "")
    fired: bool = False
    new_hire: bool = False
    former_team_id: str = ""
    former_team_name: str = ""
    events: List[str] = field(default_factory=list)
    staff_notes: List[str] = field(default_factory=list)


def classify_action(action_id: str) -> str:
    """recovery / offer / advance / choice / custom."""
    if action_id == RECOVERY_ACTION:
        return "recovery"
    if action_id == DECLINE_ALL_ACTION or action_id.startswith(
            (ACCEPT_PREFIX, DECLINE_PREFIX, NEGOTIATE_PREFIX)):
        return "offer"
    if action_id in GENERIC_ACTIONS:
        return "advance"
    if find_choice(action_id) is not None:
        return "choice"
    return "custom"


def _season_year(header: SaveHeader) -> int:
    """The football season a winter date belongs to."""
    if header.month in ("January", "February"):
        return header.year - 1
    return header.year


def _to_offseason(header: SaveHeader):
    """
    Carousel exit.  A winter carousel lands in February after the season,
    with a birthday when it crosses New Year; an opening carousel in the
    spring or summer keeps its month.
    """
    month, year = header.month, header.year
    if month == "December":
        header.age += 1
        header.date = format_date("February", year + 1)
    elif month == "January":
        header.date = format_date("February", year)


def _recovery_date(header: SaveHeader):
    """Recovery lands on the next February, whatever phase the career died in."""
    if header.month in ("January", "February"):
        header.date = format_date("February", header.year)
    else:
        header.age += 1
        header.date = format_date("February", header.year + 1)


def _reset_season(header: SaveHeader):
    header.season_record = "0-0"
    header.streak = 0
    header.last_game = None


# ──────────────────────────────────────────────
# RECOVERY
# ──────────────────────────────────────────────

def recovery_team(seed: int) -> Optional[Team]:
    pool = sorted((t for t in teams_by_level("fcs") if t.prestige == 1), key=lambda t: t.team_id)
    if not pool:
        return None
    return pool[seed % len(pool)]


def _recover(step: _Step):
    h = step.header
    h.career_history.append(
        CareerLog(_season_year(h), "Out of Coaching", "Job Seeker", "0-0", "Wilderness Years"))

    team = recovery_team(h.seed)
    _recovery_date(h)
    if team is not None:
        h.team, h.team_id = team.name, team.team_id
        h.conference = team.conference_for_year(h.year)
        label = prestige_label(team.prestige)
    else:
        h.team, h.team_id, h.conference = PLACEHOLDER_TEAM, "", "Division III"
        label = prestige_label(1)

    h.role = "Position Coach"
    h.timeline_phase = OFFSEASON
    _reset_season(h)
    h.last_season_record = ""
    h.years_at_job = 0
    h.fan_sentiment = 50
    h.job_security = STABLE
    h.stats = TeamStats(prestige=label)
    h.financials = Financials(generate_salary(h.year, h.role, label), 1, "$0k")
    h.open_threads = ["Rebuild a reputation from the bottom"]

    step.game_over = False
    step.offers = []
    step.summary = None
    step.new_hire = True
    step.events.append(f"You took the only job on the table: Position Coach at {h.team}.")


# ──────────────────────────────────────────────
# NEGOTIATION
# ──────────────────────────────────────────────

def _in_negotiation(step: _Step, action_id: str) -> bool:
    if action_id.startswith(NEGOTIATE_PREFIX):
        return True
    if action_id == DECLINE_ALL_ACTION or action_id.startswith((ACCEPT_PREFIX, DECLINE_PREFIX)):
        return False
    return any(o.status == "Negotiating" for o in step.offers)


def _replace_offer(offers: List[JobOffer], updated: JobOffer) -> List[JobOffer]:
    return [updated if o.id == updated.id else o for o in offers]


def _negotiate(step: _Step, action_id: str, decay: Optional[Dict[int, int]]):
    if action_id.startswith(NEGOTIATE_PREFIX):
        offer = find_offer(step.offers, action_id[len(NEGOTIATE_PREFIX):])
        if offer is None:
            step.events.append("There is no such offer to negotiate.")
            return
        updated, line = negotiate_offer(offer, decay)
        step.offers = _replace_offer(step.offers, updated)
        step.events.append(line)
        return

    # anything else while talks are open costs each open negotiation a round
    for offer in list(step.offers):
        if offer.status == "Negotiating":
            updated, line = negotiate_offer(offer, decay)
            step.offers = _replace_offer(step.offers, updated)
            step.events.append(line)


# ──────────────────────────────────────────────
# PHASE RULES
# ──────────────────────────────────────────────

def _start_preseason(step: _Step, rng: random.Random):
    h = step.header
    h.date = format_date("August", h.year)
    h.timeline_phase = PRESEASON
    _reset_season(h)
    step.offers = []
    step.summary = None

    if h.stats.prestige == "Blue Blood":
        h.stats.ap_rank = rng.randint(1, 10)
    elif h.stats.prestige == "Power Program":
        h.stats.ap_rank = rng.randint(8, 25)
    else:
        h.stats.ap_rank = 0
    h.stats.conf_standing = "-"

    team = get_team(h.team_id) if h.team_id else None
    if team is not None:
        snapshot = program_snapshot(team.team_id, h.seed, h.year)
        h.qb_situation = snapshot.qb_situation
        schedule = season_opponents(team, h.year, h.seed)
        if schedule:
            step.opponent = schedule[0].name
        _refresh_standing(h)


def _kickoff(step: _Step, rng: random.Random):
    h = step.header
    h.date = format_date("September", h.year)
    h.timeline_phase = REGULAR_SEASON
    step.games = simulate_game_block(h, max(0, GAMES_PER_BLOCK - h.games_played()), rng)


def _regular_season(step: _Step, rng: random.Random):
    h = step.header
    played = h.games_played()
    if played < GAMES_PER_BLOCK:
        _log.warning(f"repairing {h.season_record} in Regular Season to {GAMES_PER_BLOCK} games "
                     f"(seed={h.seed})")
        h.date = format_date("September", h.year)
        step.games = simulate_game_block(h, GAMES_PER_BLOCK - played, rng)
    elif played < 2 * GAMES_PER_BLOCK:
        h.date = format_date("October", h.year)
        step.games = simulate_game_block(h, 2 * GAMES_PER_BLOCK - played, rng)
    elif played < GAMES_PER_SEASON:
        h.date = format_date("November", h.year)
        step.games = simulate_game_block(h, GAMES_PER_SEASON - played, rng)
    else:
        _end_regular_season(step, rng)


def _end_regular_season(step: _Step, rng: random.Random):
    h = step.header
    h.date = format_date("December", h.year)
    if h.wins >= BOWL_ELIGIBLE_WINS:
        h.timeline_phase = POSTSEASON
        name, city, opponent = bowl_matchup(h)
        step.bowl = (name, city)
        if opponent is not None:
            step.opponent = opponent.name
        step.events.append(f"The {h.team} finished {h.season_record} and accepted a bid to the {name}.")
        return
    step.events.append(f"A {h.season_record} finish means no bowl game for the {h.team}.")
    _enter_carousel(step, rng, bowl_played=False, bowl_won=False)


def _bowl_game(step: _Step, rng: random.Random):
    h = step.header
    name, city, opponent = bowl_matchup(h)
    prestige = _team_prestige(h)
    base = _base_win_pct(h, prestige)
    our_rating = _our_rating(h, prestige)

    if opponent is not None:
        opp_name, opp_prestige = opponent.name, opponent.prestige
    else:
        opp_name = FALLBACK_OPPONENTS[rng.randrange(len(FALLBACK_OPPONENTS))]
        opp_prestige = prestige
    won = rng.random() < _win_probability(base, our_rating, opp_prestige, prestige)
    ours, theirs = _score_game(won, h.year, rng)
    game = GameResult(
        week=h.games_played() + 1,
        opponent=opp_name,
        our_score=ours,
        their_score=theirs,
        opponent_prestige=opp_prestige,
        bowl=name,
        rank_before=h.stats.ap_rank,
    )
    _record_game(h, game, prestige, rng)
    if game.won:
        h.legacy_score += LEGACY_BOWL_WIN
    _refresh_standing(h)

    h.date = format_date("January", h.year + 1)
    h.age += 1
    step.games = [game]
    step.bowl = (name, city)
    _enter_carousel(step, rng, bowl_played=True, bowl_won=game.won)


def _season_summary(step: _Step, bowl_played: bool, bowl_won: bool) -> SeasonSummary:
    """Close the books on a season and apply its legacy bonuses."""
    h = step.header
    pct = h.win_pct()
    title = h.games_played() > 0 and _conference_place(pct) == 1
    last = h.last_game

    if bowl_won and last is not None and 0 < last.rank_before <= 2:
        accomplishment = "National Champions"
    elif title:
        accomplishment = "Conference Champions"
    elif bowl_won:
        accomplishment = f"{last.bowl} Champions" if last and last.bowl else "Bowl Champions"
    elif bowl_played:
        accomplishment = "Bowl Appearance"
    elif pct > 0.5:
        accomplishment = "Winning Season"
    else:
        accomplishment = "Losing Season"

    if pct > 0.5:
        h.legacy_score += LEGACY_WINNING_SEASON
    if title:
        h.legacy_score += LEGACY_CONFERENCE_TITLE
        h.stats.conf_standing = "1st"
        if "Conference Champion" not in h.reputation_tags:
            h.reputation_tags.append("Conference Champion")

    key_stats = [
        f"Final AP: {h.stats.ap_label}",
        f"Offense ranked #{h.stats.off_rank}" if h.stats.off_rank else "Offense unranked",
        f"Defense ranked #{h.stats.def_rank}" if h.stats.def_rank else "Defense unranked",
        f"Fan sentiment {h.fan_sentiment}/100",
    ]

    class_rank, top_signee = 0, ""
    season = _season_year(h)
    if h.team_id:
        snapshot = program_snapshot(h.team_id, h.seed, season + 1)
        if snapshot is not None:
            class_rank, top_signee = snapshot.class_rank, snapshot.top_signee

    return SeasonSummary(
        year=season,
        final_record=h.season_record,
        accomplishment=accomplishment,
        key_stats=key_stats,
        board_feedback=_BOARD_FEEDBACK.get(h.job_security, ""),
        recruiting_class_rank=class_rank,
        top_signee=top_signee,
    )


def _fire(step: _Step):
    h = step.header
    step.fired = True
    step.former_team_id, step.former_team_name = h.team_id, h.team
    h.career_history.append(CareerLog(_season_year(h), h.team, h.role, h.season_record, "Fired"))

    h.team, h.team_id, h.conference = "Unemployed", "", ""
    h.role = "Job Seeker"
    h.job_security = "Unemployed"
    h.years_at_job = 0
    h.financials = Financials()
    h.network = drift_loyalty(h.network)
    h.open_threads = ["Find a job before the carousel stops"] + h.open_threads[:2]
    if step.summary is not None:
        step.summary.board_feedback = "The board decided to make a change."
    step.events.append(f"The {step.former_team_name} fired you after a {h.season_record} season.")


def _enter_carousel(step: _Step, rng: random.Random, bowl_played: bool, bowl_won: bool):
    h = step.header
    h.timeline_phase = CAROUSEL
    w, l, _ = parse_record(h.season_record)
    if h.employed:
        h.job_security = calculate_job_security(
            w, l, h.stats.prestige, h.fan_sentiment, h.years_at_job)
    step.summary = _season_summary(step, bowl_played, bowl_won)

    fired = False
    if h.employed:
        fired = h.job_security == IMMINENT_FIRING
        if not bowl_played and h.years_at_job >= 2:
            fired = fired or missed_expectation(w, l, _team_prestige(h))
    if fired:
        _fire(step)

    exclude = (step.former_team_id,) if step.former_team_id else ()
    step.offers = generate_job_market(h, rng, fired=fired, exclude=exclude)


# ──────────────────────────────────────────────
# CAROUSEL
# ──────────────────────────────────────────────

def _live_offers(offers: List[JobOffer]) -> List[JobOffer]:
    return [o for o in offers if o.live]


def _hire(step: _Step, offer: JobOffer, rng: random.Random):
    h = step.header
    if h.employed:
        rising = STAGE_ORDER.index(role_stage(offer.role)) > STAGE_ORDER.index(role_stage(h.role))
        result = "Promoted" if rising else "Hired Away"
        h.career_history.append(CareerLog(_season_year(h), h.team, h.role, h.season_record, result))

    team = get_team(offer.team_id)
    _to_offseason(h)
    h.team = team.name if team else offer.team
    h.team_id = offer.team_id
    h.conference = offer.conference
    h.role = offer.role
    h.timeline_phase = OFFSEASON
    _reset_season(h)
    h.last_season_record = ""
    h.years_at_job = 0
    h.fan_sentiment = 50
    h.job_security = STABLE
    h.stats = TeamStats(prestige=offer.prestige)
    years = int(offer.contract_length.split()[0]) if offer.contract_length else 0
    h.financials = Financials(offer.salary, years, offer.buyout)
    h.open_threads = [f"Earn the trust of the {h.team} locker room"] + [
        t for t in h.open_threads if not t.startswith("Find a job")][:2]

    prestige = team.prestige if team else prestige_from_label(offer.prestige)
    if offer.role == HEAD_COACH:
        staff = generate_staff(prestige, rng)
        for member in staff[:2]:
            h.network = network_upsert(
                h.network, Connection(member.name, "Staff", f"{member.role}, {h.team}", member.loyalty))
        h.offensive_scheme = staff[0].style
        h.defensive_scheme = staff[1].style
        step.staff_notes.append(f"Staff chemistry: {staff_chemistry(staff)}/100.")
    else:
        boss = generate_coach_name(rng)
        h.network = network_upsert(
            h.network, Connection(boss, "Boss", f"Head Coach, {h.team}", "Medium"))

    step.offers = []
    step.summary = None
    step.new_hire = True
    step.events.append(f"You accepted the {offer.role} job with the {offer.team}.")


def _accept(step: _Step, offer_id: str, rng: random.Random):
    offer = find_offer(step.offers, offer_id)
    if offer is None or not offer.live:
        step.events.append("That offer is no longer on the table.")
        return
    if offer.offer_type == "Interview" and rng.random() >= INTERVIEW_SUCCESS:
        step.offers = [o for o in step.offers if o.id != offer.id]
        step.events.append(f"The interview with the {offer.team} did not land. They went another way.")
        if not _live_offers(step.offers):
            _decline_all(step)
        return
    _hire(step, offer, rng)


def _decline_all(step: _Step):
    h = step.header
    step.offers = []
    if not h.employed:
        step.game_over = True
        step.events.append("With no job and no offers left, the phone stops ringing.")
        return
    _to_offseason(h)
    h.timeline_phase = OFFSEASON
    h.last_season_record = h.season_record
    _reset_season(h)
    h.years_at_job += 1
    h.financials.contract_years = max(0, h.financials.contract_years - 1)
    step.summary = None
    step.events.append(f"You stayed with the {h.team}.")


def _decline(step: _Step, offer_id: str):
    offer = find_offer(step.offers, offer_id)
    if offer is None:
        step.events.append("That offer is no longer on the table.")
        return
    step.offers = [o for o in step.offers if o.id != offer_id]
    step.events.append(f"You turned down the {offer.team}.")
    if not _live_offers(step.offers):
        _decline_all(step)


def _carousel(step: _Step, action_id: str, rng: random.Random):
    if action_id.startswith(ACCEPT_PREFIX):
        _accept(step, action_id[len(ACCEPT_PREFIX):], rng)
    elif action_id.startswith(DECLINE_PREFIX):
        _decline(step, action_id[len(DECLINE_PREFIX):])
    elif action_id == DECLINE_ALL_ACTION:
        _decline_all(step)
    elif not _live_offers(step.offers):
        _decline_all(step)


def _apply_choice_effects(header: SaveHeader, choice: ChoiceTemplate):
    delta = choice.effects.get("fan_support", 0) + choice.effects.get("media_perception", 0) // 2
    header.fan_sentiment = _clamp(header.fan_sentiment + delta)


def _apply_phase_rules(step: _Step, action_id: str, kind: str, rng: random.Random):
    phase = step.header.timeline_phase
    if kind == "offer" and phase != CAROUSEL:
        step.events.append("There are no offers on the table right now.")
        return
    if phase == OFFSEASON:
        _start_preseason(step, rng)
    elif phase == PRESEASON:
        _kickoff(step, rng)
    elif phase == REGULAR_SEASON:
        _regular_season(step, rng)
    elif phase == POSTSEASON:
        _bowl_game(step, rng)
    elif phase == CAROUSEL:
        _carousel(step, action_id, rng)


def _check_transition(before: str, after: str, recovered: bool = False):
    # recovery jumps to Offseason from any phase
    if recovered:
        return
    # a turn that changed nothing (stray offer action, game over) may stay put
    if after != before and after not in PHASE_TRANSITIONS.get(before, ()):
        raise SidelineError(f"illegal phase transition {before} -> {after}")


# ──────────────────────────────────────────────
# NARRATIVE
# ──────────────────────────────────────────────

def _narrative_turn(
    step: _Step,
    turn_id: int,
    rng: random.Random,
    previous: Optional[Dict[str, str]],
    action_id: Optional[str],
    action_text: str = "",
    kind: str = "advance",
    custom_context: Optional[str] = None,
) -> TurnLog:
    h = step.header
    featured = ("", "")
    if h.team_id:
        snapshot = program_snapshot(h.team_id, h.seed, _season_year(h))
        if snapshot is not None:
            featured = snapshot.featured_player

    notes = list(step.staff_notes)
    if step.games and h.employed:
        notes.append(season_summary_line(h))

    ctx = NarrativeContext(
        header=h,
        game=step.games[-1] if step.games else None,
        opponent=step.opponent,
        bowl=step.bowl,
        featured_player=featured,
        fired=step.fired,
        new_hire=step.new_hire,
        previous_record=h.last_season_record,
        playoff_slots=postseason_format(_season_year(h))["slots"],
        former_team_id=step.former_team_id,
        former_team_name=step.former_team_name,
        action_id=action_id,
        action_text=action_text,
        action_kind=kind,
        custom_context=custom_context,
        choice=find_choice(action_id) if kind == "choice" else None,
        events=list(step.events),
        extra_staff_notes=notes,
        game_over=step.game_over,
    )
    result = generate_narrative(ctx, rng, previous)

    return TurnLog(
        turn_id=turn_id,
        header=h,
        media_headline=result.headline,
        media_buzz=result.buzz,
        staff_notes=result.staff_notes,
        season_summary=step.summary if h.timeline_phase == CAROUSEL else None,
        job_offers=list(step.offers),
        scene_title=result.scene_title,
        scene_description=result.scene_description,
        resolution=result.resolution,
        choices=result.choices,
        ticker=result.ticker,
        game_over=step.game_over,
        template_ids=result.template_ids,
    )


# ──────────────────────────────────────────────
# ENTRY POINTS
# ──────────────────────────────────────────────

def advance_turn(
    prior: TurnLog,
    action_id: str,
    action_text: str = "",
    custom_context: Optional[str] = None,
    *,
    rng: Optional[random.Random] = None,
    patience_decay: Optional[Dict[int, int]] = None,
) -> TurnLog:
    """Compute the next turn.  ``prior`` is left untouched."""
    work = prior.copy()
    header = work.header
    if rng is None:
        rng = SeededRandom.derive(header.seed, prior.turn_id + 1)

    step = _Step(
        header=header,
        offers=list(work.job_offers),
        summary=work.season_summary,
        game_over=work.game_over,
    )
    kind = classify_action(action_id)
    before = header.timeline_phase
    recovered = kind == "recovery" and step.game_over

    if recovered:
        _recover(step)
    elif step.game_over:
        step.events.append("There is nothing left on the table but a fresh start.")
    else:
        if kind == "recovery":
            kind = "custom"
        if before == CAROUSEL and _in_negotiation(step, action_id):
            _negotiate(step, action_id, patience_decay)
        else:
            if kind == "choice":
                _apply_choice_effects(header, find_choice(action_id))
            _apply_phase_rules(step, action_id, kind, rng)

    _check_transition(before, header.timeline_phase, recovered)
    check_record_invariant(header)
    stayed = header.timeline_phase == before and not recovered
    header.phase_turn = header.phase_turn + 1 if stayed else 0

    _log.debug(f"turn {prior.turn_id + 1}: {action_id} {before} -> {header.timeline_phase} "
               f"{header.season_record}")
    return _narrative_turn(step, prior.turn_id + 1, rng, prior.template_ids,
                           action_id, action_text, kind, custom_context)


def new_career(
    seed: int,
    coach_name: str = "Jacob Rhinehart",
    start_year: int = 1995,
    archetype: Optional[str] = None,
) -> TurnLog:
    """Opening turn: a 22-year-old job seeker with a first set of offers."""
    rng = SeededRandom.derive(seed, 0)
    header = SaveHeader(
        date=format_date("May", start_year),
        age=22,
        team="Free Agent",
        conference="",
        role="Job Seeker",
        timeline_phase=CAROUSEL,
        coach_name=coach_name,
        job_security="Unemployed",
        seed=seed,
    )

    arch = ARCHETYPES_BY_ID.get(archetype) if archetype else None
    if arch is not None:
        header.offensive_scheme = arch["offensive_scheme"]
        header.defensive_scheme = arch["defensive_scheme"]
        header.reputation_tags = [arch["label"]]

    mentor_pool = sorted((t for t in ALL_TEAMS if t.level != "nfl" and t.prestige >= 4),
                         key=lambda t: t.team_id)
    mentor_team = mentor_pool[rng.randrange(len(mentor_pool))]
    header.network = [Connection(generate_coach_name(rng), "Mentor",
                                 f"Head Coach, {mentor_team.name}", "High")]
    header.open_threads = ["Land a first job in coaching"]

    step = _Step(header=header, offers=generate_job_market(header, rng), summary=None, game_over=False)
    check_record_invariant(header)
    _log.info(f"new career seed={seed} coach={coach_name} year={start_year}")
    return _narrative_turn(step, 0, rng, None, None)
