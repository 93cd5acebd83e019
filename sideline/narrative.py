"""
Sideline Saga Narrative Generator

Pure function from a computed turn context to the text a player reads:
headline, media buzz, staff notes, scene, choices, resolution and the
league ticker.  No network, no global state; every pick comes from the
rng the caller hands in, so the same turn always reads the same way.

Selection flow:
    1. classify the scene (phase-aware) and the headline (game-aware)
       independently; they are allowed to disagree
    2. pick a weighted template per bucket, skipping last turn's pick
    3. resolve {a|b} alternations, then substitute {TOKENS}
    4. build role-constrained choices and narrate the previous action

Usage:
    from sideline.narrative import NarrativeContext, generate_narrative

    ctx = NarrativeContext(header=turn.header, action_id="advance")
    result = generate_narrative(ctx, rng, previous=turn.template_ids)
    print(result.headline)
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from sideline.corpus import (
    BUZZ_LINES,
    FALLBACK_SCENES,
    PHASE_CHOICE_CONTEXTS,
    RESOLUTION_LINES,
    ROLE_CHOICE_CONTEXTS,
    STAFF_NOTES,
    TICKER_LINES,
    ChoiceTemplate,
    choice_sets_for,
    find_choice,
    headlines_by_category,
    scenes_for,
)
from sideline.era import historical_event
from sideline.models import (
    CAROUSEL,
    OFFSEASON,
    POSTSEASON,
    PRESEASON,
    REGULAR_SEASON,
    Choice,
    GameResult,
    SaveHeader,
    parse_record,
)
from sideline.offers import job_security_score
from sideline.teams import get_team, resolve_team
from sideline.templates import TokenContext, render, select_weighted

_log = logging.getLogger("sideline.narrative")

PHASE_KEYS = {
    PRESEASON: "preseason",
    REGULAR_SEASON: "game_block",
    POSTSEASON: "postseason",
    CAROUSEL: "carousel",
    OFFSEASON: "offseason",
}

ADVANCE_CHOICE = Choice(
    id="advance",
    text="Continue",
    type="action",
    description="Move on to what comes next.",
    risk_level="safe",
)

RECOVERY_CHOICE = Choice(
    id="rock_bottom_recovery",
    text="Start over at the bottom",
    type="action",
    description="Take any job that will have you and rebuild from there.",
    risk_level="safe",
)


# ──────────────────────────────────────────────
# DESCRIBERS
# ──────────────────────────────────────────────

def describe_record(wins: int, losses: int) -> str:
    games = wins + losses
    if games == 0:
        return "early in the season"
    if losses == 0:
        return "undefeated"
    if wins == 0:
        return "winless"
    pct = wins / games
    if pct >= 0.8:
        return "dominant"
    if pct >= 0.6:
        return "solid"
    if pct >= 0.5:
        return "above .500"
    if pct >= 0.4:
        return "below .500"
    if pct >= 0.2:
        return "struggling"
    return "in crisis"


def describe_season_context(wins: int, losses: int, total_games: int = 12) -> str:
    played = wins + losses
    remaining = total_games - played
    if played <= 2:
        return "early season"
    if remaining <= 2:
        return "season finale approaching"
    if remaining <= 4:
        return "down the stretch"
    pct = wins / played
    if pct >= 0.75:
        return "in contention"
    if pct <= 0.25:
        return "facing a long season"
    return "midseason"


def describe_win_streak(count: int) -> str:
    if count >= 10:
        return "on an incredible run"
    if count >= 7:
        return "on a dominant stretch"
    if count >= 5:
        return "building momentum"
    if count >= 3:
        return "on a roll"
    return "finding a rhythm"


def describe_loss_streak(count: int) -> str:
    if count >= 7:
        return "in complete freefall"
    if count >= 5:
        return "spiraling out of control"
    if count >= 4:
        return "in crisis mode"
    if count >= 3:
        return "struggling to find answers"
    return "trying to right the ship"


def describe_job_security(score: int) -> str:
    if score >= 90:
        return "rock solid"
    if score >= 75:
        return "secure"
    if score >= 60:
        return "stable"
    if score >= 45:
        return "in question"
    if score >= 30:
        return "on thin ice"
    if score >= 15:
        return "hanging by a thread"
    return "all but gone"


def is_on_hot_seat(score: int) -> bool:
    return score < 40


def describe_matchup(our_prestige: int, their_prestige: int) -> str:
    diff = our_prestige - their_prestige
    if diff >= 2:
        return "heavy favorites against"
    if diff == 1:
        return "favored against"
    if diff == 0:
        return "evenly matched with"
    if diff == -1:
        return "slight underdogs against"
    return "facing a tough test against"


_GAME_RESULT_LINES = {
    ("win", "close"): [
        "{team} survived a scare, edging {opp} {score}.",
        "{team} held on for a nail-biting {score} victory over {opp}.",
        "It wasn't pretty, but {team} got the win {score} over {opp}.",
    ],
    ("win", "solid"): [
        "{team} handled {opp} {score}.",
        "{team} pulled away late to beat {opp} {score}.",
    ],
    ("win", "blowout"): [
        "{team} cruised to a {score} victory over {opp}.",
        "{team} dominated {opp} {score}.",
        "{team} made a statement with a {score} win over {opp}.",
    ],
    ("loss", "close"): [
        "{team} fell just short, losing {score} to {opp}.",
        "{team} couldn't finish, dropping a {score} heartbreaker to {opp}.",
        "Agony for {team} after a {score} loss to {opp}.",
    ],
    ("loss", "solid"): [
        "{team} never found a rhythm in a {score} loss to {opp}.",
        "{opp} controlled the second half and beat {team} {score}.",
    ],
    ("loss", "blowout"): [
        "{team} were overwhelmed by {opp}, {score}.",
        "{opp} routed {team} {score}.",
        "A long afternoon for {team}: {opp} won {score}.",
    ],
}


def build_game_result(game: GameResult, team: str, rng: random.Random) -> str:
    """One sentence on a finished game.  Close is <= 7, blowout >= 21."""
    if game.margin <= 7:
        size = "close"
    elif game.margin >= 21:
        size = "blowout"
    else:
        size = "solid"
    lines = _GAME_RESULT_LINES[("win" if game.won else "loss", size)]
    line = lines[rng.randrange(len(lines))]
    return line.format(team=team, opp=game.opponent, score=game.score)


def build_season_summary(team: str, record: str, ap_rank: int = 0, streak: int = 0) -> str:
    if ap_rank:
        summary = f"#{ap_rank} {team} stand at {record}"
    else:
        summary = f"The {team} stand at {record}"
    if streak >= 3:
        summary += f", {describe_win_streak(streak)} with {streak} straight wins"
    elif streak <= -3:
        summary += f", {describe_loss_streak(-streak)} after {-streak} straight losses"
    return summary + "."


_IMPACT_LINES = [
    ("security", "Job security improved", "Job security decreased"),
    ("team_morale", "Team morale boosted", "Team morale suffered"),
    ("recruiting", "Recruiting momentum gained", "Recruiting took a hit"),
    ("development", "Player development accelerated", None),
    ("media_perception", "Media perception improved", "Media backlash"),
    ("fan_support", "Fan support increased", "Fan frustration growing"),
]


def calculate_choice_impact(effects: Dict[str, int]) -> List[str]:
    impacts = []
    for key, up, down in _IMPACT_LINES:
        value = effects.get(key, 0)
        if value > 0:
            impacts.append(up)
        elif value < 0 and down:
            impacts.append(down)
    return impacts


# ──────────────────────────────────────────────
# CONTEXT
# ──────────────────────────────────────────────

@dataclass
class NarrativeContext:
    """Everything the generator may look at.  Built by the turn engine."""
    header: SaveHeader
    game: Optional[GameResult] = None            # set only when a game was played this turn
    opponent: str = ""                           # next/bowl opponent when no game was played
    bowl: Tuple[str, str] = ("", "")             # (name, city)
    featured_player: Tuple[str, str] = ("", "")  # (name, position)
    fired: bool = False
    new_hire: bool = False
    previous_record: str = ""
    playoff_slots: int = 0
    former_team_id: str = ""
    former_team_name: str = ""
    action_id: Optional[str] = None
    action_text: str = ""
    action_kind: str = "advance"                 # choice | custom | advance | offer | recovery
    custom_context: Optional[str] = None
    choice: Optional[ChoiceTemplate] = None
    events: List[str] = field(default_factory=list)
    extra_staff_notes: List[str] = field(default_factory=list)
    game_over: bool = False

    @property
    def phase_key(self) -> str:
        return PHASE_KEYS.get(self.header.timeline_phase, "carousel")

    @property
    def job_score(self) -> int:
        return job_security_score(self.header.job_security)


@dataclass
class NarrativeResult:
    headline: str
    buzz: List[str]
    staff_notes: List[str]
    scene_title: str
    scene_description: str
    choices: List[Choice]
    resolution: Optional[str]
    ticker: List[str]
    template_ids: Dict[str, str] = field(default_factory=dict)


def role_group(role: str, employed: bool = True) -> str:
    """head_coach / coordinator / entry, for choice constraints."""
    if not employed:
        return "entry"
    if role == "Head Coach":
        return "head_coach"
    if "Coordinator" in role:
        return "coordinator"
    return "entry"


def _team_identity(ctx: NarrativeContext) -> Tuple[str, str, int]:
    """(short name, full name, prestige) of the program the story is about."""
    h = ctx.header
    team_id, name = h.team_id, h.team
    if ctx.fired or not h.employed:
        team_id, name = ctx.former_team_id, ctx.former_team_name
    team = get_team(team_id) if team_id else None
    if team is not None:
        return team.name, team.full_name, team.prestige
    if not name or name in ("Free Agent", "Unemployed"):
        return "program", "the program", 1
    details = resolve_team(name)
    return details.name, f"{details.name} {details.nickname}", details.prestige or 1


def build_token_context(ctx: NarrativeContext) -> TokenContext:
    h = ctx.header
    team, team_full, _ = _team_identity(ctx)

    record = h.season_record
    if ctx.phase_key in ("offseason", "preseason") and ctx.previous_record:
        record = ctx.previous_record
    wins, losses, _ = parse_record(record)

    rank = h.stats.ap_rank
    if ctx.game is not None and not ctx.game.won and ctx.game.rank_before:
        rank = ctx.game.rank_before

    opponent = ctx.game.opponent if ctx.game is not None else ctx.opponent
    player, position = ctx.featured_player
    bowl, bowl_city = ctx.bowl

    tokens = TokenContext(
        TEAM=team,
        TEAM_FULL=team_full,
        COACH=h.coach_name,
        COACH_LAST=h.coach_name.split()[-1] if h.coach_name.strip() else "Coach",
        RECORD=record,
        WINS=str(wins),
        LOSSES=str(losses),
        YEAR=str(h.year),
        STREAK=str(abs(h.streak)),
        RANKING=f"#{rank}" if rank else "unranked",
        SCORE=ctx.game.score if ctx.game is not None else "0-0",
        ROLE=h.role or "coach",
        AGE=str(h.age),
        PHASE=h.timeline_phase,
    )
    if h.conference:
        tokens.CONFERENCE = h.conference
    if opponent:
        tokens.OPPONENT = opponent
    if player:
        tokens.PLAYER = player
    if position:
        tokens.POSITION = position
    if bowl:
        tokens.BOWL = bowl
    if bowl_city:
        tokens.BOWL_CITY = bowl_city
    return tokens


# ──────────────────────────────────────────────
# CLASSIFICATION
# ──────────────────────────────────────────────

def _record_pct(record: str) -> Optional[float]:
    w, l, t = parse_record(record)
    games = w + l + t
    if games == 0:
        return None
    return (w + 0.5 * t) / games


def classify_scene(ctx: NarrativeContext) -> str:
    h = ctx.header
    key = ctx.phase_key

    if key == "carousel":
        if not h.employed:
            return "fired" if ctx.fired else "job_hunt"
        return "secure" if ctx.job_score >= 60 else "hot_seat"

    if key == "postseason":
        rank = h.stats.ap_rank
        if 0 < rank <= 2:
            return "championship"
        if 0 < rank <= ctx.playoff_slots:
            return "playoff_prep"
        return "bowl_prep"

    if key == "offseason":
        pct = _record_pct(ctx.previous_record)
        if pct is None:
            return "recruiting"
        if pct >= 0.75:
            return "winning"
        if pct <= 0.25:
            return "losing"
        return "recruiting"

    if key == "preseason":
        if h.years_at_job == 0:
            return "new_job"
        pct = _record_pct(ctx.previous_record)
        return "winning" if pct is not None and pct >= 0.5 else "losing"

    if ctx.job_score < 30:
        return "hot_seat"
    if h.streak >= 3:
        return "winning"
    if h.streak <= -3:
        return "losing"
    pct = h.win_pct()
    if h.games_played() and pct >= 0.7:
        return "winning"
    if h.games_played() and pct <= 0.3:
        return "losing"
    return "mixed"


def classify_headline(ctx: NarrativeContext) -> str:
    h = ctx.header
    game = ctx.game
    if game is not None:
        _, _, our_prestige = _team_identity(ctx)
        if game.won:
            if game.opponent_prestige - our_prestige >= 2:
                return "win_upset"
            if game.margin >= 21:
                return "win_blowout"
            if h.streak >= 3:
                return "win_streak"
            return "win_close"
        if 0 < game.rank_before <= 10:
            return "loss_upset"
        if game.margin >= 21:
            return "loss_blowout"
        if h.streak <= -3:
            return "loss_streak"
        return "loss_close"

    if not h.employed:
        return "fired" if ctx.fired else "job_hunt"
    if ctx.new_hire:
        return "hired"
    score = ctx.job_score
    if score < 20:
        return "fired"
    if score < 40:
        return "hot_seat"
    if score > 80:
        return "job_security"
    key = ctx.phase_key
    if key == "preseason":
        return "preseason"
    if key == "postseason":
        return "bowl_selection"
    if key == "offseason":
        return "recruiting"
    return "general"


# ──────────────────────────────────────────────
# BUILDERS
# ──────────────────────────────────────────────

def _pick_lines(pool: List[str], count: int, rng: random.Random) -> List[str]:
    if len(pool) <= count:
        return list(pool)
    return rng.sample(pool, count)


def _build_headline(ctx, tokens, rng, previous, ids) -> str:
    category = classify_headline(ctx)
    bucket = headlines_by_category(category)
    if not bucket:
        _log.debug(f"no headlines for '{category}', falling back to general")
        bucket = headlines_by_category("general")
    template = select_weighted(bucket, rng, previous.get("headline"))
    ids["headline"] = template.id
    return render(template.text, tokens, rng)


def _build_scene(ctx, tokens, rng, previous, ids) -> Tuple[str, str]:
    context = classify_scene(ctx)
    bucket = scenes_for(ctx.phase_key, context)
    template = select_weighted(bucket, rng, previous.get("scene"))
    if template is None:
        _log.debug(f"no scene for {ctx.phase_key}/{context}, using phase fallback")
        title, description = FALLBACK_SCENES[ctx.phase_key]
        ids["scene"] = f"fallback_{ctx.phase_key}"
    else:
        title, description = template.title, template.description
        ids["scene"] = template.id

    title = render(title, tokens, rng)
    description = render(description, tokens, rng)
    if ctx.game is not None:
        description = f"{build_game_result(ctx.game, tokens.TEAM, rng)} {description}"
    return title, description


def _buzz_tone(ctx: NarrativeContext) -> str:
    if not ctx.header.employed:
        return "job_hunt"
    if ctx.header.fan_sentiment >= 60:
        return "positive"
    if ctx.header.fan_sentiment <= 40:
        return "negative"
    return "neutral"


def _build_buzz(ctx, tokens, rng) -> List[str]:
    lines = _pick_lines(BUZZ_LINES[_buzz_tone(ctx)], 2, rng)
    return [render(line, tokens, rng) for line in lines]


def _build_staff_notes(ctx, tokens, rng) -> List[str]:
    key = ctx.phase_key if ctx.header.employed else "job_hunt"
    lines = _pick_lines(STAFF_NOTES.get(key, []), 2, rng)
    notes = [render(line, tokens, rng) for line in lines]
    return notes + list(ctx.extra_staff_notes)


def _build_ticker(ctx, tokens, rng) -> List[str]:
    ticker = []
    event = historical_event(ctx.header.year)
    if event:
        ticker.append(event)
    ticker.extend(render(line, tokens, rng) for line in _pick_lines(TICKER_LINES, 3, rng))
    return ticker


def _choice_from_template(template: ChoiceTemplate) -> Choice:
    return Choice(
        id=template.id,
        text=template.text,
        type=template.type,
        description=template.description,
        risk_level=template.risk_level,
        effects=dict(template.effects),
    )


def build_choices(ctx: NarrativeContext, rng: random.Random,
                  previous: Optional[Dict[str, str]] = None,
                  ids: Optional[Dict[str, str]] = None) -> List[Choice]:
    """
    One set from the role's allowed contexts, merged with the phase's set
    when the role may see it.  Head coaches see every phase set; everyone
    else only the contexts their role allows.  Always ends with Continue.
    """
    if ctx.game_over:
        return [Choice(**RECOVERY_CHOICE.to_dict())]
    previous = previous or {}
    ids = ids if ids is not None else {}

    group = role_group(ctx.header.role, ctx.header.employed)
    allowed = ROLE_CHOICE_CONTEXTS[group]
    contexts = [allowed[rng.randrange(len(allowed))]]
    phase_context = PHASE_CHOICE_CONTEXTS.get(ctx.phase_key)
    if phase_context and phase_context not in contexts:
        if group == "head_coach" or phase_context in allowed:
            contexts.append(phase_context)

    choices: List[Choice] = []
    seen = set()
    for n, context in enumerate(contexts):
        choice_set = select_weighted(choice_sets_for(context), rng, previous.get(f"choices_{n}"))
        if choice_set is None:
            continue
        ids[f"choices_{n}"] = choice_set.id
        for template in choice_set.choices:
            if template.id not in seen:
                seen.add(template.id)
                choices.append(_choice_from_template(template))
    choices.append(Choice(**ADVANCE_CHOICE.to_dict()))
    return choices


def _clean_user_text(text: str) -> str:
    return (text or "").replace("{", "").replace("}", "").strip()


def _lower_first(text: str) -> str:
    return text[:1].lower() + text[1:] if text else text


def build_resolution(ctx: NarrativeContext, tokens: TokenContext,
                     rng: random.Random) -> Optional[str]:
    """Narrates the action that produced this turn.  None on the opening turn."""
    if ctx.action_id is None:
        return None

    parts = list(ctx.events)
    kind = ctx.action_kind
    choice = ctx.choice or (find_choice(ctx.action_id) if kind == "choice" else None)

    if kind == "choice" and choice is not None:
        line = render(rng.choice(RESOLUTION_LINES["choice"]), tokens, rng)
        impacts = calculate_choice_impact(choice.effects)
        impact = ". ".join(impacts) + "." if impacts else "The effects will take time to show."
        parts.append(line.replace("{action}", _lower_first(choice.text).rstrip("."))
                     .replace("{impact}", impact))
    elif kind == "custom":
        action = _clean_user_text(ctx.action_text) or ctx.action_id
        line = render(rng.choice(RESOLUTION_LINES["custom"]), tokens, rng)
        parts.append(line.replace("{action}", _lower_first(action).rstrip(".")))
    elif kind == "advance" and not parts:
        parts.append(render(rng.choice(RESOLUTION_LINES["advance"]), tokens, rng))

    note = _clean_user_text(ctx.custom_context or "")
    if note:
        parts.append(f"You kept one thing in mind: {note.rstrip('.')}.")
    return " ".join(parts) if parts else None


# ──────────────────────────────────────────────
# ENTRY POINT
# ──────────────────────────────────────────────

def generate_narrative(ctx: NarrativeContext, rng: random.Random,
                       previous: Optional[Dict[str, str]] = None) -> NarrativeResult:
    previous = previous or {}
    ids: Dict[str, str] = {}
    tokens = build_token_context(ctx)

    headline = _build_headline(ctx, tokens, rng, previous, ids)
    title, description = _build_scene(ctx, tokens, rng, previous, ids)
    buzz = _build_buzz(ctx, tokens, rng)
    notes = _build_staff_notes(ctx, tokens, rng)
    choices = build_choices(ctx, rng, previous, ids)
    resolution = build_resolution(ctx, tokens, rng)
    ticker = _build_ticker(ctx, tokens, rng)

    return NarrativeResult(
        headline=headline,
        buzz=buzz,
        staff_notes=notes,
        scene_title=title,
        scene_description=description,
        choices=choices,
        resolution=resolution,
        ticker=ticker,
        template_ids=ids,
    )


def season_summary_line(header: SaveHeader) -> str:
    """Short status line for staff notes and the provider context."""
    team = header.team if header.employed else "program"
    return build_season_summary(team, header.season_record, header.stats.ap_rank, header.streak)
