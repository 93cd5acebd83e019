"""
Sideline Saga Turn Model

The TurnLog is the only thing the engine hands back to a caller: one per
turn, carrying the full SaveHeader snapshot plus the rendered narrative.
Every entity round-trips through plain dicts (snake_case keys) so a turn
can be persisted, shipped over the API, and replayed byte-for-byte.

Key rules:
- CareerLog entries are append-only.
- Connection names are stable; the other fields may drift.
- Records are "W-L" or "W-L-T" and always agree with games played.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple


# ──────────────────────────────────────────────
# ENUM-LIKE CONSTANTS
# ──────────────────────────────────────────────

PRESEASON = "Preseason"
REGULAR_SEASON = "Regular Season"
POSTSEASON = "Postseason"
CAROUSEL = "Carousel"
OFFSEASON = "Offseason"

PHASES = (PRESEASON, REGULAR_SEASON, POSTSEASON, CAROUSEL, OFFSEASON)

# Closed phase graph.  Regular Season loops onto itself between game blocks;
# Carousel loops while offers are pending or under negotiation.
PHASE_TRANSITIONS: Dict[str, Tuple[str, ...]] = {
    PRESEASON: (PRESEASON, REGULAR_SEASON),
    REGULAR_SEASON: (REGULAR_SEASON, POSTSEASON, CAROUSEL),
    POSTSEASON: (CAROUSEL,),
    CAROUSEL: (CAROUSEL, OFFSEASON),
    OFFSEASON: (OFFSEASON, PRESEASON),
}

OFFER_STATUSES = ("New", "Negotiating", "Final Offer", "Rescinded")
PATIENCE_TIERS = ("High", "Medium", "Low", "Zero")
LOYALTY_TIERS = ("High", "Medium", "Low", "Rival")
CHOICE_TYPES = ("action", "dialogue", "strategy")


# ──────────────────────────────────────────────
# RECORD / DATE HELPERS
# ──────────────────────────────────────────────

def parse_record(record: str) -> Tuple[int, int, int]:
    """'9-3' -> (9, 3, 0); '7-4-1' -> (7, 4, 1).  Garbage reads as 0-0."""
    parts = (record or "").strip().split("-")
    nums = []
    for part in parts[:3]:
        try:
            nums.append(int(part))
        except ValueError:
            nums.append(0)
    while len(nums) < 3:
        nums.append(0)
    return nums[0], nums[1], nums[2]


def format_record(wins: int, losses: int, ties: int = 0) -> str:
    if ties:
        return f"{wins}-{losses}-{ties}"
    return f"{wins}-{losses}"


def parse_date(date: str) -> Tuple[str, int]:
    """'September 1997' -> ('September', 1997).  Tolerates an ' (Offline)' suffix."""
    text = (date or "").replace("(Offline)", "").strip()
    month, _, year = text.partition(" ")
    try:
        return month, int(year.strip())
    except ValueError:
        return month, 0


def format_date(month: str, year: int) -> str:
    return f"{month} {year}"


# ──────────────────────────────────────────────
# HEADER COMPONENTS
# ──────────────────────────────────────────────

@dataclass
class TeamStats:
    ap_rank: int = 0          # 0 = unranked
    conf_standing: str = "-"
    off_rank: int = 0
    def_rank: int = 0
    prestige: str = "Bottom Feeder"

    @property
    def ap_label(self) -> str:
        return f"#{self.ap_rank}" if self.ap_rank else "NR"

    def to_dict(self) -> dict:
        return {
            "ap_rank": self.ap_rank,
            "conf_standing": self.conf_standing,
            "off_rank": self.off_rank,
            "def_rank": self.def_rank,
            "prestige": self.prestige,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "TeamStats":
        return cls(**d)


@dataclass
class Financials:
    salary: str = "$0k/yr"
    contract_years: int = 0
    buyout: str = "$0k"

    def to_dict(self) -> dict:
        return {"salary": self.salary, "contract_years": self.contract_years,
                "buyout": self.buyout}

    @classmethod
    def from_dict(cls, d: dict) -> "Financials":
        return cls(**d)


@dataclass
class CareerLog:
    """One closed stint.  Never edited once appended."""
    year: int
    team: str
    role: str
    record: str
    result: str

    def to_dict(self) -> dict:
        return {
            "year": self.year,
            "team": self.team,
            "role": self.role,
            "record": self.record,
            "result": self.result,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "CareerLog":
        return cls(**d)


@dataclass
class Connection:
    name: str
    relation: str
    current_role: str
    loyalty: str = "Medium"

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "relation": self.relation,
            "current_role": self.current_role,
            "loyalty": self.loyalty,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Connection":
        return cls(**d)


def network_upsert(connections: List[Connection], conn: Connection) -> List[Connection]:
    """New list with ``conn`` added, or the same-named entry updated in place."""
    out = []
    replaced = False
    for existing in connections:
        if existing.name == conn.name:
            out.append(Connection(existing.name, conn.relation, conn.current_role, conn.loyalty))
            replaced = True
        else:
            out.append(Connection(existing.name, existing.relation,
                                  existing.current_role, existing.loyalty))
    if not replaced:
        out.append(Connection(conn.name, conn.relation, conn.current_role, conn.loyalty))
    return out


_LOYALTY_DRIFT = {"High": "Medium", "Medium": "Low"}


def drift_loyalty(connections: List[Connection]) -> List[Connection]:
    """A firing cools the whole network by one tier.  Low and Rival stay put."""
    return [
        Connection(c.name, c.relation, c.current_role, _LOYALTY_DRIFT.get(c.loyalty, c.loyalty))
        for c in connections
    ]


@dataclass
class GameResult:
    week: int
    opponent: str
    our_score: int
    their_score: int
    opponent_prestige: int = 3
    bowl: str = ""
    rank_before: int = 0      # AP rank going into the game

    @property
    def won(self) -> bool:
        return self.our_score > self.their_score

    @property
    def margin(self) -> int:
        return abs(self.our_score - self.their_score)

    @property
    def score(self) -> str:
        hi, lo = max(self.our_score, self.their_score), min(self.our_score, self.their_score)
        return f"{hi}-{lo}"

    def to_dict(self) -> dict:
        return {
            "week": self.week,
            "opponent": self.opponent,
            "our_score": self.our_score,
            "their_score": self.their_score,
            "opponent_prestige": self.opponent_prestige,
            "bowl": self.bowl,
            "rank_before": self.rank_before,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "GameResult":
        return cls(**d)


# ──────────────────────────────────────────────
# SAVE HEADER
# ──────────────────────────────────────────────

@dataclass
class SaveHeader:
    """Full career snapshot carried by every turn."""

    # Calendar / identity ──────────────────────
    date: str
    age: int
    team: str
    conference: str
    role: str
    season_record: str = "0-0"
    timeline_phase: str = CAROUSEL
    coach_name: str = "Jacob Rhinehart"
    team_id: str = ""

    # Standing ─────────────────────────────────
    legacy_score: int = 0
    fan_sentiment: int = 50
    job_security: str = "Stable"
    offensive_scheme: str = "Pro Style"
    defensive_scheme: str = "4-3 Base"
    qb_situation: str = "Unsettled"
    reputation_tags: List[str] = field(default_factory=list)
    open_threads: List[str] = field(default_factory=list)
    network: List[Connection] = field(default_factory=list)
    stats: TeamStats = field(default_factory=TeamStats)
    financials: Financials = field(default_factory=Financials)
    career_history: List[CareerLog] = field(default_factory=list)

    # Bookkeeping ──────────────────────────────
    years_at_job: int = 0
    last_season_record: str = ""
    streak: int = 0
    last_game: Optional[GameResult] = None
    career_wins: int = 0
    career_losses: int = 0
    phase_turn: int = 0
    seed: int = 0

    @property
    def employed(self) -> bool:
        return bool(self.team_id) or self.team not in ("", "Free Agent", "Unemployed")

    @property
    def year(self) -> int:
        return parse_date(self.date)[1]

    @property
    def month(self) -> str:
        return parse_date(self.date)[0]

    @property
    def wins(self) -> int:
        return parse_record(self.season_record)[0]

    @property
    def losses(self) -> int:
        return parse_record(self.season_record)[1]

    def games_played(self) -> int:
        return sum(parse_record(self.season_record))

    def win_pct(self) -> float:
        w, l, t = parse_record(self.season_record)
        games = w + l + t
        if games == 0:
            return 0.0
        return (w + 0.5 * t) / games

    def display_tags(self, limit: int = 3) -> List[str]:
        return list(self.reputation_tags[:limit])

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "age": self.age,
            "team": self.team,
            "conference": self.conference,
            "role": self.role,
            "season_record": self.season_record,
            "timeline_phase": self.timeline_phase,
            "coach_name": self.coach_name,
            "team_id": self.team_id,
            "legacy_score": self.legacy_score,
            "fan_sentiment": self.fan_sentiment,
            "job_security": self.job_security,
            "offensive_scheme": self.offensive_scheme,
            "defensive_scheme": self.defensive_scheme,
            "qb_situation": self.qb_situation,
            "reputation_tags": list(self.reputation_tags),
            "open_threads": list(self.open_threads),
            "network": [c.to_dict() for c in self.network],
            "stats": self.stats.to_dict(),
            "financials": self.financials.to_dict(),
            "career_history": [c.to_dict() for c in self.career_history],
            "years_at_job": self.years_at_job,
            "last_season_record": self.last_season_record,
            "streak": self.streak,
            "last_game": self.last_game.to_dict() if self.last_game else None,
            "career_wins": self.career_wins,
            "career_losses": self.career_losses,
            "phase_turn": self.phase_turn,
            "seed": self.seed,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "SaveHeader":
        d = dict(d)
        network = [Connection.from_dict(c) for c in d.pop("network", [])]
        stats = TeamStats.from_dict(d.pop("stats", {}))
        financials = Financials.from_dict(d.pop("financials", {}))
        history = [CareerLog.from_dict(c) for c in d.pop("career_history", [])]
        last = d.pop("last_game", None)
        obj = cls(**{k: v for k, v in d.items() if k in cls.__dataclass_fields__})
        obj.network = network
        obj.stats = stats
        obj.financials = financials
        obj.career_history = history
        obj.last_game = GameResult.from_dict(last) if last else None
        return obj


# ──────────────────────────────────────────────
# OFFERS, SUMMARIES, CHOICES
# ──────────────────────────────────────────────

@dataclass
class JobOffer:
    id: str
    team: str
    team_id: str
    role: str
    conference: str
    prestige: str
    salary: str
    contract_length: str
    buyout: str
    pitch: str
    perks: List[str] = field(default_factory=list)
    status: str = "New"
    ad_patience: str = "Medium"
    offer_type: str = "Offer"
    negotiation_rounds: int = 0

    @property
    def live(self) -> bool:
        return self.status != "Rescinded"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "team": self.team,
            "team_id": self.team_id,
            "role": self.role,
            "conference": self.conference,
            "prestige": self.prestige,
            "salary": self.salary,
            "contract_length": self.contract_length,
            "buyout": self.buyout,
            "pitch": self.pitch,
            "perks": list(self.perks),
            "status": self.status,
            "ad_patience": self.ad_patience,
            "offer_type": self.offer_type,
            "negotiation_rounds": self.negotiation_rounds,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "JobOffer":
        return cls(**d)


@dataclass
class SeasonSummary:
    year: int
    final_record: str
    accomplishment: str
    key_stats: List[str] = field(default_factory=list)
    board_feedback: str = ""
    recruiting_class_rank: int = 0
    top_signee: str = ""

    def to_dict(self) -> dict:
        return {
            "year": self.year,
            "final_record": self.final_record,
            "accomplishment": self.accomplishment,
            "key_stats": list(self.key_stats),
            "board_feedback": self.board_feedback,
            "recruiting_class_rank": self.recruiting_class_rank,
            "top_signee": self.top_signee,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "SeasonSummary":
        return cls(**d)


@dataclass
class Choice:
    id: str
    text: str
    type: str = "action"
    description: Optional[str] = None
    risk_level: Optional[str] = None
    effects: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "text": self.text,
            "type": self.type,
            "description": self.description,
            "risk_level": self.risk_level,
            "effects": dict(self.effects),
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Choice":
        return cls(**d)


# ──────────────────────────────────────────────
# TURN LOG
# ──────────────────────────────────────────────

@dataclass
class TurnLog:
    turn_id: int
    header: SaveHeader
    media_headline: str = ""
    media_buzz: List[str] = field(default_factory=list)
    staff_notes: List[str] = field(default_factory=list)
    season_summary: Optional[SeasonSummary] = None
    job_offers: List[JobOffer] = field(default_factory=list)
    scene_title: str = ""
    scene_description: str = ""
    resolution: Optional[str] = None
    choices: List[Choice] = field(default_factory=list)
    ticker: List[str] = field(default_factory=list)
    game_over: bool = False
    offline: bool = False
    # bucket -> template id rendered this turn; the next turn avoids repeats
    template_ids: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "turn_id": self.turn_id,
            "header": self.header.to_dict(),
            "media_headline": self.media_headline,
            "media_buzz": list(self.media_buzz),
            "staff_notes": list(self.staff_notes),
            "season_summary": self.season_summary.to_dict() if self.season_summary else None,
            "job_offers": [o.to_dict() for o in self.job_offers],
            "scene_title": self.scene_title,
            "scene_description": self.scene_description,
            "resolution": self.resolution,
            "choices": [c.to_dict() for c in self.choices],
            "ticker": list(self.ticker),
            "game_over": self.game_over,
            "offline": self.offline,
            "template_ids": dict(self.template_ids),
        }

    @classmethod
    def from_dict(cls, d: dict) -> "TurnLog":
        summary = d.get("season_summary")
        return cls(
            turn_id=d["turn_id"],
            header=SaveHeader.from_dict(d["header"]),
            media_headline=d.get("media_headline", ""),
            media_buzz=list(d.get("media_buzz", [])),
            staff_notes=list(d.get("staff_notes", [])),
            season_summary=SeasonSummary.from_dict(summary) if summary else None,
            job_offers=[JobOffer.from_dict(o) for o in d.get("job_offers", [])],
            scene_title=d.get("scene_title", ""),
            scene_description=d.get("scene_description", ""),
            resolution=d.get("resolution"),
            choices=[Choice.from_dict(c) for c in d.get("choices", [])],
            ticker=list(d.get("ticker", [])),
            game_over=d.get("game_over", False),
            offline=d.get("offline", False),
            template_ids=dict(d.get("template_ids", {})),
        )

    def copy(self) -> "TurnLog":
        """Deep copy through the dict form."""
        return TurnLog.from_dict(self.to_dict())
