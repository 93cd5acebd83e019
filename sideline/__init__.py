"""
Sideline Saga Career Engine
"""

from .rng import SeededRandom
from .models import (
    PRESEASON,
    REGULAR_SEASON,
    POSTSEASON,
    CAROUSEL,
    OFFSEASON,
    PHASES,
    PHASE_TRANSITIONS,
    SaveHeader,
    TeamStats,
    Financials,
    CareerLog,
    Connection,
    GameResult,
    JobOffer,
    SeasonSummary,
    Choice,
    TurnLog,
)
from .errors import (
    SidelineError,
    PersistenceError,
    SaveNotFoundError,
    TemplateTokenError,
    RosterInvariantError,
    RecordInvariantError,
    ProviderError,
)
from .teams import Team, TeamDetails, get_team, resolve_team, teams_by_level
from .players import Player, generate_player, calculate_overall
from .roster import Roster, generate_roster, progress_roster_year, calculate_team_ratings
from .templates import TokenContext, render, replace_tokens, has_unreplaced_tokens
from .narrative import NarrativeContext, NarrativeResult, generate_narrative
from .offers import calculate_job_security, generate_job_market, negotiate_offer
from .turn_engine import advance_turn, new_career, check_record_invariant, simulate_game_block
from .provider import NarrativeService, HttpNarrativeProvider, ResponseCache, with_retry
from .export import export_career_history_csv, career_history_rows

__version__ = "1.0.0"
