"""
Template token engine.

Renders corpus text against a closed TokenContext.  Alternations
(``{won|lost|tied}``) are resolved with the seeded rng first, then every
``{TOKEN}`` is substituted.  A template that names a token the context does
not define raises TemplateTokenError instead of leaking braces into the UI.

Usage:
    from sideline.templates import TokenContext, render

    ctx = TokenContext(TEAM="Cornhuskers", RECORD="9-3")
    text = render("{TEAM} {cruise|roll} to {RECORD}", ctx, rng)
"""

from __future__ import annotations

import random
import re
from dataclasses import dataclass, fields
from typing import Dict, List, Optional, Sequence, TypeVar

from sideline.errors import TemplateTokenError

T = TypeVar("T")

_TOKEN_RE = re.compile(r"\{([A-Z_]+)\}")
_ALTERNATION_RE = re.compile(r"\{([^{}|]*\|[^{}]*)\}")


@dataclass
class TokenContext:
    """One field per recognised token.  Defaults keep every template renderable."""
    TEAM: str = "the team"
    TEAM_FULL: str = "the team"
    COACH: str = "the coach"
    COACH_LAST: str = "Coach"
    RECORD: str = "0-0"
    WINS: str = "0"
    LOSSES: str = "0"
    YEAR: str = ""
    CONFERENCE: str = "the conference"
    STREAK: str = "0"
    RANKING: str = "unranked"
    OPPONENT: str = "the opponent"
    SCORE: str = "0-0"
    PLAYER: str = "a young player"
    POSITION: str = "athlete"
    BOWL: str = "bowl game"
    BOWL_CITY: str = "the host city"
    ROLE: str = "coach"
    AGE: str = ""
    PHASE: str = ""

    def as_dict(self) -> Dict[str, str]:
        return {f.name: str(getattr(self, f.name)) for f in fields(self)}


TOKEN_NAMES = tuple(f.name for f in fields(TokenContext))


def get_template_tokens(template: str) -> List[str]:
    """Distinct token names in first-seen order."""
    seen = []
    for name in _TOKEN_RE.findall(template):
        if name not in seen:
            seen.append(name)
    return seen


def has_unreplaced_tokens(text: str) -> bool:
    return bool(_TOKEN_RE.search(text))


def replace_tokens(template: str, ctx: TokenContext) -> str:
    values = ctx.as_dict()
    unknown = [t for t in get_template_tokens(template) if t not in values]
    if unknown:
        raise TemplateTokenError(unknown, template)
    return _TOKEN_RE.sub(lambda m: values[m.group(1)], template)


def resolve_alternations(text: str, rng: random.Random) -> str:
    """Each ``{a|b|c}`` group is an independent uniform pick."""
    def _pick(match):
        options = match.group(1).split("|")
        return options[rng.randrange(len(options))]
    return _ALTERNATION_RE.sub(_pick, text)


def render(template: str, ctx: TokenContext, rng: random.Random) -> str:
    return replace_tokens(resolve_alternations(template, rng), ctx)


def select_weighted(
    templates: Sequence[T],
    rng: random.Random,
    exclude_id: Optional[str] = None,
) -> Optional[T]:
    """
    Weighted pick by each template's ``weight``.  The template used last
    turn is skipped whenever the bucket has anything else to offer.
    """
    pool = list(templates)
    if not pool:
        return None
    if exclude_id is not None and len(pool) > 1:
        pool = [t for t in pool if t.id != exclude_id] or pool
    weights = [max(1, getattr(t, "weight", 5)) for t in pool]
    return rng.choices(pool, weights=weights, k=1)[0]
