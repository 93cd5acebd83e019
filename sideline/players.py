"""
Sideline Saga Player Model

Football players with:
- Universal physical and mental ratings (25-99)
- One position-group attribute bundle (QB, RB, WR, TE, OL, DL, LB, DB, K, P)
- A development trait, recruiting stars, potential ceiling, age and class year
- A computed overall rating from fixed per-group weight tables

The position bundle is a tagged variant: each bundle class carries its GROUP
and a Player refuses a bundle whose group does not match its position.

Usage:
    from sideline.players import generate_player, calculate_overall

    qb = generate_player("QB", "fbs-p5", rng, tier=4)
    print(qb.full_name, qb.overall, qb.potential)
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field, fields, asdict
from typing import ClassVar, Dict, List, Optional, Tuple, Type

from sideline.names import generate_name, generate_nickname


# ──────────────────────────────────────────────
# POSITIONS
# ──────────────────────────────────────────────

POSITIONS = [
    "QB", "RB", "FB", "WR", "TE",
    "LT", "LG", "C", "RG", "RT",
    "DE", "DT", "NT", "OLB", "ILB", "MLB",
    "CB", "FS", "SS",
    "K", "P", "LS",
]

POSITION_GROUPS: Dict[str, str] = {
    "QB": "QB",
    "RB": "RB", "FB": "RB",
    "WR": "WR",
    "TE": "TE",
    "LT": "OL", "LG": "OL", "C": "OL", "RG": "OL", "RT": "OL",
    "DE": "DL", "DT": "DL", "NT": "DL",
    "OLB": "LB", "ILB": "LB", "MLB": "LB",
    "CB": "DB", "FS": "DB", "SS": "DB",
    "K": "K", "P": "P", "LS": "K",
}

GROUPS = ["QB", "RB", "WR", "TE", "OL", "DL", "LB", "DB", "K", "P"]

DEV_TRAITS = ("slow", "normal", "star", "superstar")

OVR_MIN = 40
OVR_MAX = 99
ATTR_MIN = 25
ATTR_MAX = 99

# Recruit star odds: 5★ 1%, 4★ 10%, 3★ 30%, 2★ 40%, 1★ 19%
STAR_DISTRIBUTION: Dict[int, float] = {5: 0.01, 4: 0.10, 3: 0.30, 2: 0.40, 1: 0.19}


def position_group(position: str) -> str:
    try:
        return POSITION_GROUPS[position]
    except KeyError:
        raise ValueError(f"Unknown position '{position}'") from None


# ──────────────────────────────────────────────
# UNIVERSAL ATTRIBUTES
# ──────────────────────────────────────────────

@dataclass
class PhysicalAttributes:
    speed: int = 50
    acceleration: int = 50
    strength: int = 50
    agility: int = 50
    jumping: int = 50
    stamina: int = 50
    injury: int = 50
    toughness: int = 50


@dataclass
class MentalAttributes:
    awareness: int = 50
    clutch: int = 50
    consistency: int = 50


# ──────────────────────────────────────────────
# POSITION ATTRIBUTE VARIANTS
# ──────────────────────────────────────────────

@dataclass
class PositionAttributes:
    """Base of the per-group bundles.  Optional fields may be None."""
    GROUP: ClassVar[str] = ""

    def ratings(self) -> Dict[str, int]:
        return {f.name: getattr(self, f.name) for f in fields(self)
                if getattr(self, f.name) is not None}

    def to_dict(self) -> dict:
        d = asdict(self)
        d["group"] = self.GROUP
        return d


@dataclass
class QBAttributes(PositionAttributes):
    GROUP: ClassVar[str] = "QB"
    throw_power: int = 50
    throw_accuracy_short: int = 50
    throw_accuracy_mid: int = 50
    throw_accuracy_deep: int = 50
    throw_on_run: int = 50
    play_action: int = 50
    poise: int = 50
    release: int = 50
    # dual-threat only
    carrying: Optional[int] = None
    break_tackle: Optional[int] = None


@dataclass
class RBAttributes(PositionAttributes):
    GROUP: ClassVar[str] = "RB"
    carrying: int = 50
    break_tackle: int = 50
    trucking: int = 50
    elusiveness: int = 50
    spin_move: int = 50
    juke_move: int = 50
    stiff_arm: int = 50
    ball_carrier_vision: int = 50
    catching: int = 50
    pass_block: int = 50


@dataclass
class WRAttributes(PositionAttributes):
    GROUP: ClassVar[str] = "WR"
    catching: int = 50
    catch_in_traffic: int = 50
    spectacular_catch: int = 50
    release: int = 50
    route_running: int = 50
    short_routes: int = 50
    medium_routes: int = 50
    deep_routes: int = 50


@dataclass
class TEAttributes(PositionAttributes):
    GROUP: ClassVar[str] = "TE"
    catching: int = 50
    catch_in_traffic: int = 50
    spectacular_catch: int = 50
    release: int = 50
    route_running: int = 50
    run_block: int = 50
    pass_block: int = 50


@dataclass
class OLAttributes(PositionAttributes):
    GROUP: ClassVar[str] = "OL"
    run_block: int = 50
    run_block_power: int = 50
    run_block_finesse: int = 50
    pass_block: int = 50
    pass_block_power: int = 50
    pass_block_finesse: int = 50
    lead_block: int = 50
    impact_blocking: int = 50


@dataclass
class DLAttributes(PositionAttributes):
    GROUP: ClassVar[str] = "DL"
    tackling: int = 50
    hit_power: int = 50
    block_shedding: int = 50
    power_moves: int = 50
    finesse_moves: int = 50
    pursuit: int = 50
    play_recognition: int = 50


@dataclass
class LBAttributes(PositionAttributes):
    GROUP: ClassVar[str] = "LB"
    tackling: int = 50
    hit_power: int = 50
    pursuit: int = 50
    play_recognition: int = 50
    zone_coverage: int = 50
    man_coverage: int = 50
    block_shedding: int = 50
    # edge-rushing OLBs only
    power_moves: Optional[int] = None
    finesse_moves: Optional[int] = None


@dataclass
class DBAttributes(PositionAttributes):
    GROUP: ClassVar[str] = "DB"
    tackling: int = 50
    hit_power: int = 50
    man_coverage: int = 50
    zone_coverage: int = 50
    press: int = 50
    play_recognition: int = 50
    pursuit: int = 50
    catching: int = 50


@dataclass
class KickerAttributes(PositionAttributes):
    GROUP: ClassVar[str] = "K"
    kick_power: int = 50
    kick_accuracy: int = 50


@dataclass
class PunterAttributes(PositionAttributes):
    GROUP: ClassVar[str] = "P"
    kick_power: int = 50
    kick_accuracy: int = 50


ATTRIBUTE_CLASSES: Dict[str, Type[PositionAttributes]] = {
    cls.GROUP: cls for cls in (
        QBAttributes, RBAttributes, WRAttributes, TEAttributes, OLAttributes,
        DLAttributes, LBAttributes, DBAttributes, KickerAttributes, PunterAttributes,
    )
}


def attributes_from_dict(d: dict) -> PositionAttributes:
    data = dict(d)
    group = data.pop("group")
    cls = ATTRIBUTE_CLASSES[group]
    return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})


# ──────────────────────────────────────────────
# OVERALL WEIGHTS
# ──────────────────────────────────────────────

POSITION_WEIGHTS: Dict[str, Dict[str, float]] = {
    "QB": {
        "throw_power": 0.08, "throw_accuracy_short": 0.15, "throw_accuracy_mid": 0.15,
        "throw_accuracy_deep": 0.10, "throw_on_run": 0.08, "play_action": 0.05,
        "poise": 0.12, "release": 0.08, "speed": 0.04, "awareness": 0.15,
    },
    "RB": {
        "speed": 0.12, "acceleration": 0.10, "agility": 0.08, "carrying": 0.12,
        "break_tackle": 0.10, "trucking": 0.05, "elusiveness": 0.10,
        "ball_carrier_vision": 0.12, "catching": 0.08, "awareness": 0.08, "stamina": 0.05,
    },
    "WR": {
        "speed": 0.15, "acceleration": 0.08, "catching": 0.18, "catch_in_traffic": 0.10,
        "route_running": 0.15, "short_routes": 0.08, "medium_routes": 0.08,
        "deep_routes": 0.06, "release": 0.07, "awareness": 0.05,
    },
    "TE": {
        "catching": 0.15, "catch_in_traffic": 0.10, "route_running": 0.12, "run_block": 0.18,
        "pass_block": 0.10, "speed": 0.10, "strength": 0.10, "awareness": 0.10, "stamina": 0.05,
    },
    "OL": {
        "run_block": 0.18, "run_block_power": 0.10, "run_block_finesse": 0.08,
        "pass_block": 0.18, "pass_block_power": 0.10, "pass_block_finesse": 0.08,
        "strength": 0.12, "awareness": 0.10, "stamina": 0.06,
    },
    "DL": {
        "tackling": 0.10, "block_shedding": 0.15, "power_moves": 0.15, "finesse_moves": 0.12,
        "pursuit": 0.10, "play_recognition": 0.12, "strength": 0.12, "speed": 0.06, "stamina": 0.08,
    },
    "LB": {
        "tackling": 0.15, "pursuit": 0.12, "play_recognition": 0.15, "zone_coverage": 0.12,
        "man_coverage": 0.08, "block_shedding": 0.10, "speed": 0.10, "hit_power": 0.08,
        "awareness": 0.10,
    },
    "DB": {
        "man_coverage": 0.18, "zone_coverage": 0.15, "press": 0.10, "play_recognition": 0.12,
        "speed": 0.15, "tackling": 0.10, "catching": 0.10, "awareness": 0.10,
    },
    "K": {"kick_power": 0.35, "kick_accuracy": 0.55, "awareness": 0.10},
    "P": {"kick_power": 0.40, "kick_accuracy": 0.50, "awareness": 0.10},
}


# ──────────────────────────────────────────────
# PLAYER
# ──────────────────────────────────────────────

@dataclass
class Player:
    """A single athlete on a roster or in a recruiting class."""
    player_id: str
    first_name: str
    last_name: str
    position: str
    physical: PhysicalAttributes
    mental: MentalAttributes
    attributes: PositionAttributes
    dev_trait: str = "normal"
    stars: Optional[int] = None
    potential: int = 60
    age: int = 18
    year: str = "FR"
    height: int = 72          # inches
    weight: int = 200         # lbs
    nickname: Optional[str] = None
    injury_weeks: int = 0
    games_played: int = 0
    games_started: int = 0

    def __post_init__(self):
        group = position_group(self.position)
        if self.attributes.GROUP != group:
            raise ValueError(
                f"{self.position} player needs {group} attributes, "
                f"got {self.attributes.GROUP or type(self.attributes).__name__}"
            )
        if self.dev_trait not in DEV_TRAITS:
            raise ValueError(f"Unknown development trait '{self.dev_trait}'")

    @property
    def group(self) -> str:
        return POSITION_GROUPS[self.position]

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def injured(self) -> bool:
        return self.injury_weeks > 0

    @property
    def overall(self) -> int:
        return calculate_overall(self)

    def rating_pool(self) -> Dict[str, int]:
        """Every rating the weight tables can reference, by name."""
        pool = dict(asdict(self.physical))
        pool.update(asdict(self.mental))
        pool.update(self.attributes.ratings())
        return pool

    def to_dict(self) -> dict:
        return {
            "player_id": self.player_id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "position": self.position,
            "physical": asdict(self.physical),
            "mental": asdict(self.mental),
            "attributes": self.attributes.to_dict(),
            "dev_trait": self.dev_trait,
            "stars": self.stars,
            "potential": self.potential,
            "age": self.age,
            "year": self.year,
            "height": self.height,
            "weight": self.weight,
            "nickname": self.nickname,
            "injury_weeks": self.injury_weeks,
            "games_played": self.games_played,
            "games_started": self.games_started,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Player":
        data = dict(d)
        data["physical"] = PhysicalAttributes(**d["physical"])
        data["mental"] = MentalAttributes(**d["mental"])
        data["attributes"] = attributes_from_dict(d["attributes"])
        return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})


def calculate_overall(player: Player) -> int:
    """Weighted mean of the ratings the player's group table names.

    Weights for ratings the player lacks are dropped and the rest renormalised.
    Clamped to OVR_MIN..OVR_MAX; 50 when nothing applies.
    """
    weights = POSITION_WEIGHTS[player.group]
    pool = player.rating_pool()
    total = 0.0
    weight_sum = 0.0
    for attr, w in weights.items():
        value = pool.get(attr)
        if value is None:
            continue
        total += value * w
        weight_sum += w
    if weight_sum == 0:
        return 50
    return max(OVR_MIN, min(OVR_MAX, round(total / weight_sum)))


# ──────────────────────────────────────────────
# GENERATION TABLES
# ──────────────────────────────────────────────

TIER_MEANS = {5: 82, 4: 72, 3: 62, 2: 52, 1: 45}

LEVEL_TIER_SHIFT = {"nfl": 1, "fbs-p5": 0, "fbs-g5": 0, "fcs": -1}

# Physical modifiers by group: (speed, strength, agility)
GROUP_PHYSICAL_MODS: Dict[str, Tuple[int, int, int]] = {
    "QB": (-5, 0, 0),
    "RB": (5, 0, 8),
    "WR": (10, 0, 5),
    "TE": (0, 3, 0),
    "OL": (-15, 12, -10),
    "DL": (-8, 10, 0),
    "LB": (0, 5, 0),
    "DB": (8, 0, 8),
    "K": (-10, 0, 0),
    "P": (-10, 0, 0),
}

# Offset from the tier mean for each bundle attribute; a tuple adds variance.
_BUNDLE_OFFSETS: Dict[str, Dict[str, object]] = {
    "QB": {
        "throw_power": 0, "throw_accuracy_short": 3, "throw_accuracy_mid": 0,
        "throw_accuracy_deep": -5, "throw_on_run": -3, "play_action": 0,
        "poise": 0, "release": 0,
    },
    "RB": {
        "carrying": 5, "break_tackle": 0, "trucking": 0, "elusiveness": 2,
        "spin_move": 0, "juke_move": 0, "stiff_arm": 0, "ball_carrier_vision": 0,
        "catching": -5, "pass_block": -10,
    },
    "WR": {
        "catching": 3, "catch_in_traffic": 0, "spectacular_catch": (-5, 20), "release": 0,
        "route_running": 0, "short_routes": 2, "medium_routes": 0, "deep_routes": -2,
    },
    "TE": {
        "catching": 0, "catch_in_traffic": 2, "spectacular_catch": (-8, 20), "release": -3,
        "route_running": -3, "run_block": 0, "pass_block": -3,
    },
    "OL": {
        "run_block": 0, "run_block_power": 0, "run_block_finesse": -2, "pass_block": 0,
        "pass_block_power": 0, "pass_block_finesse": -2, "lead_block": -3, "impact_blocking": 0,
    },
    "DL": {
        "tackling": 0, "hit_power": 2, "block_shedding": 0, "power_moves": 0,
        "finesse_moves": -2, "pursuit": -3, "play_recognition": -2,
    },
    "LB": {
        "tackling": 3, "hit_power": 2, "pursuit": 0, "play_recognition": 0,
        "zone_coverage": -3, "man_coverage": -6, "block_shedding": 0,
    },
    "DB": {
        "tackling": -3, "hit_power": -3, "man_coverage": 0, "zone_coverage": 0,
        "press": -2, "play_recognition": 0, "pursuit": 2, "catching": -3,
    },
    "K": {"kick_power": 0, "kick_accuracy": 0},
    "P": {"kick_power": 0, "kick_accuracy": 0},
}

_POTENTIAL_BONUS = {"superstar": 12, "star": 8, "normal": 4, "slow": 2}

# (height range inches, weight range lbs)
PHYSICAL_RANGES: Dict[str, Tuple[Tuple[int, int], Tuple[int, int]]] = {
    "QB": ((72, 78), (195, 245)), "RB": ((67, 73), (185, 235)), "FB": ((70, 75), (230, 260)),
    "WR": ((69, 77), (170, 220)), "TE": ((74, 79), (235, 270)),
    "LT": ((76, 80), (295, 340)), "LG": ((74, 79), (300, 345)), "C": ((73, 78), (290, 320)),
    "RG": ((74, 79), (300, 345)), "RT": ((76, 80), (295, 340)),
    "DE": ((74, 79), (250, 290)), "DT": ((73, 78), (285, 340)), "NT": ((72, 76), (310, 360)),
    "OLB": ((73, 77), (225, 260)), "ILB": ((72, 76), (230, 255)), "MLB": ((72, 76), (235, 260)),
    "CB": ((69, 75), (175, 210)), "FS": ((70, 75), (185, 215)), "SS": ((71, 76), (195, 225)),
    "K": ((69, 75), (175, 210)), "P": ((71, 77), (195, 225)), "LS": ((73, 77), (235, 260)),
}


# ──────────────────────────────────────────────
# GENERATION
# ──────────────────────────────────────────────

def generate_attribute(rng: random.Random, mean: float, variance: float = 15) -> int:
    value = mean + rng.gauss(0.0, 1.0) * variance / 2
    return max(ATTR_MIN, min(ATTR_MAX, round(value)))


def roll_stars(rng: random.Random) -> int:
    stars = list(STAR_DISTRIBUTION)
    return rng.choices(stars, weights=[STAR_DISTRIBUTION[s] for s in stars], k=1)[0]


def roll_dev_trait(rng: random.Random, tier: int) -> str:
    roll = rng.random()
    superstar = 0.02 + (tier - 1) * 0.03
    star = superstar + 0.08 + (tier - 1) * 0.05
    normal = star + 0.40
    if roll < superstar:
        return "superstar"
    if roll < star:
        return "star"
    if roll < normal:
        return "normal"
    return "slow"


def college_year_for_age(age: int) -> str:
    if age <= 18:
        return "FR"
    if age == 19:
        return "SO"
    if age == 20:
        return "JR"
    if age == 21:
        return "SR"
    return "RS-SR"


def _generate_physical(rng: random.Random, group: str, mean: int) -> PhysicalAttributes:
    speed_mod, strength_mod, agility_mod = GROUP_PHYSICAL_MODS[group]
    return PhysicalAttributes(
        speed=generate_attribute(rng, mean + speed_mod),
        acceleration=generate_attribute(rng, mean + speed_mod * 0.5),
        strength=generate_attribute(rng, mean + strength_mod),
        agility=generate_attribute(rng, mean + agility_mod),
        jumping=generate_attribute(rng, mean),
        stamina=generate_attribute(rng, mean + 5),
        injury=generate_attribute(rng, mean + 5),
        toughness=generate_attribute(rng, mean),
    )


def _generate_mental(rng: random.Random, mean: int) -> MentalAttributes:
    return MentalAttributes(
        awareness=generate_attribute(rng, mean),
        clutch=generate_attribute(rng, mean, 20),
        consistency=generate_attribute(rng, mean),
    )


def _generate_bundle(rng: random.Random, position: str, mean: int) -> PositionAttributes:
    group = POSITION_GROUPS[position]
    values = {}
    for attr, spec in _BUNDLE_OFFSETS[group].items():
        if isinstance(spec, tuple):
            offset, variance = spec
            values[attr] = generate_attribute(rng, mean + offset, variance)
        else:
            values[attr] = generate_attribute(rng, mean + spec)
    if group == "QB" and rng.random() < 0.25:
        values["carrying"] = generate_attribute(rng, mean - 5)
        values["break_tackle"] = generate_attribute(rng, mean - 8)
    if position == "OLB" and rng.random() < 0.5:
        values["power_moves"] = generate_attribute(rng, mean - 3)
        values["finesse_moves"] = generate_attribute(rng, mean - 3)
    return ATTRIBUTE_CLASSES[group](**values)


def generate_player(
    position: str,
    level: str,
    rng: random.Random,
    tier: Optional[int] = None,
    age: Optional[int] = None,
    year: int = 1995,
    player_id: Optional[str] = None,
) -> Player:
    """
    Generate one player.

    Args:
        position: one of POSITIONS
        level: "fbs-p5" | "fbs-g5" | "fcs" | "nfl" (shifts the talent tier)
        rng: seeded Random
        tier: 1-5 talent tier; rolled from STAR_DISTRIBUTION when omitted
        age: defaults to 18 in college, 22 in the NFL
        year: calendar year (drives the first-name pool)
        player_id: defaults to an rng-derived hex id
    """
    group = position_group(position)
    stars = tier if tier is not None else roll_stars(rng)
    effective = max(1, min(5, stars + LEVEL_TIER_SHIFT.get(level, 0)))
    mean = TIER_MEANS[effective]

    first, last = generate_name(year, rng)
    physical = _generate_physical(rng, group, mean)
    mental = _generate_mental(rng, mean)
    bundle = _generate_bundle(rng, position, mean)

    (h_lo, h_hi), (w_lo, w_hi) = PHYSICAL_RANGES[position]
    if age is None:
        age = 22 if level == "nfl" else 18

    player = Player(
        player_id=player_id or f"p{rng.getrandbits(40):010x}",
        first_name=first,
        last_name=last,
        position=position,
        physical=physical,
        mental=mental,
        attributes=bundle,
        dev_trait=roll_dev_trait(rng, effective),
        stars=None if level == "nfl" else stars,
        age=age,
        year="PRO" if level == "nfl" else college_year_for_age(age),
        height=rng.randint(h_lo, h_hi),
        weight=rng.randint(w_lo, w_hi),
        nickname=generate_nickname(rng),
    )
    ovr = player.overall
    player.potential = min(OVR_MAX, ovr + rng.randint(5, 10 + _POTENTIAL_BONUS[player.dev_trait]))
    return player


def generate_recruit(position: str, rng: random.Random, year: int = 1995,
                     stars: Optional[int] = None) -> Player:
    """High-school prospect: star rating rolled from the national distribution."""
    if stars is None:
        stars = roll_stars(rng)
    return generate_player(position, "fbs-p5", rng, tier=stars, age=18, year=year)


# ──────────────────────────────────────────────
# DEVELOPMENT
# ──────────────────────────────────────────────

_TRAIT_RATE = {"slow": 0.5, "normal": 1.0, "star": 1.5, "superstar": 2.0}


def development_gain(player: Player, rng: random.Random) -> int:
    """OVR points a player is due this offseason, capped by remaining potential."""
    room = max(0, player.potential - player.overall)
    if room == 0:
        return 0
    age_mult = 1.2 if player.age <= 20 else 1.0 if player.age <= 22 else 0.7
    base = rng.random() * 3 + 1
    return min(room, round(base * _TRAIT_RATE[player.dev_trait] * age_mult))


def apply_development(player: Player, rng: random.Random) -> int:
    """Raise the ratings the player's weight table uses; returns the OVR delta."""
    before = player.overall
    gain = development_gain(player, rng)
    if gain > 0:
        for attr in POSITION_WEIGHTS[player.group]:
            for holder in (player.physical, player.mental, player.attributes):
                value = getattr(holder, attr, None)
                if value is not None:
                    setattr(holder, attr, min(ATTR_MAX, value + gain))
                    break
    # late-career physical decline
    if player.age >= 31:
        drop = rng.randint(1, 3)
        for attr in ("speed", "acceleration", "agility"):
            setattr(player.physical, attr,
                    max(ATTR_MIN, getattr(player.physical, attr) - drop))
    return player.overall - before
