"""
Name pools for generated players and coaches.

First names drift with the era a player was born into; last names are a
single national pool.  Everything takes the caller's seeded rng.
"""

from __future__ import annotations

import random
from typing import List, Optional, Tuple

_FIRST_NAMES_CLASSIC = [
    "Michael", "Chris", "Jason", "David", "James", "John", "Robert", "Brian",
    "Kevin", "Eric", "Marcus", "Anthony", "Derrick", "Travis", "Corey", "Shawn",
    "Terrell", "Lamar", "Curtis", "Tony", "Greg", "Ricky", "Dwayne", "Byron",
]

_FIRST_NAMES_MODERN = [
    "Tyler", "Brandon", "Justin", "Jordan", "Austin", "Caleb", "Jalen", "Trey",
    "Devonte", "Dylan", "Kyle", "Tre", "Isaiah", "Malik", "Xavier", "Cameron",
    "Darius", "Jaylen", "Elijah", "Bryce", "Mason", "Zach", "Deshawn", "Quinton",
]

_FIRST_NAMES_CURRENT = [
    "Jayden", "Bryson", "Kaden", "Jaxon", "Carson", "Ja'Marr", "Tyreek", "Cade",
    "Bo", "Kendrick", "Malachi", "Jahmyr", "Drake", "Brock", "Zion", "Micah",
    "Kyler", "Trevor", "Caden", "Josiah", "Amari", "Keon", "Bijan", "Nolan",
]

_LAST_NAMES = [
    "Johnson", "Williams", "Smith", "Brown", "Jones", "Davis", "Miller", "Wilson",
    "Moore", "Taylor", "Anderson", "Thomas", "Jackson", "White", "Harris", "Martin",
    "Thompson", "Robinson", "Walker", "Young", "Allen", "King", "Wright", "Scott",
    "Green", "Baker", "Adams", "Nelson", "Hill", "Campbell", "Mitchell", "Roberts",
    "Carter", "Phillips", "Evans", "Turner", "Parker", "Collins", "Edwards", "Stewart",
    "Morris", "Murphy", "Cook", "Rogers", "Reed", "Bailey", "Bell", "Howard",
    "Ward", "Cox", "Richardson", "Brooks", "Sanders", "Price", "Bennett", "Wood",
    "Barnes", "Ross", "Henderson", "Coleman", "Jenkins", "Perry", "Powell", "Long",
]

NICKNAMES = [
    "Flash", "Tank", "Jet", "Rocket", "Freight Train", "Prime Time", "Money",
    "Big", "Slim", "Ice", "Hollywood", "Showtime", "Quiet Storm", "Philly",
    "Texas", "Motor City",
]

COACH_FIRST_NAMES = [
    "Bill", "Bob", "Jim", "Joe", "Mike", "Tom", "Dan", "Dave", "John", "Steve",
    "Nick", "Brian", "Gary", "Pete", "Ron", "Andy", "Sean", "Kyle", "Matt", "Mark",
    "Lincoln", "Ryan", "James", "Les", "Lou", "Bret", "Chip", "Dana", "Hal", "Rich",
]

COACH_LAST_NAMES = [
    "Hollister", "Brennan", "Kowalski", "Dempsey", "Fairbanks", "Maddox",
    "Whitlock", "Garrity", "Rourke", "Sandoval", "Pruitt", "Ashby", "Keane",
    "Lockhart", "Tillman", "Voss", "Harlan", "McCreary", "Stroud", "Bledsoe",
    "Calloway", "Dunleavy", "Everett", "Hendricks", "Lyle", "Oakes", "Pickett",
    "Rutledge", "Sweeney", "Wardell",
]


def _first_name_pool(year: int) -> List[str]:
    # birth cohort of an 18-22 year old in ``year``
    if year < 2005:
        return _FIRST_NAMES_CLASSIC + _FIRST_NAMES_MODERN[:8]
    if year < 2016:
        return _FIRST_NAMES_MODERN + _FIRST_NAMES_CLASSIC[:8]
    return _FIRST_NAMES_CURRENT + _FIRST_NAMES_MODERN[:8]


def generate_name(year: int, rng: random.Random) -> Tuple[str, str]:
    return rng.choice(_first_name_pool(year)), rng.choice(_LAST_NAMES)


def generate_nickname(rng: random.Random) -> Optional[str]:
    """About one in five players picks up a nickname."""
    if rng.random() >= 0.2:
        return None
    return rng.choice(NICKNAMES)


def generate_coach_name(rng: random.Random) -> str:
    return f"{rng.choice(COACH_FIRST_NAMES)} {rng.choice(COACH_LAST_NAMES)}"
