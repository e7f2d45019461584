"""Name and college lookup for generated players."""

import random
from typing import Optional

from prospect.core.sampling import chance, random_element, resolve_rng

FIRST_NAMES = [
    "James", "John", "Michael", "David", "Chris", "Matt", "Josh", "Ryan",
    "Tyler", "Brandon", "Justin", "Marcus", "Antonio", "DeShawn", "Malik",
    "Jamal", "Terrell", "Andre", "Darius", "Lamar", "Patrick", "Tom",
    "Aaron", "Derek", "Caleb", "Jalen", "Trevor", "Zach", "Drake", "Isaiah",
    "Cooper", "Chase", "Devin", "Quentin", "Elijah", "Xavier", "Tre",
    "Travis", "George", "Mark", "Derrick", "Keenan", "Alvin", "Nick",
]

LAST_NAMES = [
    "Johnson", "Williams", "Brown", "Jones", "Davis", "Miller", "Wilson",
    "Moore", "Taylor", "Anderson", "Thomas", "Jackson", "White", "Harris",
    "Martin", "Thompson", "Robinson", "Clark", "Lewis", "Walker", "Hall",
    "Allen", "Young", "King", "Wright", "Hill", "Scott", "Green", "Adams",
    "Baker", "Nelson", "Carter", "Mitchell", "Perez", "Roberts", "Turner",
    "Phillips", "Campbell", "Parker", "Evans", "Edwards", "Collins", "Stewart",
]

# The first POWER_CONFERENCE_COUNT entries are power-conference programs
COLLEGES = [
    "Alabama", "Georgia", "Ohio State", "Michigan", "Clemson", "LSU",
    "Texas", "USC", "Oklahoma", "Oregon", "Penn State", "Notre Dame",
    "Florida", "Tennessee", "Auburn", "Miami", "Florida State", "Wisconsin",
    "Texas A&M", "UCLA", "Stanford", "Washington", "Michigan State", "Iowa",
    "Nebraska", "TCU", "Baylor", "Kansas State", "Ole Miss", "Arkansas",
    "South Carolina", "Kentucky", "Missouri", "Virginia Tech", "North Carolina",
    "NC State", "Pittsburgh", "Louisville", "Utah", "Colorado",
    "Cincinnati", "UCF", "Houston", "Memphis", "SMU", "Tulane", "Boise State",
    "San Diego State", "Fresno State", "Air Force", "Appalachian State",
    "Marshall", "James Madison", "Liberty", "Toledo", "Buffalo",
    "North Dakota State", "South Dakota State", "Montana", "Montana State",
    "Eastern Washington", "UC Davis", "Delaware", "Villanova",
]

POWER_CONFERENCE_COUNT = 40
POWER_CONFERENCE_SHARE = 0.75


def generate_full_name(rng: Optional[random.Random] = None) -> tuple[str, str]:
    """Return a random (first_name, last_name) pair."""
    rng = resolve_rng(rng)
    return random_element(FIRST_NAMES, rng), random_element(LAST_NAMES, rng)


def generate_college(rng: Optional[random.Random] = None) -> str:
    """Pick a college, weighted toward power-conference programs."""
    rng = resolve_rng(rng)
    if chance(POWER_CONFERENCE_SHARE, rng):
        return random_element(COLLEGES[:POWER_CONFERENCE_COUNT], rng)
    return random_element(COLLEGES, rng)
