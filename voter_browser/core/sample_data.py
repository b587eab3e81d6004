from __future__ import annotations

from typing import List, Optional

import numpy as np

from voter_browser.core.voter import FEMALE, MALE, OTHER, Voter

MUNICIPALITIES = [
    "Banepa Municipality",
    "Dhulikhel Municipality",
    "Panauti Municipality",
    "Panchkhal Municipality",
    "Namobuddha Municipality",
]

MALE_FIRST_NAMES = [
    "Ram", "Shyam", "Hari", "Krishna", "Bishnu", "Ganesh", "Suresh", "Rajesh",
    "Manoj", "Sanjay", "Deepak", "Prakash", "Nabin", "Roshan", "Anil",
    "Bikash", "Dinesh", "Gopal", "Kiran", "Mohan", "Narayan", "Prem",
    "Raju", "Santosh", "Tilak", "Umesh", "Yogesh", "Binod", "Dilli", "Himal",
]

FEMALE_FIRST_NAMES = [
    "Sita", "Gita", "Rita", "Mina", "Anita", "Sunita", "Kamala", "Sarita",
    "Pramila", "Laxmi", "Durga", "Maya", "Nirmala", "Sabina", "Rekha",
    "Bindu", "Devi", "Jamuna", "Kopila", "Radha", "Shanti", "Tulsi",
    "Uma", "Yamuna", "Bimala", "Chanda", "Indira", "Kanchi", "Parbati", "Sushila",
]

LAST_NAMES = [
    "Shrestha", "Tamang", "Maharjan", "Dangol", "Shakya", "Bajracharya",
    "Lama", "Thapa", "Gurung", "Magar", "Rai", "Limbu", "Newar",
    "Karmacharya", "Manandhar", "Pradhan", "Rajbhandari", "Tuladhar",
    "Amatya", "Joshi", "Prajapati", "Duwal", "Chitrakar", "Singh", "Adhikari",
]

WARD_COUNT = 13
BOOTH_COUNT = 8
MIN_AGE = 18
AGE_SPAN = 62  # ages 18..79

# P(Female) = 0.48; otherwise Other with p=0.03, else Male
FEMALE_PROBABILITY = 0.48
OTHER_GIVEN_MALE_DRAW = 0.03
SPOUSE_PROBABILITY = 0.65

VOTER_ID_PREFIX = "KV1-"
PICTURE_TEMPLATE = "https://api.dicebear.com/7.x/initials/svg?seed={seed}&backgroundColor=2563eb"


def _pick(rng: np.random.Generator, pool: List[str]) -> str:
    return pool[int(rng.integers(len(pool)))]


def _draw_gender(rng: np.random.Generator) -> str:
    if rng.random() >= 1 - FEMALE_PROBABILITY:
        return FEMALE
    return OTHER if rng.random() < OTHER_GIVEN_MALE_DRAW else MALE


def generate_sample_voters(count: int, seed: Optional[int] = None) -> List[Voter]:
    """
    Generate `count` synthetic voters for demos and bootstrapping.

    Every municipality/ward/booth label comes from the fixed pools above.
    voter_id is a zero-padded sequence scoped to this batch (KV1-000001, ...).
    Pass `seed` for a reproducible batch.
    """
    rng = np.random.default_rng(seed)
    voters: List[Voter] = []

    for i in range(max(0, int(count))):
        gender = _draw_gender(rng)
        first_pool = FEMALE_FIRST_NAMES if gender == FEMALE else MALE_FIRST_NAMES
        first_name = _pick(rng, first_pool)
        last_name = _pick(rng, LAST_NAMES)
        municipality = _pick(rng, MUNICIPALITIES)
        ward_num = int(rng.integers(1, WARD_COUNT + 1))
        booth_num = int(rng.integers(1, BOOTH_COUNT + 1))
        age = MIN_AGE + int(rng.integers(AGE_SPAN))
        parent_name = f"{_pick(rng, MALE_FIRST_NAMES)} {last_name}"

        spouse = ""
        if rng.random() < SPOUSE_PROBABILITY:
            spouse_pool = FEMALE_FIRST_NAMES if gender == MALE else MALE_FIRST_NAMES
            spouse = f"{_pick(rng, spouse_pool)} {_pick(rng, LAST_NAMES)}"

        voters.append(
            Voter(
                voter_id=f"{VOTER_ID_PREFIX}{i + 1:06d}",
                name=f"{first_name} {last_name}",
                age=age,
                gender=gender,
                parent_name=parent_name,
                spouse=spouse,
                picture=PICTURE_TEMPLATE.format(seed=f"{first_name}+{last_name}"),
                municipality=municipality,
                ward=f"Ward {ward_num}",
                booth=f"Booth {booth_num}",
            )
        )

    return voters
