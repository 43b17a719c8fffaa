"""Customer identity helpers for synthetic data."""

import random

FIRST_NAMES = [
    "alex", "sam", "jordan", "taylor", "morgan", "casey", "riley", "jamie",
    "avery", "quinn", "rowan", "skyler", "drew", "reese", "kai", "emery",
]

LAST_NAMES = [
    "smith", "garcia", "chen", "okafor", "novak", "silva", "patel", "kim",
    "nguyen", "muller", "rossi", "dubois", "haddad", "ivanova", "lopez",
]

EMAIL_DOMAINS = ["example.com", "mail.test", "inbox.test"]


def random_email(rng: random.Random) -> str:
    first = rng.choice(FIRST_NAMES)
    last = rng.choice(LAST_NAMES)
    return f"{first}.{last}{rng.randint(1, 999)}@{rng.choice(EMAIL_DOMAINS)}"
