"""Per-batch styling constraints shared by every pose of one batch."""

import random

from profashion.models import ConsistencyProfile

JEWELRY_OPTIONS = [
    "Minimalist Silver Jewelry (Thin bracelet, small stud earrings)",
    "Elegant Gold Jewelry (Gold watch, hoop earrings)",
    "Rose Gold Accessories",
    "No Jewelry / Clean Look",
]

FOOTWEAR_OPTIONS = [
    "Neutral Beige/Nude Heels or Flats",
    "Classic Black Footwear",
    "Clean White Minimalist Shoes",
    "Metallic Silver Shoes",
]

HANDBAG_OPTIONS = [
    "Matching Leather Clutch",
    "Minimalist Chain Bag",
    "Structured Tote Bag",
    "No Handbag",
]


def generate_profile(rng: random.Random | None = None) -> ConsistencyProfile:
    rng = rng or random.Random()
    return ConsistencyProfile(
        jewelry=rng.choice(JEWELRY_OPTIONS),
        footwear=rng.choice(FOOTWEAR_OPTIONS),
        handbag=rng.choice(HANDBAG_OPTIONS),
    )
