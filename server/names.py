# names.py
"""Random display names for uploaded schematics, e.g. "BraveAmberOtter"."""

from __future__ import annotations

import random

ADJECTIVES = (
    "able", "agile", "ancient", "bold", "brave", "bright", "calm", "clever", "cosmic",
    "crisp", "curious", "daring", "eager", "early", "fancy", "fierce", "gentle", "giant",
    "glad", "grand", "happy", "hidden", "humble", "jolly", "keen", "kind", "lively",
    "lucky", "mighty", "modest", "noble", "odd", "patient", "proud", "quick", "quiet",
    "rapid", "rare", "rustic", "shiny", "silent", "sleepy", "smooth", "solid", "swift",
    "tidy", "tiny", "vast", "vivid", "wild", "wise", "witty", "young", "zealous",
)

COLORS = (
    "amber", "aqua", "azure", "beige", "black", "blue", "bronze", "brown", "coral",
    "crimson", "cyan", "emerald", "gold", "gray", "green", "indigo", "ivory", "jade",
    "lavender", "lime", "magenta", "maroon", "mint", "navy", "olive", "orange", "peach",
    "pink", "plum", "purple", "red", "rose", "ruby", "salmon", "scarlet", "silver",
    "tan", "teal", "turquoise", "violet", "white", "yellow",
)

ANIMALS = (
    "alpaca", "badger", "bat", "bear", "beaver", "bison", "camel", "cat", "cobra",
    "crab", "crow", "deer", "dolphin", "eagle", "ferret", "finch", "fox", "frog",
    "gecko", "goat", "gorilla", "hawk", "hedgehog", "heron", "ibis", "jaguar", "koala",
    "lemur", "lion", "llama", "lynx", "mole", "moose", "newt", "otter", "owl", "panda",
    "parrot", "pelican", "penguin", "puma", "rabbit", "raven", "salmon", "seal", "shark",
    "sloth", "snail", "spider", "squid", "swan", "tiger", "toad", "walrus", "whale",
    "wolf", "wombat", "yak", "zebra",
)

DICTIONARIES = (ADJECTIVES, COLORS, ANIMALS)


def generate_name(rng: random.Random | None = None) -> str:
    """One capitalized word from each dictionary, no separator."""
    rng = rng or random.Random()
    return "".join(rng.choice(words).capitalize() for words in DICTIONARIES)
