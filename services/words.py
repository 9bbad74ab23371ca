# services/words.py
from __future__ import annotations
import random
from typing import List, Optional, Sequence

from app.errors import WordSupplyError

# Short, common lowercase words; every entry is a single ASCII token.
DICTIONARY = (
    "the", "be", "to", "of", "and", "in", "that", "have", "it", "for",
    "not", "on", "with", "he", "as", "you", "do", "at", "this", "but",
    "his", "by", "from", "they", "we", "say", "her", "she", "or", "an",
    "will", "my", "one", "all", "would", "there", "their", "what", "so", "up",
    "out", "if", "about", "who", "get", "which", "go", "me", "when", "make",
    "can", "like", "time", "no", "just", "him", "know", "take", "people", "into",
    "year", "your", "good", "some", "could", "them", "see", "other", "than", "then",
    "now", "look", "only", "come", "its", "over", "think", "also", "back", "after",
    "use", "two", "how", "our", "work", "first", "well", "way", "even", "new",
    "want", "because", "any", "these", "give", "day", "most", "us", "great", "need",
    "feel", "high", "still", "every", "right", "next", "play", "small", "number", "again",
    "world", "area", "course", "under", "hand", "place", "case", "week", "point", "group",
    "home", "away", "part", "each", "life", "always", "before", "never", "study", "must",
    "old", "night", "state", "turn", "follow", "cat", "dog", "sun", "tree", "river",
    "stone", "light", "green", "water", "house", "road", "train", "paper", "music", "story",
    "table", "chair", "window", "garden", "market", "city", "field", "bird", "fish", "horse",
    "apple", "bread", "salt", "milk", "rain", "snow", "wind", "cloud", "star", "moon",
    "fast", "slow", "quick", "quiet", "loud", "warm", "cold", "bright", "dark", "early",
    "late", "open", "close", "begin", "end", "start", "stop", "move", "run", "walk",
    "read", "write", "speak", "listen", "learn", "teach", "build", "break", "carry", "hold",
)


class WordSupplier:
    def __init__(self, dictionary: Optional[Sequence[str]] = None, rng: Optional[random.Random] = None):
        self.dictionary = tuple(DICTIONARY if dictionary is None else dictionary)
        self.rng = rng or random.Random()

    def next_words(self, n: int) -> List[str]:
        if n < 0:
            raise WordSupplyError(f"cannot supply {n} words")
        if not self.dictionary:
            raise WordSupplyError("dictionary is empty")
        return [self.rng.choice(self.dictionary) for _ in range(n)]

    def next_word(self) -> str:
        return self.next_words(1)[0]


_default = WordSupplier()


def next_words(n: int) -> List[str]:
    return _default.next_words(n)
