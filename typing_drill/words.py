from __future__ import annotations

import random
from typing import List, Optional, Sequence


# ---------------------------
# Word source (offline)
# ---------------------------

VOCABULARY = [
    "a", "about", "above", "after", "again", "air", "all", "almost", "also", "always",
    "among", "an", "and", "animal", "another", "answer", "any", "around", "ask", "away",
    "back", "because", "before", "begin", "below", "best", "between", "big", "bird", "black",
    "boat", "body", "book", "both", "bread", "bright", "bring", "brother", "build", "but",
    "call", "came", "can", "car", "carry", "cat", "change", "child", "city", "clean",
    "close", "cold", "color", "come", "company", "could", "country", "course", "cover", "cross",
    "dark", "day", "deep", "different", "dog", "door", "down", "draw", "dream", "drive",
    "each", "early", "earth", "east", "eat", "end", "enough", "even", "every", "example",
    "eye", "face", "fact", "fall", "family", "far", "farm", "fast", "feel", "few",
    "field", "find", "fire", "first", "fish", "floor", "flower", "fly", "follow", "food",
    "forest", "found", "free", "friend", "from", "full", "garden", "give", "glass", "go",
    "good", "great", "green", "ground", "group", "grow", "hand", "happy", "hard", "head",
    "hear", "heavy", "help", "here", "high", "hill", "hold", "home", "horse", "house",
    "idea", "island", "just", "keep", "kind", "king", "know", "lake", "land", "large",
    "last", "late", "laugh", "learn", "leave", "letter", "life", "light", "line", "listen",
    "little", "live", "long", "look", "love", "machine", "made", "make", "many", "map",
    "mark", "may", "mean", "might", "mile", "money", "moon", "more", "morning", "mountain",
    "move", "much", "music", "must", "name", "near", "need", "never", "new", "next",
    "night", "north", "number", "ocean", "often", "old", "once", "only", "open", "other",
    "over", "paper", "part", "people", "picture", "place", "plain", "plant", "play", "point",
    "problem", "program", "question", "quick", "quiet", "rain", "read", "ready", "red", "river",
    "road", "rock", "room", "round", "run", "said", "same", "saw", "school", "science",
    "sea", "second", "see", "seem", "ship", "short", "show", "simple", "sing", "sister",
    "sleep", "slow", "small", "snow", "song", "soon", "sound", "south", "space", "stand",
    "star", "start", "still", "stone", "story", "street", "strong", "study", "summer", "sun",
    "system", "table", "take", "talk", "teacher", "tell", "thing", "think", "through", "time",
    "today", "together", "town", "travel", "tree", "true", "try", "turn", "under", "until",
    "use", "very", "voice", "wait", "walk", "want", "warm", "watch", "water", "way",
    "weather", "week", "west", "wheel", "white", "whole", "wind", "window", "winter", "with",
    "wonder", "wood", "word", "work", "world", "write", "year", "yellow", "young", "zero",
]


def vocabulary() -> List[str]:
    return VOCABULARY[:]


def random_words(count: int, rng: Optional[random.Random] = None) -> List[str]:
    rng = rng or random
    return rng.choices(VOCABULARY, k=count)


def sentence(words: Sequence[str], end: str = ".") -> str:
    """Capitalise the first word, join with spaces and terminate with `end`."""
    if not words:
        return ""
    first = words[0][:1].upper() + words[0][1:]
    return " ".join([first, *words[1:]]) + end


def random_text(
    sentences: int = 5,
    words_per_sentence: int = 5,
    rng: Optional[random.Random] = None,
) -> str:
    parts = [sentence(random_words(words_per_sentence, rng)) for _ in range(sentences)]
    return " ".join(parts)
