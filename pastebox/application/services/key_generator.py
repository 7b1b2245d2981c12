"""Human-readable paste keys drawn from adjective and noun word lists."""

from __future__ import annotations

import secrets
from dataclasses import dataclass
from pathlib import Path

from pastebox.domain.exceptions import WordListError

KEY_DELIMITER = "-"

# Characters a word may not contain: path separators (keys double as
# storage object names) and the key delimiter itself.
_FORBIDDEN_CHARS = frozenset({"/", "\\", "\x00", KEY_DELIMITER})


@dataclass(frozen=True)
class WordLists:
    """Immutable adjective and noun lists, loaded once per process."""

    adjectives: tuple[str, ...]
    nouns: tuple[str, ...]


def _read_words(path: str | Path) -> tuple[str, ...]:
    """Read a line-delimited word file, dropping blank lines."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise WordListError(str(path), str(e)) from e
    words = tuple(line.strip() for line in text.splitlines() if line.strip())
    if not words:
        raise WordListError(str(path), "no words")
    for word in words:
        if _FORBIDDEN_CHARS.intersection(word) or any(c.isspace() for c in word):
            raise WordListError(str(path), f"unusable word {word!r}")
    return words


def load_word_lists(adjectives_file: str | Path, nouns_file: str | Path) -> WordLists:
    """Load both word lists. Raises WordListError; callers treat that as fatal at startup."""
    return WordLists(
        adjectives=_read_words(adjectives_file),
        nouns=_read_words(nouns_file),
    )


class KeyGenerator:
    """Generates adjective-adjective-noun keys.

    Uniqueness is not checked here. With A adjectives and N nouns the key
    space holds A*A*N keys, so the chance that a new key collides with one
    of k live pastes is about k / keyspace_size. Two lists of a few hundred
    words keep that low but never zero; the metadata store's primary key is
    the final guard.
    """

    def __init__(self, word_lists: WordLists) -> None:
        self._words = word_lists
        self._rng = secrets.SystemRandom()

    @property
    def keyspace_size(self) -> int:
        """Number of distinct keys this generator can produce."""
        return len(self._words.adjectives) ** 2 * len(self._words.nouns)

    def generate(self) -> str:
        """Return a new key such as 'brave-quiet-otter'."""
        adj_a = self._rng.choice(self._words.adjectives)
        adj_b = self._rng.choice(self._words.adjectives)
        noun = self._rng.choice(self._words.nouns)
        return KEY_DELIMITER.join((adj_a, adj_b, noun))
