"""Application services used by the paste use cases."""

from pastebox.application.services.key_generator import (
    KeyGenerator,
    WordLists,
    load_word_lists,
)

__all__ = ["KeyGenerator", "WordLists", "load_word_lists"]
