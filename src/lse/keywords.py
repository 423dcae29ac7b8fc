"""Turn raw whitespace-separated tokens into index keywords."""

from collections.abc import Container

PUNCTUATION = frozenset(".,?:;!")


def get_keyword(word: str, noise_words: Container[str] = frozenset()) -> str | None:
    """Return the keyword for `word`, or None if it is not one.

    A keyword is the lower-cased word with any trailing run of punctuation
    (. , ? : ; !) stripped. It must consist only of letters and must not be a
    noise word.

    get_keyword("Rain.")     -> "rain"
    get_keyword("word?!?!")  -> "word"
    get_keyword("wo!rd")     -> None
    get_keyword("it's")      -> None
    """
    word = word.lower()
    end = len(word)
    for i, ch in enumerate(word):
        if ch in PUNCTUATION:
            if not all(rest in PUNCTUATION for rest in word[i + 1 :]):
                return None
            end = i
            break
        if not ch.isalpha():
            return None
    keyword = word[:end]
    if not keyword or keyword in noise_words:
        return None
    return keyword
