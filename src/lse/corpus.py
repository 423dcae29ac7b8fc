"""Read the text inputs of an index build: document list, noise words, documents."""

from pathlib import Path


def read_tokens(path: Path, kind: str = "document") -> list[str]:
    """Return the whitespace-separated tokens of a text file.

    Bytes that are not valid UTF-8 decode to U+FFFD, so their tokens never
    pass as keywords. Raises FileNotFoundError, or OSError when the file exists
    but cannot be read, naming `kind` (e.g. "noise-word list") and the path.
    """
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except FileNotFoundError as e:
        raise FileNotFoundError(f"{kind} not found: {path}") from e
    except OSError as e:
        raise OSError(f"{kind} cannot be opened: {path} ({e.strerror})") from e
    return text.split()


def read_noise_words(path: Path) -> set[str]:
    return {word.lower() for word in read_tokens(path, "noise-word list")}


def read_document_list(path: Path) -> list[str]:
    return read_tokens(path, "document list")


def resolve_document(name: str, base_dir: Path) -> Path:
    """Locate a listed document: beside the document list first, then as given."""
    path = Path(name)
    if path.is_absolute():
        return path
    candidate = base_dir / path
    return candidate if candidate.exists() else path
