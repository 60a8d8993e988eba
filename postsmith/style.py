"""Style corpus lookup."""

import json
from pathlib import Path

from .config import STYLE_CORPUS_FILE


class StyleCorpusError(Exception):
    """The style corpus file is missing or malformed."""


class UnknownStyleError(StyleCorpusError):
    """The requested archetype is not in the corpus."""


def load_style_corpus(path: Path | None = None) -> dict:
    """Read and validate style_corpus.json (defaults to the bundled corpus)."""
    path = Path(path) if path else STYLE_CORPUS_FILE
    try:
        corpus = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise StyleCorpusError(f"Cannot read style corpus {path}: {e}") from e
    except ValueError as e:
        raise StyleCorpusError(f"Invalid JSON in style corpus {path}: {e}") from e

    if not isinstance(corpus, dict) or not isinstance(corpus.get("archetypes"), dict):
        raise StyleCorpusError(f"Style corpus {path} has no 'archetypes' object")
    return corpus


def list_styles(corpus: dict) -> list[str]:
    return sorted(corpus["archetypes"])


def get_archetype(corpus: dict, name: str) -> dict:
    """Return hooks/structures/ctas for an archetype, each as a list of strings."""
    entry = corpus["archetypes"].get(name)
    if not isinstance(entry, dict):
        raise UnknownStyleError(f"Invalid style selected: {name!r}")

    archetype = {}
    for key in ("hooks", "structures", "ctas"):
        values = entry.get(key, [])
        archetype[key] = [str(v) for v in values] if isinstance(values, list) else []
    return archetype
