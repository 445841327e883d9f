from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError

from match_analyzer.core.errors import QueryLoadError
from match_analyzer.query.models import Query


def parse_query(text: str | bytes) -> Query:
    """Validate a JSON query document. Raises pydantic's ValidationError."""

    return Query.model_validate_json(text)


def load_query(path: Path) -> Query:
    try:
        text = path.read_bytes()
    except OSError as exc:
        raise QueryLoadError(path, str(exc)) from exc

    try:
        return parse_query(text)
    except ValidationError as exc:
        raise QueryLoadError(path, str(exc)) from exc
