"""Property codec for Notion's typed-property envelopes.

Pure functions converting between a page property (``{"rich_text": [...]}``,
``{"select": {"name": ...}}``, ...) and a plain Python value. Decoders accept
``None`` for an absent property and never raise on missing or empty data.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any

import orjson


Property = Mapping[str, Any]

# "1. ", "12.", "3.   " at the start of a stored instruction line
_STEP_PREFIX = re.compile(r"^\d+\.\s*")
_LINE_BREAKS = re.compile(r"\n+")


# =============================================================================
# Text
# =============================================================================


def decode_text(prop: Property | None) -> str:
    """Concatenate the plain text of a rich_text or title property.

    Returns an empty string for an absent property or one with no runs.
    """
    if not prop:
        return ""
    runs = prop.get("rich_text")
    if runs is None:
        runs = prop.get("title")
    if not runs:
        return ""
    return "".join(run.get("plain_text", "") for run in runs)


def encode_text(value: str) -> list[dict[str, Any]]:
    """Wrap a string as a single text run."""
    return [{"type": "text", "text": {"content": value}}]


def encode_title(value: str) -> dict[str, Any]:
    return {"title": encode_text(value)}


def encode_rich_text(value: str) -> dict[str, Any]:
    return {"rich_text": encode_text(value)}


# =============================================================================
# Instructions (numbered-line convention inside one rich_text property)
# =============================================================================


def decode_instructions(text: str) -> list[str]:
    """Split stored instruction text into ordered steps.

    Lines are separated by one or more newlines. A leading ``"<n>. "`` is
    stripped by pattern, so a step whose own content starts with
    digits-dot-space loses that prefix. Lines empty after trimming are
    dropped.
    """
    if not text:
        return []
    steps = (_STEP_PREFIX.sub("", line).strip() for line in _LINE_BREAKS.split(text))
    return [step for step in steps if step]


def encode_instructions(steps: Iterable[str]) -> str:
    """Join steps as ``"1. first\\n2. second"``."""
    return "\n".join(f"{i}. {step}" for i, step in enumerate(steps, start=1))


# =============================================================================
# Select / multi-select
# =============================================================================


def decode_select(prop: Property | None) -> str:
    """Return the selected option name, or "" when unset."""
    if not prop:
        return ""
    option = prop.get("select")
    if not option:
        return ""
    return option.get("name") or ""


def encode_select(value: str | None) -> dict[str, Any]:
    """Encode a single option; an empty value clears the property."""
    if not value:
        return {"select": None}
    return {"select": {"name": value}}


def decode_multi_select(prop: Property | None) -> list[str]:
    """Return option names in store order, duplicates included."""
    if not prop:
        return []
    options = prop.get("multi_select") or []
    return [option["name"] for option in options if option.get("name")]


def encode_multi_select(values: Iterable[str]) -> dict[str, Any]:
    return {"multi_select": [{"name": value} for value in values]}


def decode_options(schema_prop: Property | None, kind: str) -> list[str]:
    """Return the configured option names of a select or multi_select schema.

    Args:
        schema_prop: Property entry from a database object's ``properties``.
        kind: ``"select"`` or ``"multi_select"``.

    Returns:
        Option names, or an empty list when the property or its options are
        missing.
    """
    if not schema_prop:
        return []
    config = schema_prop.get(kind) or {}
    options = config.get("options") or []
    return [option["name"] for option in options if option.get("name")]


# =============================================================================
# Number / URL
# =============================================================================


def decode_number(prop: Property | None) -> int:
    """Return the numeric value as int; absent or null decodes to 0."""
    if not prop:
        return 0
    value = prop.get("number")
    if value is None:
        return 0
    return int(value)


def encode_number(value: int | None) -> dict[str, Any]:
    return {"number": value}


def decode_url(prop: Property | None) -> str:
    if not prop:
        return ""
    return prop.get("url") or ""


def encode_url(value: str | None) -> dict[str, Any]:
    """Encode a URL; an empty value clears the property."""
    return {"url": value or None}


# =============================================================================
# Relation
# =============================================================================


def normalize_page_id(value: str) -> str:
    """Canonical form of a page id: dashes removed, lowercase.

    The store accepts ids with or without dashes and answers with the dashed
    form, so ids used as keys are compared in this form.
    """
    return value.replace("-", "").lower()


def decode_relation(prop: Property | None) -> list[str]:
    """Return referenced page ids in stored order."""
    if not prop:
        return []
    return [ref["id"] for ref in prop.get("relation") or [] if ref.get("id")]


def encode_relation(page_ids: Iterable[str]) -> dict[str, Any]:
    return {"relation": [{"id": page_id} for page_id in page_ids]}


# =============================================================================
# Ingredient amounts (JSON object inside a rich_text property)
# =============================================================================


def decode_amounts(prop: Property | None) -> dict[str, str]:
    """Decode the ingredient-id -> amount map, keyed by normalized id.

    Anything that is not a JSON object of strings decodes to an empty map.
    """
    text = decode_text(prop)
    if not text:
        return {}
    try:
        data = orjson.loads(text)
    except orjson.JSONDecodeError:
        return {}
    if not isinstance(data, dict):
        return {}
    return {
        normalize_page_id(str(key)): str(value)
        for key, value in data.items()
        if value is not None
    }


def encode_amounts(amounts: Mapping[str, str]) -> dict[str, Any]:
    """Encode the amount map under normalized ids, skipping empty amounts."""
    data = {normalize_page_id(key): value for key, value in amounts.items() if value}
    if not data:
        return {"rich_text": []}
    return encode_rich_text(orjson.dumps(data).decode())
