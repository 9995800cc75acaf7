"""Builders for Notion query filter trees and sort specifications.

A database query accepts one filter object: either a single property
predicate or a compound ``{"and": [...]}`` / ``{"or": [...]}`` node.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any


Filter = dict[str, Any]
Sort = dict[str, str]


class SortDirection(StrEnum):
    """Sort directions accepted by the query API."""

    ASCENDING = "ascending"
    DESCENDING = "descending"


def select_equals(prop: str, value: str) -> Filter:
    return {"property": prop, "select": {"equals": value}}


def multi_select_contains(prop: str, value: str) -> Filter:
    return {"property": prop, "multi_select": {"contains": value}}


def title_contains(prop: str, value: str) -> Filter:
    return {"property": prop, "title": {"contains": value}}


def relation_contains(prop: str, page_id: str) -> Filter:
    return {"property": prop, "relation": {"contains": page_id}}


def and_(conditions: list[Filter]) -> Filter | None:
    """Combine conditions conjunctively.

    Returns None for an empty list so callers can omit the filter entirely.
    """
    if not conditions:
        return None
    return {"and": list(conditions)}


def or_(conditions: list[Filter]) -> Filter | None:
    """Combine conditions disjunctively; None for an empty list."""
    if not conditions:
        return None
    return {"or": list(conditions)}


def sort_by_property(prop: str, direction: SortDirection) -> Sort:
    return {"property": prop, "direction": str(direction)}


def sort_by_created_time(direction: SortDirection = SortDirection.DESCENDING) -> Sort:
    return {"timestamp": "created_time", "direction": str(direction)}
