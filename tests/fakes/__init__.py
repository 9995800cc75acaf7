"""Test doubles for the Notion API."""

from tests.fakes.notion import FakeNotionWorkspace


__all__ = ["FakeNotionWorkspace"]
