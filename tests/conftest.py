"""
Shared test fixtures and utilities for the cmdtree test suite.
"""

import pytest
from pydantic import Field, NonNegativeInt

from cmdtree import CommandParser, CommandRegistry, CommandShape
from cmdtree.commands import build_default_registry


class GroupHelp(CommandShape):
    """Shape registered under the bare group path and its help aliases."""

    pass


class GroupAdd(CommandShape):
    """Shape with one field of every supported semantic type."""

    name: str = ""
    verbose: bool = False
    limit: int = 0
    count: NonNegativeInt = 0
    source: str = Field(default="", alias="From")
    tags: list[str] = Field(default_factory=list)


@pytest.fixture
def group_registry():
    """Registry with a small command group: s3, s3 help, s3 h, s3 add."""
    registry = CommandRegistry()
    registry.register_many(GroupHelp, "s3", "s3 help", "s3 h")
    registry.register("s3 add", GroupAdd)
    return registry


@pytest.fixture
def group_parser(group_registry):
    """Parser bound to the small command group registry."""
    return CommandParser(group_registry)


@pytest.fixture
def flow_registry():
    """Registry holding the FlowDB shell commands."""
    return build_default_registry()


@pytest.fixture
def flow_parser(flow_registry):
    """Parser bound to the FlowDB shell registry."""
    return CommandParser(flow_registry)


@pytest.fixture
def group_add():
    """The GroupAdd shape class."""
    return GroupAdd


@pytest.fixture
def group_help():
    """The GroupHelp shape class."""
    return GroupHelp
