"""
FlowDB shell command catalog and dispatch.

This package contains the concrete command shapes of the FlowDB shell, the
default registry that maps command paths to them, and the dispatcher that
routes parsed values to handlers.
"""

from cmdtree.commands.catalog import (
    FLOW_COMMAND_SHAPES,
    ConfigHelp,
    Delete,
    FlowCommand,
    Head,
    ListTables,
    Query,
    RangeCommand,
    ResetConfig,
    S3Add,
    S3Backup,
    S3Delete,
    S3Help,
    S3List,
    S3Restore,
    SetConfig,
    ShowConfig,
    Stats,
    TableInfo,
    build_default_registry,
    register_flow_commands,
)
from cmdtree.commands.dispatch import CommandDispatcher, Handler

__all__ = [
    "FLOW_COMMAND_SHAPES",
    "FlowCommand",
    "RangeCommand",
    "TableInfo",
    "ListTables",
    "S3Help",
    "S3List",
    "S3Add",
    "S3Delete",
    "Stats",
    "Head",
    "Query",
    "Delete",
    "S3Backup",
    "S3Restore",
    "ConfigHelp",
    "ShowConfig",
    "ResetConfig",
    "SetConfig",
    "build_default_registry",
    "register_flow_commands",
    "CommandDispatcher",
    "Handler",
]
