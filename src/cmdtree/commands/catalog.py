"""
Command shapes for the FlowDB interactive shell.

Each class is the typed argument set of one shell command. The handlers
that act on these values live with the embedding application; this module
only declares the shapes and their registrations.
"""

from pydantic import Field

from cmdtree.core.config import ParserConfig
from cmdtree.structure.registry import CommandRegistry
from cmdtree.structure.shapes import CommandShape


# tables
class TableInfo(CommandShape):
    name: str = ""


class ListTables(CommandShape):
    pass


# s3 profiles
class S3Help(CommandShape):
    pass


class S3List(CommandShape):
    pass


class S3Add(CommandShape):
    name: str = ""


class S3Delete(CommandShape):
    name: str = ""


# queries
class RangeCommand(CommandShape):
    """Row range selection shared by head, query and delete."""

    table: str = ""
    prefix: str = ""
    from_: str = Field(default="", alias="from")
    to: str = ""
    limit: int = 0


class Head(RangeCommand):
    pass


class Query(RangeCommand):
    pass


class Delete(RangeCommand):
    pass


# backup / restore
class S3Backup(CommandShape):
    pass


class S3Restore(CommandShape):
    pass


class Stats(CommandShape):
    pass


# config
class ConfigHelp(CommandShape):
    pass


class ShowConfig(CommandShape):
    pass


class ResetConfig(CommandShape):
    pass


class SetConfig(CommandShape):
    addr: str = ""


FlowCommand = (
    TableInfo
    | ListTables
    | S3Help
    | S3List
    | S3Add
    | S3Delete
    | Stats
    | Head
    | Query
    | Delete
    | S3Backup
    | S3Restore
    | ConfigHelp
    | ShowConfig
    | ResetConfig
    | SetConfig
)

FLOW_COMMAND_SHAPES: tuple[type[CommandShape], ...] = (
    TableInfo,
    ListTables,
    S3Help,
    S3List,
    S3Add,
    S3Delete,
    Stats,
    Head,
    Query,
    Delete,
    S3Backup,
    S3Restore,
    ConfigHelp,
    ShowConfig,
    ResetConfig,
    SetConfig,
)


def register_flow_commands(registry: CommandRegistry) -> CommandRegistry:
    """Register every FlowDB shell command on an existing registry."""
    # tables
    registry.register("table", TableInfo)
    registry.register("tables", ListTables)

    # s3 profiles
    registry.register_many(S3Help, "s3", "s3 help", "s3 h")
    registry.register("s3 list", S3List)
    registry.register("s3 add", S3Add)
    registry.register("s3 delete", S3Delete)

    # stats + queries
    registry.register("stats", Stats)
    registry.register("head", Head)
    registry.register("query", Query)
    registry.register("delete", Delete)

    # backup / restore
    registry.register("backup", S3Backup)
    registry.register("restore", S3Restore)

    # config
    registry.register_many(ConfigHelp, "config", "config help", "config h")
    registry.register("config show", ShowConfig)
    registry.register("config set", SetConfig)
    registry.register("config reset", ResetConfig)
    return registry


def build_default_registry(config: ParserConfig | None = None) -> CommandRegistry:
    """Create a new registry holding the FlowDB shell commands."""
    return register_flow_commands(CommandRegistry(config))
