"""
CLI command implementations.
"""

from tabledeps.cli.commands.deps import cmd_deps
from tabledeps.cli.commands.export import cmd_export
from tabledeps.cli.commands.order import cmd_order
from tabledeps.cli.commands.show import cmd_show

__all__ = ["cmd_deps", "cmd_export", "cmd_order", "cmd_show"]
