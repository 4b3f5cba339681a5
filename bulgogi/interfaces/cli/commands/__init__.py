"""
Commands package.
"""

from .clean_cli import cmd_clean
from .generate_cli import cmd_generate
from .init_cli import cmd_init
from .module_cli import cmd_module_add, cmd_module_rm
from .tree_cli import cmd_tree

__all__ = [
    "cmd_clean",
    "cmd_generate",
    "cmd_init",
    "cmd_module_add",
    "cmd_module_rm",
    "cmd_tree",
]
