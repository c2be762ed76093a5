from ezscheme.builtin.registry import BuiltinRegistry
from ezscheme.builtin.env_builtin import default_registry

__all__ = ["BuiltinRegistry", "default_registry"]
