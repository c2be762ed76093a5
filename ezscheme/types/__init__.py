"""Value types for ezscheme.

The set of runtime values is closed: Nil, Boolean, Number, Symbol, String,
Pair, Closure and Builtin. Evaluator and builtins match on these classes
exhaustively.
"""

from ezscheme.types.nil import Nil, NilType
from ezscheme.types.symbol import Symbol
from ezscheme.types.atoms import Boolean, Number, String, TRUE, FALSE
from ezscheme.types.pair import Pair, from_list, to_list, is_list
from ezscheme.types.environment import Environment
from ezscheme.types.procedures import Closure, Builtin

SELF_EVALUATING = (Number, Boolean, String)

__all__ = [
    "Nil", "NilType", "Symbol", "Boolean", "Number", "String", "TRUE", "FALSE",
    "Pair", "from_list", "to_list", "is_list", "Environment", "Closure", "Builtin",
    "SELF_EVALUATING",
]
