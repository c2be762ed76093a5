# Core type aliases for the ezscheme data model.
# Parsed code and runtime data share one representation: Nil, Boolean, Number,
# Symbol, String, Pair, Closure and Builtin (see ezscheme.types). The aliases
# below are for annotations only.
#
# - SExpression: use in reader/desugaring code for forms (code-as-data).
# - Value: use in evaluator/runtime code for evaluated values.

from typing import Any, Callable

Value = Any
SExpression = Value

# Native procedure: already-evaluated arguments in, one value out
NativeFn = Callable[[list[Value]], Value]

__version__ = "0.1.0"

from ezscheme.interpreter import Interpreter, interpret_code  # noqa: E402
from ezscheme.reader.parser import parse  # noqa: E402
from ezscheme.printer import to_repr  # noqa: E402
