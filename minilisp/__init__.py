# Core type aliases for the MiniLisp data model.
# Code and data share one closed representation: Number | Symbol | List
# (see minilisp.types.value). The aliases below are used in annotations.
#
# Naming guidance:
# - SExpression: Use in reader/parser code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both resolve to the same union.

from typing import Callable

from minilisp.types.value import Value

# Runtime value alias
LispValue = Value
# Forms alias (used interchangeably with LispValue)
SExpression = Value

# Evaluator function type: passed into special forms
EvaluatorFn = Callable[..., LispValue]
