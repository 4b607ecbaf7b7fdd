# Core type aliases for the schemer data model.
# Every runtime datum is a `schemer.types.value.Value`; the aliases below keep
# reader and evaluator signatures readable.
#
# Naming guidance:
# - SExpression: forms as produced by the reader (code-as-data).
# - LispValue:  evaluated results.
# Both resolve to Value.

from typing import Callable

from schemer.types.value import Value

LispValue = Value
SExpression = Value

# Evaluator function type passed into special forms
EvaluatorFn = Callable[..., LispValue]
