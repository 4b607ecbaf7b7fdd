from __future__ import annotations
from typing import Literal

from schemer import LispValue
from schemer.builtin.env_builtin import register
from schemer.evaluation.evaluator import evaluate
from schemer.printer import render
from schemer.reader.parser import Reader
from schemer.types.environment import Environment
from schemer.types.value import VOID, Kind


class Interpreter:
    """
    Orchestrates reading and evaluating schemer code.
    Maintains the root Environment and a Reader across calls, so definitions
    made by one call are visible to the next.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        self.env: Environment = Environment()
        register(self.env)
        self.reader = Reader()

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            try:
                # Lazy import keeps config resolution out of module import time
                from schemer.modules.prelude_loader import load_prelude
                load_prelude(self)
            except FileNotFoundError:
                # Be permissive: no prelude found -> proceed
                pass
        elif prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        for _ in self._evaluate_forms(code):
            pass

    def _evaluate_forms(self, code: str):
        self.reader.load(code)
        for form in self.reader:
            yield evaluate(form, self.env)

    def eval_all(self, code: str) -> list[LispValue]:
        """Evaluate every top-level form in `code`, returning all results in order."""
        return list(self._evaluate_forms(code))

    def eval(self, code: str) -> LispValue:
        """Evaluate every top-level form in `code` and return the last result."""
        results = self.eval_all(code)
        if not results:
            return VOID
        return results[-1]

    def run(self, code: str) -> list[str]:
        """Rendered results as a driver would display them; void and failures show nothing."""
        return [render(r) for r in self.eval_all(code) if r.kind is not Kind.INVALID]
