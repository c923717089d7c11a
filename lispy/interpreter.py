from __future__ import annotations

import logging
from typing import Literal

from lispy import LispValue
from lispy.errors import LispyRecursionError
from lispy.reader.parser import parse, too_deep
from lispy.reader.reader import read
from lispy.evaluation.evaluator import evaluate
from lispy.types.environment import Environment
from lispy.types.error import Error
from lispy.types.expr import SExpr
from lispy.builtin.env_builtin import register

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating Lispy code.
    Maintains the global Environment across calls, so definitions persist.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        self.env: Environment = Environment()
        register(self.env)

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            # Lazy import to avoid circular imports
            from lispy.modules.prelude_loader import load_prelude
            try:
                load_prelude(self)
            except FileNotFoundError as ex:
                # Be permissive: no prelude found -> proceed
                logger.debug("No prelude loaded: %s", ex)
        elif prelude:
            self.eval_prelude(prelude)

    def read(self, code: str, filename: str = "<stdin>") -> SExpr:
        """Parse and read `code` into the root S-Expression of its forms.

        Raises LispySyntaxError if the text does not parse.
        """
        tree = parse(code, filename)
        try:
            return read(tree)
        except RecursionError:
            raise too_deep(filename) from None

    def eval_value(self, value: LispValue) -> LispValue:
        try:
            return evaluate(value, self.env)
        except RecursionError:
            return Error(
                "Maximum recursion depth exceeded.", LispyRecursionError.kind
            )

    def eval(self, code: str) -> LispValue:
        """Evaluate one line of input as a single top-level form.

        Like the prompt, the whole line is one implicit S-Expression, so
        `+ 1 2` and `(+ 1 2)` both give 3.
        """
        return self.eval_value(self.read(code))

    def eval_prelude(self, code: str, filename: str = "<prelude>") -> None:
        """Evaluate every top-level expression of a file on its own."""
        for form in self.read(code, filename):
            result = self.eval_value(form)
            if isinstance(result, Error):
                logger.warning("%s: %s", filename, result)
