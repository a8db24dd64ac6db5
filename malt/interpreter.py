from __future__ import annotations

import logging
from typing import Iterator, Literal, Optional

from malt import LispValue
from malt.config import get_prelude_file
from malt.evaluation.evaluator import evaluate
from malt.printer import pr_str
from malt.reader.parser import lex, TokenStream
from malt.types.environment import Environment
from malt.types.nil import Nil
from malt.builtin.env_builtin import register

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating malt code.
    Keeps one root Environment across calls so definitions persist.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        self.env: Environment = Environment()
        register(self.env)

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            path = get_prelude_file()
            logger.debug("loading prelude from %s", path)
            self.eval_prelude(path.read_text(encoding='utf-8'))
        elif prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        for _ in self.eval_iter(code):
            pass

    def eval_iter(self, code: str) -> Iterator[LispValue]:
        """Read and evaluate the forms in `code` one at a time, yielding each result."""
        stream = TokenStream(lex(code))
        while (expr := stream.parse_expr()) is not None:
            yield evaluate(expr, self.env)

    def eval(self, code: str) -> LispValue:
        """Evaluate every form in `code`; return the last result, or Nil if there is none."""
        result: LispValue = Nil
        for result in self.eval_iter(code):
            pass
        return result

    def rep(self, code: str) -> Optional[str]:
        """Read, evaluate and print. Returns None when `code` holds no form."""
        printed: Optional[str] = None
        for value in self.eval_iter(code):
            printed = pr_str(value)
        return printed
