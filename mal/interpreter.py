from __future__ import annotations

import logging

from mal import LispValue
from mal.builtin.env_builtin import make_root_env
from mal.errors import MalError, NestingTooDeep, ParseError
from mal.evaluation.evaluator import evaluate
from mal.printer import to_text
from mal.reader.parser import read_forms
from mal.reader.tokenizer import Tokenizer
from mal.types.nil import Nil
from mal.types.environment import Environment

logger = logging.getLogger(__name__)

ERROR_PREFIX = "[ERROR] "


class Interpreter:
    """
    Reads and evaluates mal code against one root Environment.
    Definitions persist across calls; a failing form leaves earlier bindings intact.
    """

    def __init__(self, env: Environment | None = None):
        self.env: Environment = env if env is not None else make_root_env()

    def eval(self, code: str) -> LispValue:
        """Evaluate every form in `code` and return the last value (Nil if none).

        Errors propagate as MalError subclasses.
        """
        result: LispValue = Nil
        tokens = Tokenizer(code)
        try:
            for expr in read_forms(tokens):
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug("evaluating %s", to_text(expr))
                result = evaluate(expr, self.env)
        except RecursionError:
            raise NestingTooDeep() from None
        return result

    def rep(self, line: str) -> list[str]:
        """Read, evaluate and print each form of `line`.

        Returns one output line per form: the printed value, or an
        ``[ERROR] message`` line. An evaluation error moves on to the next form;
        a read error ends the line since the token stream can no longer be trusted.
        """
        outputs: list[str] = []
        forms = read_forms(Tokenizer(line))
        while True:
            try:
                expr = next(forms)
            except StopIteration:
                break
            except RecursionError:
                outputs.append(ERROR_PREFIX + str(NestingTooDeep()))
                break
            except ParseError as e:
                logger.debug("read error: %r", e)
                outputs.append(ERROR_PREFIX + str(e))
                break
            try:
                outputs.append(self._eval_print(expr))
            except RecursionError:
                outputs.append(ERROR_PREFIX + str(NestingTooDeep()))
        return outputs

    def _eval_print(self, expr: LispValue) -> str:
        # Rendering the value or the error message may recurse as deeply as evaluation.
        try:
            return to_text(evaluate(expr, self.env))
        except MalError as e:
            logger.debug("evaluation error: %s", type(e).__name__)
            return ERROR_PREFIX + str(e)
