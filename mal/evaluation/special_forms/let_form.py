from mal import EvaluatorFn
from mal import SExpression, LispValue
from mal.errors import MalformedSpecialForm
from mal.types.environment import Environment
from mal.types.sequences import List, Vector
from mal.types.symbol import Symbol


def let_form(
    form: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (let* (name1 expr1 name2 expr2 ...) body)

    Pairs are evaluated left to right in one child scope, so later bindings see
    earlier ones. The bindings may be bracketed as a list or a vector.
    """
    if len(form) != 3 or not isinstance(form[1], (List, Vector)):
        raise MalformedSpecialForm(form, "expected (let* (symbol value ...) body)")

    _, bindings, body = form
    if len(bindings) % 2:
        raise MalformedSpecialForm(form, "let* bindings need an even number of forms")

    scope = Environment(outer=env)
    for name, val_expr in zip(bindings[::2], bindings[1::2]):
        if not isinstance(name, Symbol):
            raise MalformedSpecialForm(form, "let* binding names must be symbols")
        scope.set(name, evaluate_fn(val_expr, scope))
    return evaluate_fn(body, scope)
