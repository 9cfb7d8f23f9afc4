"""Postfix expression evaluation and bracket balance checking."""

from collections.abc import Callable, Mapping

_OPERATORS: dict[str, Callable[[float, float], float]] = {
    "+": lambda left, right: left + right,
    "-": lambda left, right: left - right,
    "*": lambda left, right: left * right,
    "/": lambda left, right: left / right,
    "^": lambda left, right: left ** right,
}

_PAIRS = {"(": ")", "{": "}", "[": "]"}


def evaluate_postfix(expression: str, values: Mapping[str, float]) -> float:
    """Evaluate a postfix ``expression`` whose operands are single letters.

    Each letter takes its value from ``values``; the operators are
    ``+ - * / ^``. Whitespace is ignored.
    """
    stack: list[float] = []
    for symbol in expression:
        if symbol.isspace():
            continue
        operation = _OPERATORS.get(symbol)
        if operation is not None:
            if len(stack) < 2:
                raise ValueError(f"operator {symbol!r} lacks operands")
            right = stack.pop()
            left = stack.pop()
            stack.append(operation(left, right))
        elif symbol.isalpha():
            try:
                stack.append(float(values[symbol]))
            except KeyError:
                raise ValueError(f"no value given for {symbol!r}") from None
        else:
            raise ValueError(f"unexpected symbol {symbol!r}")
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


def is_matching(opening: str, closing: str) -> bool:
    """Return whether ``closing`` closes the bracket ``opening``."""
    return _PAIRS.get(opening) == closing


def is_balanced(text: str) -> bool:
    """Return whether every bracket in ``text`` is closed in the right order.

    Any character that is not an opening bracket is treated as a closing one.
    """
    stack: list[str] = []
    for symbol in text:
        if symbol in _PAIRS:
            stack.append(symbol)
        elif not stack or not is_matching(stack[-1], symbol):
            return False
        else:
            stack.pop()
    return not stack