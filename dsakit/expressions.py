"""Converting infix expressions to postfix and prefix notation."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

_POSTFIX_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2}
_PREFIX_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2, "^": 3}


def _convert(chars: Iterable[str], precedence: Mapping[str, int]) -> str:
    output: list[str] = []
    operators: list[str] = []
    for ch in chars:
        if ch.isalnum():
            output.append(ch)
        elif ch == "(":
            operators.append(ch)
        elif ch == ")":
            while operators and operators[-1] != "(":
                output.append(operators.pop())
            if not operators:
                raise ValueError("unmatched ')' in expression")
            operators.pop()
        elif ch in precedence:
            while operators and precedence.get(operators[-1], 0) >= precedence[ch]:
                output.append(operators.pop())
            operators.append(ch)
    if "(" in operators:
        raise ValueError("unmatched '(' in expression")
    output.extend(reversed(operators))
    return "".join(output)


def infix_to_postfix(expression: str) -> str:
    """Return ``expression`` in postfix form.

    Operands are single letters or digits; the operators are ``+ - * /``.
    Other characters, such as spaces, are skipped.
    """
    return _convert(expression, _POSTFIX_PRECEDENCE)


def infix_to_prefix(expression: str) -> str:
    """Return ``expression`` in prefix form.

    Operands are single letters or digits; the operators are ``+ - * / ^``.
    The expression is reversed with its parentheses swapped, converted as for
    postfix, and the result reversed. Other characters are skipped.
    """
    mirrored = expression[::-1].translate(str.maketrans("()", ")("))
    return _convert(mirrored, _PREFIX_PRECEDENCE)[::-1]