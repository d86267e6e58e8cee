#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Copyright 2023 Jan Sebastian Götte <gerbonara@jaseg.de>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#

"""
shuntyard.convert
=================
**Infix to postfix conversion**

Single left-to-right pass of Dijkstra's shunting-yard algorithm over a flat token sequence. The output is a plain list
used as a stack: tokens are appended in postfix reading order, so popping from its end yields them in reverse. That is
exactly the order :py:func:`shuntyard.evaluate.evaluate_stack` consumes them in.
"""

from .tokens import Number, Operator, Symbol, is_open_paren, is_close_paren
from .utils import MismatchedParenthesis, MalformedExpression


def _is_sign(token, previous):
    """ A ``+`` or ``-`` is a sign rather than an addition/subtraction when nothing precedes it, or when it directly
    follows another operator or an opening parenthesis. """
    if token.symbol not in ('+', '-'):
        return False
    return previous is None or isinstance(previous, Operator) or is_open_paren(previous)

def _should_pop(top, current):
    if top.precedence < current.precedence:
        return False
    if top.precedence == current.precedence and not current.left_associative:
        return False
    return True


def shunting_yard(tokens):
    """ Convert ``tokens`` from infix to postfix order.

    ``+`` and ``-`` operators found in sign position are reclassified **in place** as unary and right-associative, so
    do not share operator tokens between expressions that are converted concurrently.

    :param tokens: Iterable of :py:class:`.Number`, :py:class:`.Operator` and :py:class:`.Symbol` tokens in infix order.
    :returns: list of tokens in postfix order, without any parentheses.
    :raises MismatchedParenthesis: if parentheses do not balance. The exception's ``partial`` attribute holds the
        output produced up to that point.
    :raises MalformedExpression: on tokens of an unknown kind, or symbols other than parentheses.
    """
    output = []
    operators = []
    previous = None

    for position, token in enumerate(tokens):
        match token:
            case Number():
                output.append(token)

            case Symbol() if is_open_paren(token):
                operators.append(token)

            case Operator():
                if _is_sign(token, previous):
                    token.unary = True
                    token.left_associative = False

                while operators and not is_open_paren(operators[-1]) and _should_pop(operators[-1], token):
                    output.append(operators.pop())

                operators.append(token)

            case Symbol() if is_close_paren(token):
                while operators and not is_open_paren(operators[-1]):
                    output.append(operators.pop())

                if not operators:
                    raise MismatchedParenthesis(f'Closing parenthesis at position {position} has no matching opening '
                            'parenthesis', partial=output, position=position)

                operators.pop()

            case Symbol():
                raise MalformedExpression(f'Unexpected symbol {token.value!r} at position {position}')

            case _:
                raise MalformedExpression(f'Not a token: {token!r} at position {position}')

        previous = token

    while operators:
        if is_open_paren(top := operators.pop()):
            raise MismatchedParenthesis('Opening parenthesis is never closed',
                    partial=output + [t for t in reversed(operators) if not is_open_paren(t)], position=None)
        output.append(top)

    return output

infix_to_postfix = shunting_yard

