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
shuntyard.evaluate
==================
**Postfix evaluation**

Recursive reduction of a postfix token stack to a single integer. The token on top of the stack is the root of the
expression tree. For binary operators the first operand popped is the *right-hand* operand, since it was pushed last.
"""

from .tokens import Number, Operator
from .settings import EvaluationSettings
from .convert import shunting_yard
from .utils import DivisionByZero, UnknownOperator, MalformedExpression


def _apply_unary(token, rhs, settings):
    match token.symbol:
        case '!':
            return int(not rhs)
        case '+':
            return rhs
        case '-':
            return settings.coerce(-rhs)
        case symbol:
            raise UnknownOperator(f'Unknown unary operator {symbol!r}', symbol=symbol)

def _apply_binary(token, lhs, rhs, settings):
    match token.symbol:
        case '+':
            return settings.coerce(lhs + rhs)
        case '-':
            return settings.coerce(lhs - rhs)
        case '*':
            return settings.coerce(lhs * rhs)
        case '/':
            if rhs == 0:
                raise DivisionByZero(f'Division by zero in {lhs} / {rhs}')
            return settings.coerce(settings.divide(lhs, rhs))
        case symbol:
            raise UnknownOperator(f'Unknown binary operator {symbol!r}', symbol=symbol)


def _reduce(stack, settings):
    if not stack:
        raise MalformedExpression('Expression stack exhausted while an operand was expected')

    match (token := stack.pop()):
        case Number():
            return token.to_int(settings)

        case Operator(unary=True):
            rhs = _reduce(stack, settings)
            return _apply_unary(token, rhs, settings)

        case Operator():
            rhs = _reduce(stack, settings)
            lhs = _reduce(stack, settings)
            return _apply_binary(token, lhs, rhs, settings)

        case _:
            raise MalformedExpression(f'Expected a number or an operator, found {token}')


def evaluate_stack(stack, settings=None):
    """ Destructively evaluate a postfix stack as returned by :py:func:`.shunting_yard`.

    Tokens are popped off the end of ``stack``. After a successful call the stack is empty.

    :param list stack: postfix tokens, top of stack last
    :param settings: :py:class:`.EvaluationSettings`, or ``None`` for the defaults.
    :rtype: int
    :raises DivisionByZero: on ``x / 0``
    :raises UnknownOperator: on operators outside of ``+ - * / !``
    :raises MalformedExpression: on missing operands, stray symbols or leftover tokens
    """
    settings = settings or EvaluationSettings()

    try:
        result = _reduce(stack, settings)
    except RecursionError as e:
        raise MalformedExpression('Expression nested too deeply to evaluate') from e

    if stack:
        raise MalformedExpression(f'{len(stack)} token(s) left over after evaluation: '
                f'{" ".join(str(t) for t in stack)}')

    return result

def evaluate(postfix, settings=None):
    """ Evaluate a postfix sequence without modifying it. Evaluating the same sequence repeatedly yields the same
    result. See :py:func:`evaluate_stack` for the possible exceptions. """
    return evaluate_stack(list(postfix), settings)

def calculate(tokens, settings=None):
    """ Convert ``tokens`` from infix to postfix and evaluate them. """
    return evaluate(shunting_yard(tokens), settings)

