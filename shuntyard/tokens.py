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
shuntyard.tokens
================
**Lexical atoms of an arithmetic expression**

An expression is a flat sequence of three kinds of tokens: :py:class:`Number` literals, :py:class:`Operator` tokens and
parenthesis :py:class:`Symbol` tokens. Tokens are built by whatever produced the expression (see
:py:mod:`shuntyard.fixtures`) and are consumed by :py:func:`shuntyard.convert.shunting_yard`.
"""

import re
import warnings
from dataclasses import dataclass

from .utils import NumberFormatWarning, UnknownOperator
from .settings import EvaluationSettings


@dataclass(frozen=True, slots=True)
class Number:
    ''' An integer literal. The literal is kept as text and resolved to an integer on demand. '''
    text: str

    def to_int(self, settings=None):
        """ Resolve the literal the way C's ``atoll`` does: skip leading whitespace, accept an optional sign, then
        consume as many decimal digits as possible. Text without any leading digits resolves to ``0``. Anything that is
        not a clean decimal integer triggers a :py:class:`.NumberFormatWarning`.

        :param settings: :py:class:`.EvaluationSettings` whose overflow policy is applied to out-of-range literals.
        :rtype: int
        """
        if not (match := re.match(r'[ \t\n\v\f\r]*([+-]?[0-9]+)', self.text)):
            warnings.warn(f'Number literal {self.text!r} contains no digits, using 0', NumberFormatWarning)
            return 0

        if match.end() != len(self.text) or match.start(1) != 0:
            warnings.warn(f'Number literal {self.text!r} is not a clean decimal integer, using {match[1]}',
                    NumberFormatWarning)

        value = int(match[1])
        return (settings or EvaluationSettings()).coerce(value)

    @property
    def value(self):
        return self.to_int()

    def __str__(self):
        return f"('Number': '{self.text}')"


@dataclass(slots=True)
class Operator:
    ''' An operator token. Higher :py:attr:`precedence` binds tighter.

    .. note::
        :py:attr:`left_associative` and :py:attr:`unary` are mutable. A ``+`` or ``-`` is only known to
        be a sign once the converter has seen the token before it, and the converter flips these two fields in place
        when that is the case. After conversion they must be treated as fixed.
    '''
    symbol: str
    precedence: int = 1
    left_associative: bool = True
    unary: bool = False

    @property
    def arity(self):
        return 1 if self.unary else 2

    def __str__(self):
        return f"('Operator': '{self.symbol}', {'unary' if self.unary else 'binary'})"


@dataclass(frozen=True, slots=True)
class Symbol:
    ''' Punctuation. Only ``"("`` and ``")"`` mean anything to the converter. '''
    value: str

    def __str__(self):
        return f"('Symbol': '{self.value}')"


Token = Number | Operator | Symbol

#: symbol -> (precedence, left_associative, unary)
OPERATORS = {
    '+': (1, True, False),
    '-': (1, True, False),
    '*': (2, True, False),
    '/': (2, True, False),
    '!': (2, False, True),
}


def op(symbol, precedence=None, left_associative=None, unary=None):
    """ Create a fresh :py:class:`Operator` for ``symbol`` using the default attributes from :py:data:`OPERATORS`.
    Any attribute given explicitly overrides the default.

    Always create a new operator per expression, since the converter mutates operators in place.
    """
    try:
        default_prec, default_left, default_unary = OPERATORS[symbol]
    except KeyError:
        raise UnknownOperator(f'Unknown operator {symbol!r}, supported operators are {" ".join(OPERATORS)}',
                symbol=symbol) from None

    return Operator(symbol,
            default_prec if precedence is None else precedence,
            default_left if left_associative is None else left_associative,
            default_unary if unary is None else unary)

def num(value):
    return Number(str(value))

def lparen():
    return Symbol('(')

def rparen():
    return Symbol(')')

def is_open_paren(token):
    return isinstance(token, Symbol) and token.value == '('

def is_close_paren(token):
    return isinstance(token, Symbol) and token.value == ')'

