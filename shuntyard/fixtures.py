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
shuntyard.fixtures
==================
**Ready-made token sequences and a JSON interchange format for tokens**

The fixtures are factories rather than constants because the converter mutates operator tokens in place. Every call
returns fresh tokens.
"""

import json

from .tokens import Number, Operator, Symbol, OPERATORS, op, num, lparen, rparen
from .utils import MalformedExpression


def precedence_example():
    """ ``4 + 2 * (3 - 1)``, which is 8. Ignoring precedence and parentheses would give 17. """
    return [num(4), op('+'), num(2), op('*'), lparen(), num(3), op('-'), num(1), rparen()]

def unary_not_example():
    """ ``4 - !1``, which is ``4 - 0`` = 4 """
    return [num(4), op('-'), op('!'), num(1)]

def unary_minus_example():
    """ ``-6 + 2 * (-3 - 1)``, which is ``-6 + 2 * -4`` = -14 """
    return [op('-'), num(6), op('+'), num(2), op('*'), lparen(), op('-'), num(3), op('-'), num(1), rparen()]

FIXTURES = {
    'precedence': precedence_example,
    'unary-not': unary_not_example,
    'unary-minus': unary_minus_example,
}


def token_to_json(token):
    match token:
        case Number(text):
            return {'number': text}
        case Symbol(value):
            return {'symbol': value}
        case Operator(symbol, precedence, left_associative, unary):
            return {'operator': symbol, 'precedence': precedence, 'left_associative': left_associative, 'unary': unary}
        case _:
            raise TypeError(f'Cannot serialize {token!r}, not a token')

def token_from_json(obj):
    if not isinstance(obj, dict):
        raise MalformedExpression(f'Token must be a JSON object, not {obj!r}')

    if 'number' in obj:
        return Number(str(obj['number']))

    elif 'symbol' in obj:
        if obj['symbol'] not in ('(', ')'):
            raise MalformedExpression(f'Symbol must be "(" or ")", not {obj["symbol"]!r}')
        return Symbol(obj['symbol'])

    elif 'operator' in obj:
        symbol = obj['operator']
        if not isinstance(symbol, str):
            raise MalformedExpression(f'Operator symbol must be a string, not {symbol!r}')
        # bool is a subclass of int, but true is not a precedence
        if (prec := obj.get('precedence')) is not None and (isinstance(prec, bool) or not isinstance(prec, int)):
            raise MalformedExpression(f'Operator precedence must be an integer, not {prec!r}')
        for key in ('left_associative', 'unary'):
            if (flag := obj.get(key)) is not None and not isinstance(flag, bool):
                raise MalformedExpression(f'Operator attribute "{key}" must be true or false, not {flag!r}')

        if symbol in OPERATORS:
            return op(symbol, obj.get('precedence'), obj.get('left_associative'), obj.get('unary'))
        # Unknown symbols are only rejected by the evaluator
        return Operator(symbol, obj.get('precedence', 1), obj.get('left_associative', True), obj.get('unary', False))

    else:
        raise MalformedExpression(f'Token object needs one of the keys "number", "symbol" or "operator": {obj!r}')

def tokens_to_json(tokens):
    return [token_to_json(token) for token in tokens]

def tokens_from_json(data):
    """ Load a token list from parsed JSON data, or from a JSON string. """
    if isinstance(data, str):
        try:
            data = json.loads(data)
        except json.JSONDecodeError as e:
            raise MalformedExpression(f'Invalid token JSON: {e}') from e

    if not isinstance(data, list):
        raise MalformedExpression('Token JSON must be a list of token objects')

    return [token_from_json(obj) for obj in data]

