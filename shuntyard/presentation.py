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

from .tokens import Number, Operator, Symbol


def format_tokens(tokens):
    """ One token per line, in the same ``('Kind': 'value')`` notation the tokens' ``str`` uses. """
    return '\n'.join(str(token) for token in tokens)

def format_postfix(postfix):
    """ Render a postfix output stack top-first, i.e. in the order the evaluator pops it. """
    lines = ['----- Expression Output Stack -----']
    lines += [str(token) for token in reversed(postfix)]
    return '\n'.join(lines)

def _rpn_atom(token):
    match token:
        case Number(text):
            return text
        case Operator(symbol, unary=True) if symbol in ('+', '-'):
            # distinguish signs from addition and subtraction
            return f'{symbol}u'
        case Operator(symbol):
            return symbol
        case Symbol(value):
            return value

def format_rpn(postfix):
    """ Compact reverse polish notation, e.g. ``4 2 3 1 - * +``. Unary signs are written ``-u`` and ``+u``. """
    return ' '.join(_rpn_atom(token) for token in postfix)

