#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Copyright 2022 Jan Sebastian Götte <gerbonara@jaseg.de>
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
shuntyard
=========

shuntyard converts flat sequences of integer arithmetic tokens from infix to postfix (reverse polish) notation using
the shunting-yard algorithm, and evaluates the postfix form to a signed 64-bit integer. It understands the binary
operators ``+ - * /``, the unary operators ``+ - !`` and parentheses, and tells signs apart from addition and
subtraction by context.
"""

__version__ = '1.0.0'

from .tokens import Number, Operator, Symbol, Token, op, num, lparen, rparen
from .convert import shunting_yard, infix_to_postfix
from .evaluate import evaluate, evaluate_stack, calculate
from .settings import EvaluationSettings
from .utils import ExpressionError, MismatchedParenthesis, DivisionByZero, UnknownOperator, MalformedExpression
