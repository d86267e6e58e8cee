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
shuntyard.utils
===============
**Error conditions and warnings**

Every failure of the converter or the evaluator is reported as a subclass of :py:class:`ExpressionError`. Lenient
handling of questionable input, such as a number literal with trailing garbage, is reported through :py:mod:`warnings`
instead.
"""

class NumberFormatWarning(Warning):
    """ A number literal was not a clean decimal integer and was parsed leniently. """
    pass

class OverflowWarning(Warning):
    """ An intermediate or final result left the signed 64-bit range and was wrapped around. """
    pass


class ExpressionError(ValueError):
    """ Base class of all conditions raised while converting or evaluating an expression. """
    pass


class MismatchedParenthesis(ExpressionError):
    """ A closing parenthesis has no matching opening parenthesis, or an opening parenthesis is never closed.

    Conversion stops at the offending token. :py:attr:`partial` holds the output stack as it was at that point, so the
    caller can decide whether it is of any use.
    """

    def __init__(self, msg, partial=(), position=None):
        super().__init__(msg)
        #: Best-effort postfix output produced before the failure
        self.partial = list(partial)
        #: Index of the offending token in the input, or ``None`` if the input ran out with parentheses still open
        self.position = position


class DivisionByZero(ExpressionError, ZeroDivisionError):
    """ A binary ``/`` was evaluated with a zero right-hand side. """
    pass


class UnknownOperator(ExpressionError):
    """ An operator symbol outside of ``+ - * / !`` or an operator used with an arity it does not support. """

    def __init__(self, msg, symbol=None):
        super().__init__(msg)
        self.symbol = symbol


class MalformedExpression(ExpressionError):
    """ The postfix stack ran out of operands, held a non-value token in value position, or had tokens left over. """
    pass


class IntegerOverflow(ExpressionError, OverflowError):
    """ A result left the signed 64-bit range while the overflow policy is ``'raise'``. """
    pass

