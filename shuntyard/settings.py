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

import warnings
from dataclasses import dataclass

from .utils import IntegerOverflow, OverflowWarning

INT64_MIN = -2**63
INT64_MAX = 2**63 - 1


def wrap_int64(value):
    """ Reduce an arbitrary Python integer into the signed 64-bit range by two's complement wrap-around. """
    return ((value - INT64_MIN) % 2**64) + INT64_MIN


@dataclass
class EvaluationSettings:
    ''' Numeric behavior of the evaluator.

    .. note::
        Python integers are unbounded, while the expressions handled here are specified in terms of signed 64-bit
        integers. :py:attr:`overflow` decides what happens when a result does not fit.
    '''
    #: ``'wrap'`` reduces out-of-range results into the int64 range and emits an :py:class:`.OverflowWarning`.
    #: ``'raise'`` raises :py:class:`.IntegerOverflow` instead.
    overflow : str = 'wrap'
    #: ``'truncate'`` rounds integer quotients towards zero like C does, ``'floor'`` rounds towards negative infinity
    #: like Python's ``//``.
    division : str = 'truncate'

    # input validation
    def __setattr__(self, name, value):
        if name == 'overflow' and value not in ('wrap', 'raise'):
            raise ValueError(f'Overflow policy must be either "wrap" or "raise", not {value!r}')
        elif name == 'division' and value not in ('truncate', 'floor'):
            raise ValueError(f'Division mode must be either "truncate" or "floor", not {value!r}')

        super().__setattr__(name, value)

    def coerce(self, value):
        """ Apply the overflow policy to ``value``.

        :param int value: Any Python integer
        :returns: ``value`` if it fits into int64, otherwise the wrapped value.
        :rtype: int
        :raises IntegerOverflow: if ``value`` does not fit and :py:attr:`overflow` is ``'raise'``.
        """
        if INT64_MIN <= value <= INT64_MAX:
            return value

        if self.overflow == 'raise':
            raise IntegerOverflow(f'Result {value} does not fit into a signed 64-bit integer')

        wrapped = wrap_int64(value)
        warnings.warn(f'Result {value} does not fit into a signed 64-bit integer, wrapped to {wrapped}', OverflowWarning)
        return wrapped

    def divide(self, lhs, rhs):
        """ Integer division according to :py:attr:`division`. The caller is responsible for checking ``rhs != 0``. """
        if self.division == 'floor':
            return lhs // rhs

        quotient = abs(lhs) // abs(rhs)
        return quotient if (lhs < 0) == (rhs < 0) else -quotient

