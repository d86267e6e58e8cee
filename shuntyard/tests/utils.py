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

import pytest

from ..tokens import op, num, lparen, rparen


@pytest.fixture
def print_on_error(request):
    messages = []

    def register_print(*args, sep=' ', end='\n'):
        nonlocal messages
        messages.append(sep.join(str(arg) for arg in args) + end)

    yield register_print

    if request.node.rep_call.failed:
        for msg in messages:
            print(msg, end='')


def infix(*atoms):
    """ Shorthand for building token lists in tests: ints become numbers, "(" and ")" become symbols and every other
    string becomes a default operator. """
    tokens = []
    for atom in atoms:
        if isinstance(atom, int):
            tokens.append(num(atom))
        elif atom == '(':
            tokens.append(lparen())
        elif atom == ')':
            tokens.append(rparen())
        else:
            tokens.append(op(atom))
    return tokens

