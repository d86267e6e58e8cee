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

from ..tokens import Number, Operator, Symbol
from ..presentation import format_rpn


def _is_token_list(obj):
    return isinstance(obj, list) and obj and all(isinstance(t, (Number, Operator, Symbol)) for t in obj)

def pytest_assertrepr_compare(op, left, right):
    if op == '==' and _is_token_list(left) and _is_token_list(right):
        return [
            f'Token sequence comparison failed.',
            f'    Left:  {format_rpn(left)}',
            f'    Right: {format_rpn(right)}', ]


# store report in node object so print_on_error can determine if the test failed.
@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    rep = outcome.get_result()
    setattr(item, f'rep_{rep.when}', rep)

