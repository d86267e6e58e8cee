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

import json

import pytest

from ..tokens import Number, Operator, Symbol, op, num
from ..settings import EvaluationSettings, wrap_int64, INT64_MAX, INT64_MIN
from ..convert import shunting_yard
from ..evaluate import calculate
from ..fixtures import FIXTURES, tokens_to_json, tokens_from_json, precedence_example, unary_minus_example
from ..presentation import format_tokens, format_postfix, format_rpn
from ..utils import MalformedExpression, UnknownOperator, IntegerOverflow


class TestSettings:
    def test_defaults(self):
        settings = EvaluationSettings()
        assert settings.overflow == 'wrap'
        assert settings.division == 'truncate'

    @pytest.mark.parametrize('kwargs', [{'overflow': 'saturate'}, {'division': 'round'}, {'overflow': None}])
    def test_validation(self, kwargs):
        with pytest.raises(ValueError):
            EvaluationSettings(**kwargs)

    def test_validation_on_assignment(self):
        settings = EvaluationSettings()
        settings.division = 'floor'
        with pytest.raises(ValueError):
            settings.division = 'ceil'
        assert settings.division == 'floor'

    def test_coerce_in_range(self):
        settings = EvaluationSettings(overflow='raise')
        assert settings.coerce(INT64_MAX) == INT64_MAX
        assert settings.coerce(INT64_MIN) == INT64_MIN
        with pytest.raises(IntegerOverflow):
            settings.coerce(INT64_MIN - 1)

    def test_wrap_int64(self):
        assert wrap_int64(INT64_MAX + 1) == INT64_MIN
        assert wrap_int64(INT64_MIN - 1) == INT64_MAX
        assert wrap_int64(2**64 + 5) == 5
        assert wrap_int64(-3) == -3


class TestFixtures:
    def test_fixture_values(self):
        assert {name: calculate(factory()) for name, factory in FIXTURES.items()} == {
                'precedence': 8, 'unary-not': 4, 'unary-minus': -14}

    def test_fixtures_are_fresh(self):
        tokens = unary_minus_example()
        shunting_yard(tokens)
        assert tokens[0].unary
        assert not unary_minus_example()[0].unary

    def test_json_export(self):
        assert tokens_to_json([num(4), op('+'), Symbol('(')]) == [
                {'number': '4'},
                {'operator': '+', 'precedence': 1, 'left_associative': True, 'unary': False},
                {'symbol': '('}]

    def test_json_import(self):
        data = json.dumps(tokens_to_json(precedence_example()))
        assert tokens_from_json(data) == precedence_example()

    def test_json_operator_defaults(self):
        tokens = tokens_from_json([{'operator': '!'}, {'operator': '-', 'left_associative': False}])
        assert tokens == [Operator('!', 2, False, True), Operator('-', 1, False, False)]

    def test_json_number_text(self):
        assert tokens_from_json([{'number': 12}]) == [Number('12')]

    def test_json_unknown_operator_rejected_at_evaluation(self):
        tokens = tokens_from_json('[{"number": "7"}, {"operator": "%", "precedence": 2}, {"number": "2"}]')
        assert tokens[1] == Operator('%', 2, True, False)
        with pytest.raises(UnknownOperator):
            calculate(tokens)

    @pytest.mark.parametrize('data', [
        '{"number": "1"}',
        '[{"number": "1"',
        '[1, 2]',
        '[{"symbol": ","}]',
        '[{"value": "1"}]',
        '[{"operator": "+", "precedence": "high"}]',
        '[{"operator": "+", "precedence": true}]',
        '[{"operator": "+", "precedence": 1.5}]',
        '[{"operator": "-", "unary": "yes"}]',
        '[{"operator": "-", "left_associative": 0}]',
        '[{"operator": 7}]',
        ])
    def test_json_invalid(self, data):
        with pytest.raises(MalformedExpression):
            tokens_from_json(data)

    def test_json_not_a_token(self):
        with pytest.raises(TypeError):
            tokens_to_json(['+'])


class TestPresentation:
    def test_format_tokens(self):
        assert format_tokens([num(4), op('-'), op('!'), num(1)]).splitlines() == [
                "('Number': '4')",
                "('Operator': '-', binary)",
                "('Operator': '!', unary)",
                "('Number': '1')"]

    def test_format_postfix_top_first(self):
        postfix = shunting_yard(precedence_example())
        assert format_postfix(postfix).splitlines() == [
                '----- Expression Output Stack -----',
                "('Operator': '+', binary)",
                "('Operator': '*', binary)",
                "('Operator': '-', binary)",
                "('Number': '1')",
                "('Number': '3')",
                "('Number': '2')",
                "('Number': '4')"]

    def test_format_rpn(self):
        assert format_rpn(shunting_yard(unary_minus_example())) == '6 -u 2 3 -u 1 - * +'
        assert format_rpn([num(1), op('!')]) == '1 !'
        assert format_rpn([]) == ''

