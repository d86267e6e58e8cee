#! /usr/bin/env python
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

import sys
import warnings
from pathlib import Path

import click

from .settings import EvaluationSettings
from .convert import shunting_yard
from .evaluate import evaluate
from .fixtures import FIXTURES, tokens_from_json
from .presentation import format_tokens, format_postfix, format_rpn
from .utils import ExpressionError, MismatchedParenthesis
from . import __version__


def _showwarning(message, category, filename, lineno, file=None, line=None):
    if file is None:
        file = sys.stderr

    filename = Path(filename)
    shuntyard_module_install_location = Path(__file__).parent.parent
    if filename.is_relative_to(shuntyard_module_install_location):
        filename = filename.relative_to(shuntyard_module_install_location)

    print(f'{filename}:{lineno}: {category.__name__}: {message}', file=file)
warnings.showwarning = _showwarning

def _print_version(ctx, param, value):
    if value and not ctx.resilient_parsing:
        click.echo(f'Version {__version__}')
        ctx.exit()


def _run(tokens, settings, show_tokens, show_postfix):
    if show_tokens:
        click.echo(format_tokens(tokens))
        click.echo()

    try:
        postfix = shunting_yard(tokens)
    except MismatchedParenthesis as e:
        raise click.ClickException(f'{e}. Partial output: {format_rpn(e.partial) or "(empty)"}') from e
    except ExpressionError as e:
        raise click.ClickException(str(e)) from e

    if show_postfix:
        click.echo(format_postfix(postfix))
        click.echo()

    try:
        return evaluate(postfix, settings)
    except ExpressionError as e:
        raise click.ClickException(f'Error evaluating {format_rpn(postfix)}: {e}') from e


@click.group()
@click.option('--version', is_flag=True, callback=_print_version, expose_value=False, is_eager=True)
def cli():
    """ Convert integer arithmetic expressions from infix to postfix notation using the shunting-yard algorithm, and
    evaluate them. """
    pass


@cli.command()
@click.option('--warnings', 'format_warnings', type=click.Choice(['default', 'ignore', 'once']), default='default',
              help='''Enable or disable warnings about questionable number literals and integer overflow (default:
              on)''')
@click.option('--overflow', type=click.Choice(['wrap', 'raise']), default='wrap', help='''Wrap results that do not
              fit into a signed 64-bit integer around (default), or fail.''')
@click.option('--division', type=click.Choice(['truncate', 'floor']), default='truncate', help='''Round integer
              quotients towards zero like C (default), or towards negative infinity like Python.''')
@click.argument('name', type=click.Choice(list(FIXTURES)), required=False)
def demo(name, format_warnings, overflow, division):
    """ Convert and evaluate one of the built-in example expressions, or all of them if no NAME is given. Prints the
    input tokens, the postfix output stack and the result. """

    settings = EvaluationSettings(overflow=overflow, division=division)
    names = [name] if name else list(FIXTURES)

    with warnings.catch_warnings():
        warnings.simplefilter(format_warnings)
        for name in names:
            result = _run(FIXTURES[name](), settings, show_tokens=True, show_postfix=True)
            click.echo(f'Expression result: {result}')
            click.echo()


@cli.command('eval')
@click.option('--warnings', 'format_warnings', type=click.Choice(['default', 'ignore', 'once']), default='default',
              help='''Enable or disable warnings about questionable number literals and integer overflow (default:
              on)''')
@click.option('--overflow', type=click.Choice(['wrap', 'raise']), default='wrap', help='''Wrap results that do not
              fit into a signed 64-bit integer around (default), or fail.''')
@click.option('--division', type=click.Choice(['truncate', 'floor']), default='truncate', help='''Round integer
              quotients towards zero like C (default), or towards negative infinity like Python.''')
@click.option('--show-tokens', is_flag=True, help='Print the input tokens before converting them.')
@click.option('--show-postfix', is_flag=True, help='Print the postfix output stack before evaluating it.')
@click.argument('infile', type=click.File('r'), default='-')
def eval_tokens(infile, format_warnings, overflow, division, show_tokens, show_postfix):
    """ Evaluate a token list read from a JSON file (default: stdin). The file must contain a list of objects of the
    form {"number": "4"}, {"symbol": "("} or {"operator": "-"}. Operator objects may override "precedence",
    "left_associative" and "unary". """

    settings = EvaluationSettings(overflow=overflow, division=division)

    try:
        tokens = tokens_from_json(infile.read())
    except ExpressionError as e:
        raise click.ClickException(str(e)) from e

    with warnings.catch_warnings():
        warnings.simplefilter(format_warnings)
        click.echo(_run(tokens, settings, show_tokens, show_postfix))


if __name__ == '__main__':
    cli()

