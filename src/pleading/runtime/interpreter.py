import sys
from pathlib import Path
from typing import Iterable
import logging as lg

import click

import pleading.compile.image as image
from pleading.common.dialect import Dialect, DEFAULT, resolve_dialect
from pleading.common.errors import DecodeError, DialectError, ImageError, Fault, StepLimitExceeded
from pleading.common.settings import Settings
from pleading.lang.decoder import decode
from pleading.lang.program import Program
from pleading.runtime.executor import Executor, Outcome


EXIT_HALT = 0
EXIT_ERROR = 1
EXIT_FAULT = 2
EXIT_STEP_LIMIT = 3
EXIT_KEYBOARD = 4


def load_program(data: bytes, dialect: Dialect = DEFAULT, tally: bool = False) -> Program:
    ''' Accepts either a bytecode image or source text '''
    if image.is_image(data):
        lg.info('Loading bytecode image')
        return image.decode_image(data)

    try:
        source = data.decode('utf-8')
    except UnicodeDecodeError as e:
        raise DecodeError(f'Source is not valid UTF-8 ({e.reason})') from e

    return decode(source, dialect, tally)


def format_unstack(values: Iterable[int], as_ascii: bool = False) -> str:
    if as_ascii:
        return ''.join(chr(v & 0xFF) for v in values)

    return '[' + ', '.join(str(v) for v in values) + ']'


def report_fault(fault: Fault):
    click.echo(f'{fault.kind} at instruction {fault.index}: {fault.message}', err=True)
    click.echo(f'unstack: {format_unstack(fault.unstack or [])}', err=True)


def execute(settings: Settings, data: bytes) -> Outcome:
    dialect = resolve_dialect(settings.dialect)
    program = load_program(data, dialect, settings.tally)
    lg.debug(f'Running {len(program)} instructions')
    return Executor(program).run(settings.max_steps)


@click.command()
@click.pass_context
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('-a', '--ascii', is_flag=True, help='Display output as ASCII')
@click.option('-d', '--dialect', type=str, help='Built-in dialect name or a dialect TOML file')
@click.option('--tally', is_flag=True, help='Accept operands written as runs of marker glyphs')
@click.option('--max-steps', type=click.IntRange(min=1), help='Stop after this many instructions')
@click.argument('program_file', type=Path)
def run(ctx: click.Context, program_file: Path, **params):
    ctx.ensure_object(Settings)
    ctx.obj.update(**params)

    lg.basicConfig(level=lg.DEBUG if ctx.obj.verbose else lg.INFO)
    lg.info('PLEADING')

    try:
        outcome = execute(ctx.obj, program_file.read_bytes())

    except (OSError, DecodeError, ImageError, DialectError) as e:
        kind = getattr(e, 'kind', type(e).__name__)
        click.echo(f'{kind}: {e}', err=True)
        sys.exit(EXIT_ERROR)

    except StepLimitExceeded as e:
        click.echo(f'{e.kind}: {e}', err=True)
        click.echo(f'unstack: {format_unstack(e.unstack)}', err=True)
        sys.exit(EXIT_STEP_LIMIT)

    except KeyboardInterrupt:
        lg.info('Execution halted by the user')
        sys.exit(EXIT_KEYBOARD)

    if outcome.fault is not None:
        report_fault(outcome.fault)
        sys.exit(EXIT_FAULT)

    lg.info(f'Execution halted gracefully after {outcome.steps} steps')
    click.echo(format_unstack(outcome.unstack, ctx.obj.ascii))
    sys.exit(EXIT_HALT)


if __name__ == '__main__':
    run()
