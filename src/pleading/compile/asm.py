import sys
from pathlib import Path
import logging as lg

import click

import pleading.compile.image as image
from pleading.common.dialect import Dialect, resolve_dialect
from pleading.common.errors import DecodeError, DialectError
from pleading.common.settings import Settings
from pleading.lang.decoder import decode
from pleading.lang.program import Program
from pleading.runtime.interpreter import EXIT_ERROR


def compile_source(settings: Settings, source: str) -> Program:
    dialect = resolve_dialect(settings.dialect)
    return decode(source, dialect, settings.tally)


def listing(program: Program, dialect: Dialect) -> list[str]:
    return [
        f'{i:>5}  {dialect.marker_for(instruction.opcode)}  {instruction.operand}'
        for i, instruction in enumerate(program)
    ]


@click.command()
@click.pass_context
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('-d', '--dialect', type=str, help='Built-in dialect name or a dialect TOML file')
@click.option('--tally', is_flag=True, help='Accept operands written as runs of marker glyphs')
@click.option('--dump', is_flag=True, help='Print a listing of the decoded program')
@click.argument('source', type=Path)
@click.argument('binary', type=Path, required=False)
def compile(ctx: click.Context, source: Path, binary: Path | None, dump: bool, **params):
    ctx.ensure_object(Settings)
    ctx.obj.update(**params)

    lg.basicConfig(level=lg.DEBUG if ctx.obj.verbose else lg.INFO)
    lg.info('PLEADING ASM')

    if not binary and not dump:
        binary = source.with_suffix('.pldc')

    try:
        program = compile_source(ctx.obj, source.read_text(encoding='utf-8'))

        if dump:
            dialect = resolve_dialect(ctx.obj.dialect)

            for line in listing(program, dialect):
                click.echo(line)

        if binary:
            lg.info(f'Writing {len(program)} instructions to {binary}')
            binary.parent.mkdir(parents=True, exist_ok=True)
            binary.write_bytes(image.encode_program(program))

    except (OSError, UnicodeDecodeError, DecodeError, DialectError) as e:
        kind = getattr(e, 'kind', type(e).__name__)
        click.echo(f'{kind}: {e}', err=True)
        sys.exit(EXIT_ERROR)


if __name__ == '__main__':
    compile()
