from dataclasses import dataclass
from pathlib import Path
import logging as lg
import string
import tomllib

from pleading.common.ops import Op, by_name
from pleading.common.errors import DialectError


FORBIDDEN_CHARS = set(string.digits + string.whitespace + '+-#')


@dataclass(frozen=True)
class Dialect:
    ''' Marker table: source glyphs -> operations '''
    name: str
    markers: dict[str, Op]

    def marker_for(self, op: Op) -> str:
        for marker, marker_op in self.markers.items():
            if marker_op == op:
                return marker

        raise DialectError(f'Dialect {self.name} has no marker for {op.name}')

    def glyphs(self) -> set[str]:
        ''' Every character used by the markers, tally operands are made of these '''
        return set(''.join(self.markers))


def make_dialect(name: str, names_to_markers: dict[str, str]) -> Dialect:
    markers: dict[str, Op] = {}

    for op_name, marker in names_to_markers.items():
        try:
            op = by_name(op_name)
        except KeyError as e:
            raise DialectError(f'{name}: {e.args[0]}') from None

        if not isinstance(marker, str) or not marker:
            raise DialectError(f'{name}: empty marker for {op.name}')

        if FORBIDDEN_CHARS.intersection(marker):
            raise DialectError(f'{name}: marker {marker!r} contains a forbidden character')

        if marker in markers:
            raise DialectError(f'{name}: marker {marker!r} is used twice')

        markers[marker] = op

    missing = set(Op).difference(markers.values())

    if missing:
        names = ', '.join(sorted(op.name.lower() for op in missing))
        raise DialectError(f'{name}: no markers for {names}')

    return Dialect(name, markers)


EMOJI = make_dialect('emoji', {
    'push': '🥺',
    'floordiv': '💖',
    'swap': '👉👈',
    'discard2mul': '💓',
    'duplicate': '✨',
    'loopback': '🫂',
})

ASCII = make_dialect('ascii', {
    'push': 'push',
    'floordiv': 'div',
    'swap': 'swap',
    'discard2mul': 'heart',
    'duplicate': 'dup',
    'loopback': 'hug',
})

BUILTIN = {d.name: d for d in [EMOJI, ASCII]}
DEFAULT = EMOJI


def load_dialect(filepath: str | Path) -> Dialect:
    if isinstance(filepath, str):
        filepath = Path(filepath)

    lg.debug(f'Loading dialect {filepath}')

    try:
        config = tomllib.loads(filepath.read_text(encoding='utf-8'))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        raise DialectError(f'{filepath}: {e}') from e

    section = config.get('dialect')

    if not isinstance(section, dict) or not isinstance(section.get('markers'), dict):
        raise DialectError(f'{filepath}: expected a [dialect.markers] table')

    return make_dialect(section.get('name', filepath.stem), section['markers'])


def resolve_dialect(name_or_path: str | None) -> Dialect:
    if name_or_path is None:
        return DEFAULT

    if name_or_path in BUILTIN:
        return BUILTIN[name_or_path]

    path = Path(name_or_path)

    if not path.is_file():
        raise DialectError(f'No such dialect {name_or_path}')

    return load_dialect(path)
