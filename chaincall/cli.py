"""Command line interface for the typed argument codec."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

import msgspec

from . import __version__, codec, errors, formatter, logs, term, utils

INPUT_FORMATS = {
    'hex': utils.encoding.from_hex,
    'base64url': utils.encoding.from_base64url,
}

log = logs.get(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser('chaincall', description=__doc__)
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument(
        '-v',
        '--verbose',
        action='count',
        default=0,
        help='increase logging verbosity: -vv adds codec details, -vvv transport requests',
    )
    parser.add_argument('--no-color', action='store_true', help='disable colored error output')

    commands = parser.add_subparsers(dest='command', metavar='COMMAND', required=True)

    parse_cmd = commands.add_parser('parse', help='parse a type name')
    parse_cmd.add_argument('type_name', metavar='TYPE')
    parse_cmd.add_argument(
        '--json', action='store_true', help='print the parsed descriptor as JSON'
    )

    for name, help_text in [
        ('read', 'list the arguments in an arguments document'),
        ('encode', 'encode an arguments document into call data'),
    ]:
        cmd = commands.add_parser(name, help=help_text)
        cmd.add_argument('document', metavar='DOCUMENT', nargs='?', help='JSON arguments document')
        cmd.add_argument(
            '-f', '--file', help='read the arguments document from a file ("-" for STDIN)'
        )
        if name == 'encode':
            cmd.add_argument(
                '-o',
                '--output-format',
                choices=formatter.names(),
                default=formatter.DEFAULT_FORMAT,
                help='output format (default: %(default)s)',
            )
            cmd.add_argument(
                '--split', action='store_true', help='output each argument separately'
            )

    decode_cmd = commands.add_parser('decode', help='render a call result')
    decode_cmd.add_argument('type_name', metavar='TYPE')
    decode_cmd.add_argument('data', metavar='DATA', help='the encoded call result')
    decode_cmd.add_argument(
        '-i',
        '--input-format',
        choices=sorted(INPUT_FORMATS),
        default='hex',
        help='encoding of DATA (default: %(default)s)',
    )

    args = parser.parse_args(argv)
    if args.command in ('read', 'encode') and (args.document is None) == (args.file is None):
        parser.error('exactly one of DOCUMENT or --file is required')
    return args


def load_document(args: argparse.Namespace) -> str | bytes:
    if args.file is None:
        return args.document
    if args.file == '-':
        return sys.stdin.buffer.read()
    with open(args.file, 'rb') as f:
        return f.read()


def run(args: argparse.Namespace) -> None:
    if args.command == 'parse':
        descriptor = codec.parse_type(args.type_name)
        print(msgspec.json.encode(descriptor).decode() if args.json else descriptor)

    elif args.command == 'read':
        for type_name, value in codec.read_arguments(load_document(args)):
            print(f'{type_name}\t{term.elide(value)}')

    elif args.command == 'encode':
        document = load_document(args)
        fmt = formatter.create(args.output_format)
        if args.split:
            fmt.process(codec.encode_arguments(document))
        else:
            fmt.process(codec.encode_call_data(document))

    elif args.command == 'decode':
        data = INPUT_FORMATS[args.input_format](args.data)
        print(codec.call_result_to_data_type(data, args.type_name))


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)

    logs.init(args.verbose)
    term.set_color_enabled(not args.no_color and sys.stderr.isatty())
    log.debug('command: %s', args.command)

    try:
        run(args)
    except (errors.CodecError, errors.EncodingError, OSError) as exc:
        term.error(utils.format.format_exc(exc))
        return 1
    return 0
