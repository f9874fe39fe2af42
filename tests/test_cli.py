import json

import pytest

from chaincall import cli

DOCUMENT = (
    '{"arguments": ['
    '{"argument_type": "u16", "argument_value": "513"},'
    '{"argument_type": "Option<bool>", "argument_value": "null"}'
    ']}'
)


def run(capsys, *argv):
    code = cli.main(['--no-color', *argv])
    out, err = capsys.readouterr()
    return code, out, err


def test_parse(capsys):
    assert run(capsys, 'parse', 'Vec< Option<String> >') == (0, 'Vec<Option<String>>\n', '')


def test_parse_json(capsys):
    code, out, _ = run(capsys, 'parse', '--json', 'Option<u8>')
    assert code == 0
    assert json.loads(out) == {'type': 'Optional', 'inner': {'type': 'Primitive', 'kind': 'u8'}}


def test_parse_unsupported(capsys):
    code, out, err = run(capsys, 'parse', 'Vec<Vec<Vec<bool>>>')
    assert code == 1
    assert out == ''
    assert 'UnsupportedType' in err
    assert 'Vec<Vec<Vec<bool>>>' in err


def test_read(capsys):
    code, out, _ = run(capsys, 'read', DOCUMENT)
    assert code == 0
    assert out.splitlines() == ['u16\t513', 'Option<bool>\tnull']


def test_encode_hex(capsys):
    assert run(capsys, 'encode', DOCUMENT) == (0, '010200\n', '')


def test_encode_split(capsys):
    code, out, _ = run(capsys, 'encode', '--split', DOCUMENT)
    assert code == 0
    assert out.splitlines() == ['0102', '00']


def test_encode_base64url(capsys):
    assert run(capsys, 'encode', '-o', 'base64url', DOCUMENT) == (0, 'AQIA\n', '')


def test_encode_json(capsys):
    code, out, _ = run(capsys, 'encode', '-o', 'json', DOCUMENT)
    assert code == 0
    assert json.loads(out) == {'length': 3, 'hex': '010200', 'base64url': 'AQIA'}


def test_encode_file(capsys, tmp_path):
    path = tmp_path / 'args.json'
    path.write_text(DOCUMENT)
    assert run(capsys, 'encode', '-f', str(path)) == (0, '010200\n', '')


def test_encode_missing_file(capsys, tmp_path):
    code, _, err = run(capsys, 'encode', '-f', str(tmp_path / 'missing.json'))
    assert code == 1
    assert 'FileNotFoundError' in err


def test_encode_requires_one_source(capsys, tmp_path):
    with pytest.raises(SystemExit):
        cli.main(['encode'])
    with pytest.raises(SystemExit):
        cli.main(['encode', DOCUMENT, '-f', str(tmp_path / 'args.json')])


def test_encode_error(capsys):
    doc = '{"arguments": [{"argument_type": "u8", "argument_value": "256"}]}'
    code, out, err = run(capsys, 'encode', doc)
    assert code == 1
    assert out == ''
    assert 'NumericOverflow' in err


def test_encode_missing_arguments(capsys):
    code, _, err = run(capsys, 'encode', '{}')
    assert code == 1
    assert 'MissingField' in err


@pytest.mark.parametrize(
    'argv, expected',
    [
        (['decode', 'u16', '0102'], '513'),
        (['decode', 'u16', '0x0102ff'], '513'),
        (['decode', '-i', 'base64url', 'u16', 'AQI'], '513'),
        (['decode', 'Vec<Option<String>>', '02000000010300000073737300'], '[Some("sss"), None]'),
    ],
)
def test_decode(capsys, argv, expected):
    assert run(capsys, *argv) == (0, f'{expected}\n', '')


def test_decode_truncated(capsys):
    code, _, err = run(capsys, 'decode', 'u64', '0102')
    assert code == 1
    assert 'TruncatedBuffer' in err


def test_decode_bad_input(capsys):
    code, _, err = run(capsys, 'decode', 'u8', 'xyz')
    assert code == 1
    assert 'invalid hex string' in err
