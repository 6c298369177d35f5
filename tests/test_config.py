import pytest

from simpleini import (
    DestinationUnavailable,
    IniSection,
    MalformedDocument,
    SimpleIni,
    SourceUnavailable,
)


def test_trailing_ini(test_ini):
    test = SimpleIni(test_ini)
    assert test.config_path == test_ini
    assert test['abc']['val1'] == 'hello with trailing'
    assert test['abc']['val2'] == '3 with leading'
    assert test['abc']['val3'] == 'nice'
    assert test['test section']['testValue'] == 'hey'
    assert test['test section']['with space'] == '123'
    assert test['test section']['normal'] == 'yep'
    assert test['with comment']['hey'] == 'aloha'
    assert test['empty section'].empty
    assert test.get_as('abc', 'val4', int) == 3


def test_faulty_ini(faulty_ini):
    with pytest.raises(MalformedDocument):
        SimpleIni(faulty_ini)


def test_file_not_found(tmp_path):
    with pytest.raises(SourceUnavailable) as e:
        SimpleIni('/path/to/nowhere.ini')
    assert e.value.fatal
    assert isinstance(e.value, OSError)
    with pytest.raises(SourceUnavailable):
        SimpleIni(tmp_path)  # a directory


def test_failed_rebind_keeps_state(test_ini, faulty_ini):
    test = SimpleIni(test_ini)
    before = test.to_dict()
    with pytest.raises(SourceUnavailable):
        test.set_config_file('/path/to/nowhere.ini')
    with pytest.raises(MalformedDocument):
        test.set_config_file(faulty_ini)
    assert test.to_dict() == before
    assert test.config_path == test_ini


def test_rebind_replaces(test_ini, tmp_path):
    other = tmp_path / 'other.ini'
    other.write_text('[other]\nk = v\n')
    test = SimpleIni(test_ini)
    test.set_config_file(other)
    assert list(test) == ['other']
    assert test.config_path == str(other)


def test_write_file(tmp_path):
    tmpconf = tmp_path / 'tmpconf'
    test = SimpleIni()
    assert test.config_path is None
    test.set_config_file(tmpconf, read=False)
    test.add_section('test', IniSection('test', {'abc': '123', '123': '50'}))
    test.write()

    read_test = SimpleIni(tmpconf)
    assert read_test['test']['abc'] == '123'
    assert read_test.to_dict() == test.to_dict()


def test_write_roundtrip(test_ini, tmp_path):
    test = SimpleIni(test_ini)
    test.set_config_file(tmp_path / 'copy.ini', read=False)
    test.write(delimiter='=', blank_lines=2)
    assert SimpleIni(tmp_path / 'copy.ini').to_dict() == test.to_dict()


def test_write_unbound():
    with pytest.raises(DestinationUnavailable):
        SimpleIni().write()


def test_write_unavailable(tmp_path):
    test = SimpleIni()
    test.set_config_file(tmp_path / 'missing' / 'dir.ini', read=False)
    test.add_section('a', {'k': 'v'})
    with pytest.raises(DestinationUnavailable) as e:
        test.write()
    assert e.value.fatal


def test_write_bad_delimiter_keeps_file(test_ini):
    test = SimpleIni(test_ini)
    with open(test_ini, encoding='utf-8') as fp:
        before = fp.read()
    with pytest.raises(ValueError):
        test.write(delimiter=': ')
    with open(test_ini, encoding='utf-8') as fp:
        assert fp.read() == before


def test_write_delimiter_without_spaces(tmp_path):
    test = SimpleIni()
    test.set_config_file(tmp_path / 'tight.ini', read=False)
    test.add_section('a', {'k': 'v'})
    test.write(delimiter='=')
    assert SimpleIni(tmp_path / 'tight.ini')['a']['k'] == 'v'
