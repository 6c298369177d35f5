import pytest


TEST_INI = (
    ';hello\n'
    '[abc]\n'
    'val1 = hello with trailing    \n'
    'val2 =    3 with leading\n\n\n'
    'val3 = nice\n'
    'val4 = 3\n'
    '      \n'
    '[test section]\n'
    'testValue =    hey\n'
    'with space = 123\n'
    'normal = yep\n'
    '[empty section]\n'
    '[with comment] # hello\n'
    'hey = aloha\n'
    '; comment\n'
)

# "val3 = nice" runs into the next line here.
FAULTY_INI = (
    ';hello\n'
    '[abc]\n'
    'val1 = hello with trailing    \n'
    'val2 =    3 with leading\n\n\n'
    'val3 = nice\n'
    '      '
    '[test_section]\n'
    'testValue =    hey\n'
)


@pytest.fixture
def test_ini(tmp_path):
    path = tmp_path / 'test.ini'
    path.write_text(TEST_INI, encoding='utf-8')
    return str(path)


@pytest.fixture
def faulty_ini(tmp_path):
    path = tmp_path / 'faulty.ini'
    path.write_text(FAULTY_INI, encoding='utf-8')
    return str(path)


@pytest.fixture
def test_ini_text():
    return TEST_INI


@pytest.fixture
def faulty_ini_text():
    return FAULTY_INI
