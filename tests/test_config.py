# pylint: disable=missing-module-docstring
# pylint: disable=missing-function-docstring

# third-party
import pytest

# local
from bytekit import config
from bytekit.config import ConfigNode, load_config


# ---------------------------------------------------------------------------- #
@pytest.fixture
def user_config(tmp_path):
    def write(text):
        path = tmp_path / 'config.yaml'
        path.write_text(text)
        config.CACHE.pop(path, None)
        return path
    return write


def test_defaults(tmp_path):
    cfg = load_config(user=tmp_path / 'missing.yaml')
    assert cfg.strip.chars == b' \t\r\n'
    assert cfg.case.table == 'latin1'
    assert cfg.nsplit.empty_separator == 'error'


def test_user_override(user_config):
    cfg = load_config(user=user_config('case:\n    table: ascii\n'))
    assert cfg.case.table == 'ascii'
    # other sections untouched
    assert cfg.nsplit.empty_separator == 'error'
    assert cfg.strip.chars == b' \t\r\n'


def test_user_override_strip_chars(user_config):
    cfg = load_config(user=user_config('strip:\n    chars: "-_"\n'))
    assert cfg.strip.chars == b'-_'


@pytest.mark.parametrize(
    'text',
    ['case:\n    table: ebcdic\n',
     'nsplit:\n    empty_separator: ignore\n',
     'strip:\n    chars: 123\n',
     'strip:\n    chars: null\n']
)
def test_invalid_values(user_config, text):
    with pytest.raises(ValueError):
        load_config(user=user_config(text))


def test_defaults_not_mutated_by_override(user_config, tmp_path):
    load_config(user=user_config('case:\n    table: ascii\n'))
    assert load_config(user=tmp_path / 'missing.yaml').case.table == 'latin1'


def test_config_node():
    node = ConfigNode({'a': {'b': 1}}, c=2)
    assert node.a.b == 1
    assert node.c == 2
    assert isinstance(node.a, ConfigNode)

    with pytest.raises(AttributeError):
        _ = node.missing

    node.update({'a': {'d': 3}})
    assert node.a == {'b': 1, 'd': 3}


def test_create_user_config(tmp_path, monkeypatch):
    path = tmp_path / 'bytekit' / 'config.yaml'
    monkeypatch.setattr(config, 'user_config_file', lambda: path)

    assert config.create_user_config() == path
    assert path.read_text() == config.SOURCE.read_text()

    # existing file is not overwritten by default
    path.write_text('case:\n    table: ascii\n')
    config.create_user_config()
    assert 'ascii' in path.read_text()

    config.create_user_config(overwrite=True)
    assert path.read_text() == config.SOURCE.read_text()
