"""
Load package defaults from the bundled `config.yaml` and merge any user
overrides found in the platform's user config folder.
"""

# std
from pathlib import Path

# third-party
import yaml
from loguru import logger
from platformdirs import user_config_path


# ---------------------------------------------------------------------------- #
PACKAGE = 'bytekit'
FILENAME = 'config.yaml'
SOURCE = Path(__file__).parent / FILENAME

CACHE = {}

# allowed values for enumerated settings
CHOICES = {
    ('case', 'table'): ('latin1', 'ascii'),
    ('nsplit', 'empty_separator'): ('error', 'units'),
}


# ---------------------------------------------------------------------------- #
class ConfigNode(dict):
    """
    Dictionary with (nested) item read access through attribute lookup.

    >>> node = ConfigNode({'strip': {'chars': ' '}})
    >>> node.strip.chars
    ' '
    """

    def __init__(self, mapping=(), **kws):
        super().__init__()
        for key, val in {**dict(mapping), **kws}.items():
            self[key] = ConfigNode(val) if isinstance(val, dict) else val

    def __getattr__(self, key):
        """
        Try to get the value in the dict associated with key `key`. If `key`
        is not a key in the dict, try get the attribute from the parent class.
        """
        return self[key] if key in self else super().__getattribute__(key)

    def update(self, mapping=(), **kws):
        """Recursive update that merges nested sections key by key."""
        for key, val in {**dict(mapping), **kws}.items():
            if isinstance(val, dict) and isinstance(self.get(key), ConfigNode):
                self[key].update(val)
            else:
                self[key] = ConfigNode(val) if isinstance(val, dict) else val


# Load
# ---------------------------------------------------------------------------- #

def load_yaml(filename):
    with Path(filename).open('r') as file:
        return yaml.safe_load(file) or {}


CONFIG_PARSERS = {
    'yaml': load_yaml,
    'yml': load_yaml,
}


def load(filename):
    if filename not in CACHE:
        CACHE[filename] = _load(filename)

    return CACHE[filename]


def _load(filename):
    if (path := Path(filename)).exists():
        return CONFIG_PARSERS[path.suffix.lstrip('.')](path)

    raise FileNotFoundError(f"Non-existent file: '{filename!s}'")


def user_config_file():
    """Location of the (optional) user config file."""
    return user_config_path(PACKAGE) / FILENAME


def load_config(source=SOURCE, user=None):
    """
    Load the package defaults from `source` and merge the user config file
    on top, if it exists.

    Parameters
    ----------
    source : str or Path
        Config file with the package defaults.
    user : str or Path, optional
        User config file. By default the file `config.yaml` in the platform
        specific user config folder for the package.

    Returns
    -------
    ConfigNode

    Raises
    ------
    ValueError
        If any of the config values are invalid.
    """
    config = ConfigNode(load(source))

    user = user_config_file() if user is None else Path(user)
    if user.exists():
        logger.info("Found user config file for package {!r} at '{}'.",
                    PACKAGE, user)
        config.update(load(user))

    return validate(config)


def validate(config):
    for (section, key), choices in CHOICES.items():
        if (value := config[section][key]) not in choices:
            raise ValueError(
                f'Invalid value for config option {section}.{key}: {value!r}.'
                f' Valid choices are: {choices}.'
            )

    chars = config.strip.chars
    if not isinstance(chars, (str, bytes)):
        raise ValueError(
            f'Invalid value for config option strip.chars: {chars!r}. Expected'
            f' a string of units.'
        )

    if isinstance(chars, str):
        config.strip['chars'] = chars.encode('latin-1')

    logger.debug('Loaded config: {}', config)
    return config


# Create
# ---------------------------------------------------------------------------- #

def create_user_config(overwrite=False):
    """
    Copy the package default config file to the user config folder so that
    it can be edited.

    Returns
    -------
    Path
        The user config file.
    """
    path = user_config_file()
    if path.exists() and not overwrite:
        logger.info("User config for {} already exists at: '{!s}'. Won't "
                    'overwrite this file unless requested.', PACKAGE, path)
        return path

    logger.info('{} user config for {}: {!s}.',
                ('Creating', 'Overwriting')[path.exists()], PACKAGE, path)

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(SOURCE.read_text())
    return path


# ---------------------------------------------------------------------------- #
CONFIG = load_config()
