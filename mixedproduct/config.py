"""
Configuration for the mixed-product command.

A config is a plain dict, read from YAML and merged over DEFAULTS.  For
example::

    sequences:
    - [0, 1]
    - a,b,c
    limit: 4
    format: desc
    separator: '/'

A list entry is used as is and a string is split on commas.
"""
import copy
import logging

import yaml

from .exceptions import ConfigError

log = logging.getLogger(__name__)

DEFAULTS = {
    'sequences': [],
    'limit': None,
    'format': 'tuple',
    'separator': ' ',
}

FORMATS = ('tuple', 'desc')


def deep_merge(a, b):
    """
    Merge b into a.  Dicts are merged key by key, lists are extended and
    anything else in b replaces a.  None on either side yields the other.
    """
    if a is None:
        return b
    if b is None:
        return a
    if isinstance(a, list):
        assert isinstance(b, list), \
            "cannot merge {0!r} into a list".format(b)
        a.extend(b)
        return a
    if isinstance(a, dict):
        assert isinstance(b, dict), \
            "cannot merge {0!r} into a dict".format(b)
        for (k, v) in b.items():
            if k in a:
                a[k] = deep_merge(a[k], v)
            else:
                a[k] = v
        return a
    return b


def _read_yaml(source):
    try:
        if isinstance(source, str):
            with open(source) as f:
                loaded = yaml.safe_load(f)
        else:
            loaded = yaml.safe_load(source)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError('cannot read config: {0}'.format(e))
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigError('config must be a mapping, got {0}'.format(
            type(loaded).__name__))
    if not isinstance(loaded.get('sequences', []), list):
        raise ConfigError('sequences must be a list')
    return loaded


def parse_sequence(entry):
    if isinstance(entry, list):
        return entry
    if isinstance(entry, str):
        return [i.strip() for i in entry.split(',')] if entry else []
    raise ConfigError('bad sequence entry: {0!r}'.format(entry))


def validate(config):
    """
    Check a merged config and normalize its sequences to lists.
    """
    sequences = config.get('sequences')
    if not isinstance(sequences, list):
        raise ConfigError('sequences must be a list')
    config['sequences'] = [parse_sequence(s) for s in sequences]

    limit = config.get('limit')
    if limit is not None and (isinstance(limit, bool) or
                              not isinstance(limit, int) or limit < 0):
        raise ConfigError('limit must be a non-negative integer, '
                          'got {0!r}'.format(limit))

    if config.get('format') not in FORMATS:
        raise ConfigError('format must be one of {0}, got {1!r}'.format(
            ', '.join(FORMATS), config.get('format')))

    if not isinstance(config.get('separator'), str):
        raise ConfigError('separator must be a string')
    return config


def load_config(source=None, overrides=None):
    """
    Build a config from DEFAULTS, the YAML in source (a path or a stream)
    and overrides, in that order.
    """
    config = copy.deepcopy(DEFAULTS)
    if source is not None:
        deep_merge(config, _read_yaml(source))
        # overrides only merge into values of the right type
        validate(config)
    deep_merge(config, copy.deepcopy(overrides))
    validate(config)
    log.debug('config: %s', config)
    return config
