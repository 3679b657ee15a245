"""
mixed-product: print the combinations of some sequences.

    mixed-product 0,1 a,b,c
    mixed-product -c job.yaml --desc -s / -n 10
"""
import argparse
import itertools
import logging
import sys

from .config import load_config
from .describe import generate_desc, join_with
from .exceptions import ConfigError
from .product import mixed_product

log = logging.getLogger(__name__)


def parse_args(argv=None):
    p = argparse.ArgumentParser(
        'mixed-product',
        description='Print every combination of one value from each '
                    'sequence, advancing all sequences on every step.')
    p.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='log period resolution and progress',
    )
    p.add_argument(
        '-c', '--config',
        help='YAML file with sequences and options',
    )
    p.add_argument(
        '-n', '--limit',
        type=int,
        help='stop after this many combinations',
    )
    p.add_argument(
        '--desc',
        action='store_true',
        help='print descriptions instead of tuples',
    )
    p.add_argument(
        '-s', '--separator',
        help='separator between values in descriptions',
    )
    p.add_argument(
        'sequences',
        nargs='*',
        metavar='SEQ',
        help='comma separated values, one argument per sequence',
    )
    return p.parse_args(argv)


def generate(config):
    """
    Yields the lines to print for config.
    """
    combinations = iter(mixed_product(*config['sequences']))
    if config['limit'] is not None:
        combinations = itertools.islice(combinations, config['limit'])
    if config['format'] == 'desc':
        joinf = join_with(config['separator'])
        for combination in combinations:
            yield generate_desc(joinf, combination)
    else:
        for combination in combinations:
            yield repr(combination)


def main(argv=None, out=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s %(levelname)s:%(name)s:%(message)s',
    )
    if out is None:
        out = sys.stdout

    overrides = {'sequences': args.sequences}
    if args.limit is not None:
        overrides['limit'] = args.limit
    if args.desc:
        overrides['format'] = 'desc'
    if args.separator is not None:
        overrides['separator'] = args.separator
    try:
        config = load_config(args.config, overrides)
    except ConfigError as e:
        log.error('%s', e)
        return 1

    log.info('combining %d sequences', len(config['sequences']))
    count = 0
    for line in generate(config):
        out.write(line + '\n')
        count += 1
    log.info('%d combinations', count)
    return 0


if __name__ == '__main__':
    sys.exit(main())
