"""
Period resolution for the levels of a mixed product.

Each input sequence gets a level.  When a level's sequence wraps around for
the first time its true length becomes known, and it is given a padded
period: the smallest value >= the true length that is coprime with the
product of every period fixed so far.  Since all fixed periods are pairwise
coprime, advancing every level once per tick visits each combination of
residues exactly once over the product of the periods.
"""
import logging
from functools import reduce
from math import gcd

from .exceptions import PeriodAlreadyFixedError

log = logging.getLogger(__name__)


def lcm(a, b):
    return a * b // gcd(a, b)


def lcml(l):
    return reduce(lcm, l, 1)


def coprime_period(true_length, product):
    """
    Smallest integer >= true_length whose gcd with product is 1.  A product
    of 0 means nothing has been fixed yet, so true_length is returned as is.
    """
    if true_length <= 0:
        raise ValueError(
            'true length must be positive, got {0}'.format(true_length))
    period = true_length
    if product:
        while gcd(period, product) != 1:
            period += 1
    return period


class Level:
    """
    Bookkeeping for one input sequence.

    true_length and padded_period stay 0 until the sequence has been seen
    to wrap; running_product is the product of all periods fixed up to and
    including this one.
    """
    def __init__(self, index):
        self.index = index
        self.true_length = 0
        self.padded_period = 0
        self.running_product = 0

    @property
    def fixed(self):
        return self.padded_period != 0

    def in_padding(self, counter):
        """
        True when counter falls past the real elements but inside the
        padded period.
        """
        if not self.fixed:
            return False
        return self.true_length <= counter < self.padded_period

    def tostr(self):
        if not self.fixed:
            return "Level({index}): unresolved\n".format(index=self.index)
        return "Level({index}): length {length}, period {period}, " \
               "product {product}\n".format(index=self.index,
                                            length=self.true_length,
                                            period=self.padded_period,
                                            product=self.running_product)

    def __repr__(self):
        return 'Level(index={0}, true_length={1}, padded_period={2})'.format(
            self.index, self.true_length, self.padded_period)


class PeriodTable:
    """
    Owns the levels of a product and the running product of their periods.
    Every change to a level goes through resolve().
    """
    def __init__(self, count):
        assert count > 0, "PeriodTable requires at least one level"
        self.levels = [Level(i) for i in range(count)]
        self.total = 0

    def __len__(self):
        return len(self.levels)

    def __getitem__(self, index):
        return self.levels[index]

    def __iter__(self):
        return iter(self.levels)

    def all_fixed(self):
        return all(level.fixed for level in self.levels)

    def resolve(self, index, true_length):
        """
        Fix the padded period of level index now that its true length is
        known, and fold it into the running product.  Returns the level.
        """
        level = self.levels[index]
        if level.fixed:
            raise PeriodAlreadyFixedError(index, level.padded_period)

        period = coprime_period(true_length, self.total)
        if self.total:
            self.total *= period
        else:
            self.total = period

        level.true_length = true_length
        level.padded_period = period
        level.running_product = self.total
        log.debug('level %d: length %d padded to %d, running product %d',
                  index, true_length, period, self.total)
        return level

    def tostr(self):
        ret = "PeriodTable({total}):\n".format(total=self.total)
        return ret + ''.join(['\t' + level.tostr() for level in self.levels])

    def __str__(self):
        return self.tostr()
