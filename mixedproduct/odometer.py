"""
The cursor chain that walks a mixed product.

Every level advances on every tick.  A level whose padded period is longer
than its sequence sits on its end position for the extra ticks (padding);
any tick on which some level is padding is skipped.  Once every period is
fixed and the number of ticks equals their product, every combination has
been produced exactly once.

Example, [0, 1] x [0, 1, 2, 3]: the second period is padded from 4 to 5 so
it is coprime with 2, and the ten ticks are

    (0, 0) (1, 1) (0, 2) (1, 3) (0, pad) (1, 0) (0, 1) (1, 2) (0, 3) (1, pad)
"""
import logging

from .exceptions import SpentError
from .period import PeriodTable

log = logging.getLogger(__name__)


class Cursor:
    """
    Per level iteration state: the position in the sequence, the ticks
    since the last reset and the index of the level it belongs to.
    """
    def __init__(self, index, position):
        self.index = index
        self.position = position
        self.counter = 0

    def __repr__(self):
        return 'Cursor(index={0}, counter={1}, value={2!r})'.format(
            self.index, self.counter, self.position.value)


class Odometer:
    """
    Iterator over the combinations of a list of Sequences.

    The first combination is the first element of every sequence; each
    later one is reached with step().  Levels that complete their first
    real cycle on the same tick are resolved in input order.
    """
    def __init__(self, sequences):
        assert len(sequences) > 0, \
            "Odometer requires at least one sequence"
        self.periods = PeriodTable(len(sequences))
        self.cursors = [Cursor(i, sequence.cursor())
                        for (i, sequence) in enumerate(sequences)]
        self.ticks = 0
        self.padding_ticks = 0
        self.emitted = 0
        self._started = False
        # an empty input leaves nothing to combine
        self.exhausted = any(c.position.at_end for c in self.cursors)

    @property
    def total_period(self):
        return self.periods.total

    def all_periods_fixed(self):
        return self.periods.all_fixed()

    def advance_all(self):
        """
        Move every level forward by one tick.  Returns True if any level is
        in its padding region afterwards.
        """
        padding = False
        for cursor in self.cursors:
            level = self.periods[cursor.index]
            if not level.in_padding(cursor.counter):
                cursor.position.advance()
            cursor.counter += 1
            if not cursor.position.at_end:
                continue
            if not level.fixed:
                self.periods.resolve(cursor.index, cursor.counter)
            if level.in_padding(cursor.counter):
                padding = True
                continue
            cursor.position.reset()
            cursor.counter = 0
        self.ticks += 1
        return padding

    def step(self):
        """
        Advance to the next real combination, or mark the chain exhausted
        once the full period has elapsed.
        """
        if self.exhausted:
            raise SpentError()
        while True:
            padding = self.advance_all()
            if self.periods.all_fixed() and self.ticks == self.periods.total:
                self.exhausted = True
                log.debug('product exhausted after %d ticks, %d padding, '
                          '%d combinations', self.ticks, self.padding_ticks,
                          self.emitted)
                return
            if not padding:
                return
            self.padding_ticks += 1

    def current(self):
        """
        The combination under the cursors: one element per level, in input
        order, as the very objects the inputs produced.
        """
        if self.exhausted:
            raise SpentError()
        return tuple(cursor.position.value for cursor in self.cursors)

    def __iter__(self):
        return self

    def __next__(self):
        if self._started:
            if not self.exhausted:
                self.step()
        else:
            self._started = True
        if self.exhausted:
            raise StopIteration
        self.emitted += 1
        return self.current()

    def tostr(self, depth=0):
        state = 'exhausted' if self.exhausted else 'tick {0}'.format(
            self.ticks)
        ret = '\t'*depth + "Odometer({state}):\n".format(state=state)
        for cursor in self.cursors:
            ret += '\t'*(depth + 1) + "{counter}: {level}".format(
                counter=cursor.counter,
                level=self.periods[cursor.index].tostr())
        return ret

    def __str__(self):
        return self.tostr()
