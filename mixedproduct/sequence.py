"""
Input sequences and the forward cursors the odometer runs over them.

A Sequence either borrows a re-iterable object (a list, a string, a range,
anything that hands out a fresh iterator from iter()) or owns a one-shot
iterator.  Borrowed objects are re-iterated from the start every time a
cursor wraps and are never modified.  Owned iterators are drained on the
first traversal; the references they produce are kept so later traversals
can replay them, and the source is left exhausted.
"""
from collections.abc import Iterator


class _End:
    """
    Sentinel held by a cursor that has run past its last element.
    """
    def __repr__(self):
        return 'END'

END = _End()


def is_single_pass(source):
    return isinstance(source, Iterator) or \
        getattr(source, 'single_pass', False)


class Sequence:
    """
    Wraps one input.  owned=None picks the mode from the source itself;
    pass True or False to force it.
    """
    def __init__(self, source, owned=None):
        if owned is None:
            owned = is_single_pass(source)
        self.source = source
        self.owned = owned
        self._iterator = None
        self._buffer = []
        self._drained = False

    def __iter__(self):
        if not self.owned:
            return iter(self.source)
        return self._replay()

    def _replay(self):
        i = 0
        while True:
            if i < len(self._buffer):
                yield self._buffer[i]
            elif self._drained:
                return
            else:
                if self._iterator is None:
                    self._iterator = iter(self.source)
                try:
                    item = next(self._iterator)
                except StopIteration:
                    self._drained = True
                    self._iterator = None
                    return
                self._buffer.append(item)
                yield item
            i += 1

    def cursor(self):
        return SequenceCursor(self)

    def __repr__(self):
        mode = 'owned' if self.owned else 'borrowed'
        return 'Sequence({0!r}, {1})'.format(self.source, mode)


class SequenceCursor:
    """
    A position in a Sequence, one element ahead of the underlying iterator.
    value is the current element, or END once the sequence is used up.
    """
    def __init__(self, sequence):
        self.sequence = sequence
        self._iterator = None
        self.value = END
        self.reset()

    @property
    def at_end(self):
        return self.value is END

    def reset(self):
        """
        Go back to the first element of the sequence.
        """
        self._iterator = iter(self.sequence)
        self.value = next(self._iterator, END)

    def advance(self):
        assert not self.at_end, "cannot advance a cursor past its end"
        self.value = next(self._iterator, END)

    def __repr__(self):
        return 'SequenceCursor({0!r})'.format(self.value)
