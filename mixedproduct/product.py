"""
mixed_product(): the Cartesian product of any number of iterables, walked
by advancing every input on every step.

    >>> list(mixed_product([0, 1], 'abc'))
    [(0, 'a'), (1, 'b'), (0, 'c'), (1, 'a'), (0, 'b'), (1, 'c')]

Lengths are never asked for; they are observed as the inputs wrap.  The
result can only be iterated once.
"""
from .exceptions import SpentError
from .odometer import Odometer
from .sequence import Sequence

# the product of no sequences: a single empty combination
EMPTY_PRODUCT = ((),)


class MixedProduct:
    """
    Single-pass iterable over the combinations of its inputs.
    """
    single_pass = True

    def __init__(self, sequences):
        assert len(sequences) > 0, \
            "MixedProduct requires at least one sequence"
        self.sequences = []
        shared = {}
        for source in sequences:
            sequence = shared.get(id(source))
            if sequence is None:
                sequence = source if isinstance(source, Sequence) \
                    else Sequence(source)
                # a one-shot source gets one wrapper however often it is
                # passed, its cursors all replay the same buffer
                if sequence.owned:
                    shared[id(source)] = sequence
            self.sequences.append(sequence)
        self.odometer = None

    @property
    def spent(self):
        return self.odometer is not None

    def __iter__(self):
        if self.odometer is not None:
            raise SpentError('mixed product can only be iterated once')
        self.odometer = Odometer(self.sequences)
        return self.odometer

    def tostr(self, depth=0):
        if self.odometer is not None:
            return self.odometer.tostr(depth)
        ret = '\t'*depth + "MixedProduct:\n"
        return ret + ''.join(['\t'*(depth + 1) + repr(s) + '\n'
                              for s in self.sequences])

    def __str__(self):
        return self.tostr()


def mixed_product(*iterables):
    """
    Build the product of iterables.  Re-iterable arguments (lists, strings,
    ranges) are borrowed and left untouched; iterators and generators are
    consumed.  Wrap an argument in Sequence(..., owned=...) to choose.
    """
    if not iterables:
        return EMPTY_PRODUCT
    return MixedProduct(iterables)
