import unittest

from mixedproduct.exceptions import SpentError
from mixedproduct.odometer import Odometer
from mixedproduct.sequence import Sequence


def make(*iterables):
    return Odometer([Sequence(i) for i in iterables])


class TestAdvanceAll(unittest.TestCase):

    def test_reports_padding(self):
        odo = make([0, 1], [0, 1, 2, 3])
        self.assertEqual(odo.current(), (0, 0))
        self.assertFalse(odo.advance_all())
        self.assertEqual(odo.current(), (1, 1))
        self.assertFalse(odo.advance_all())
        self.assertEqual(odo.periods[0].padded_period, 2)
        self.assertFalse(odo.periods[1].fixed)
        self.assertFalse(odo.advance_all())
        self.assertEqual(odo.current(), (1, 3))
        self.assertTrue(odo.advance_all())
        self.assertEqual(odo.periods[1].true_length, 4)
        self.assertEqual(odo.periods[1].padded_period, 5)
        self.assertEqual(odo.ticks, 4)
        # the padded level holds its position while the other moves on
        self.assertFalse(odo.advance_all())
        self.assertEqual(odo.current(), (1, 0))

    def test_every_level_moves_every_tick(self):
        odo = make('ab', 'xyz')
        odo.advance_all()
        self.assertEqual(odo.current(), ('b', 'y'))
        self.assertEqual([c.counter for c in odo.cursors], [1, 1])

    def test_simultaneous_discovery_in_input_order(self):
        odo = make([0, 1], [0, 1])
        odo.advance_all()
        self.assertTrue(odo.advance_all())
        self.assertEqual(odo.periods[0].padded_period, 2)
        self.assertEqual(odo.periods[0].running_product, 2)
        self.assertEqual(odo.periods[1].padded_period, 3)
        self.assertEqual(odo.periods[1].running_product, 6)


class TestStep(unittest.TestCase):

    def test_skips_padding(self):
        odo = make([0, 1], [0, 1, 2, 3])
        seen = [odo.current()]
        while True:
            odo.step()
            if odo.exhausted:
                break
            seen.append(odo.current())
        self.assertEqual(seen, [(0, 0), (1, 1), (0, 2), (1, 3),
                                (1, 0), (0, 1), (1, 2), (0, 3)])
        self.assertEqual(odo.ticks, 10)
        self.assertEqual(odo.total_period, 10)
        self.assertEqual(odo.padding_ticks, 2)
        self.assertTrue(odo.all_periods_fixed())

    def test_all_length_one(self):
        odo = make([1], 'a', [None])
        self.assertEqual(list(odo), [(1, 'a', None)])
        self.assertEqual(odo.ticks, 1)
        self.assertEqual(odo.total_period, 1)

    def test_spent(self):
        odo = make('ab')
        self.assertEqual(list(odo), [('a',), ('b',)])
        self.assertTrue(odo.exhausted)
        self.assertRaises(SpentError, odo.step)
        self.assertRaises(SpentError, odo.current)

    def test_stop_iteration_repeats(self):
        odo = make('a')
        self.assertEqual(next(odo), ('a',))
        self.assertRaises(StopIteration, next, odo)
        self.assertRaises(StopIteration, next, odo)


class TestEmpty(unittest.TestCase):

    def test_exhausted_at_start(self):
        for args in (([], 'ab'), ('ab', [], 'cd'), ('ab', iter([]))):
            odo = make(*args)
            self.assertTrue(odo.exhausted)
            self.assertEqual(list(odo), [])
            self.assertEqual(odo.ticks, 0)


class TestIntrospection(unittest.TestCase):

    def test_counts(self):
        odo = make([0, 1], [0, 1])
        self.assertEqual(list(odo), [(0, 0), (1, 1), (1, 0), (0, 1)])
        self.assertEqual(odo.emitted, 4)
        self.assertEqual(odo.ticks, 6)
        self.assertEqual(odo.padding_ticks, 2)

    def test_tostr(self):
        odo = make('ab', 'abc')
        self.assertIn('unresolved', str(odo))
        list(odo)
        text = odo.tostr()
        self.assertTrue(text.startswith('Odometer(exhausted)'))
        self.assertIn('length 3, period 3', text)
