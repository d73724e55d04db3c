# vim:set et sts=4 sw=4:
# -*- coding: utf-8 -*-

import random
import unittest

from kanatype import context
from kanatype.context import Context
from kanatype.keysym import KeySymbol
from kanatype.table import TableSet

TABLES = TableSet.default()

class TestRoma(unittest.TestCase):
    def setUp(self):
        self.__context = Context(TABLES)

    def testromkana(self):
        # ka -> か
        self.assertTrue(self.__context.press_key('k'))
        self.assertEqual(self.__context.pending, 'k')
        self.assertEqual(self.__context.final_text, 'k')
        self.assertEqual(self.__context.prev_char, 'k')
        self.assertTrue(self.__context.press_key('a'))
        self.assertEqual(self.__context.committed, ('か',))
        self.assertEqual(self.__context.raws, ('ka',))
        self.assertEqual(self.__context.pending, '')
        # shi -> し
        self.__context.type_keys('s h')
        self.assertEqual(self.__context.pending, 'sh')
        self.__context.press_key('i')
        self.assertEqual(self.__context.final_text, 'かし')
        self.assertEqual(self.__context.raw_text, 'kashi')

    def testsokuon(self):
        self.__context.type_keys('t t e')
        self.assertEqual(self.__context.committed, ('っ', 'て'))
        self.assertEqual(self.__context.raws, ('t', 'te'))
        self.__context.clear()
        self.assertEqual(self.__context.type_keys('k i p p u'), 'きっぷ')
        self.assertEqual(self.__context.raw_text, 'kippu')

    def testsokuonafterliteral(self):
        # the doubled consonant rule only looks at the head of the input
        # before it is drained, so "yy" behind a dropped "k" stays literal
        self.assertEqual(self.__context.type_keys('k y y a'), 'kyや')
        self.assertEqual(self.__context.committed, ('k', 'y', 'や'))
        self.assertEqual(self.__context.raws, ('k', 'y', 'ya'))

    def testsyllabicn(self):
        self.assertEqual(self.__context.type_keys('k a n k a'), 'かんか')
        self.assertEqual(self.__context.raws, ('ka', 'n', 'ka'))
        self.__context.clear()
        self.assertEqual(self.__context.type_keys('n n a'), 'んあ')
        self.__context.clear()
        self.assertEqual(self.__context.type_keys('n y a'), 'にゃ')
        self.__context.clear()
        self.assertEqual(self.__context.type_keys('h o n ,'), 'ほん、')
        self.assertEqual(self.__context.raws, ('ho', 'n', ','))
        self.__context.clear()
        # "n" waits for the next key
        self.assertEqual(self.__context.type_keys('h o n'), 'ほn')
        self.assertEqual(self.__context.pending, 'n')

    def testlongvowel(self):
        self.assertEqual(self.__context.type_keys('r a - m e n n'),
                         'らーめん')
        self.assertEqual(self.__context.raws, ('ra', '-', 'me', 'nn'))
        self.__context.clear()
        # not after a pending consonant
        self.assertEqual(self.__context.type_keys('k -'), 'k-')

    def testpassthrough(self):
        self.assertEqual(self.__context.type_keys('q'), 'q')
        self.assertEqual(self.__context.pending, 'q')
        self.assertEqual(self.__context.type_keys('1'), 'q1')
        self.assertEqual(self.__context.committed, ('q', '1'))
        self.assertEqual(self.__context.raws, ('q', '1'))
        self.assertEqual(self.__context.pending, '')
        self.__context.clear()
        self.assertEqual(self.__context.type_keys('k 1'), 'k1')
        self.assertEqual(self.__context.committed, ('k', '1'))

    def testupper(self):
        # the roma table is lower case only
        self.assertEqual(self.__context.type_keys('K A'), 'KA')
        self.assertEqual(self.__context.committed, ('K', 'A'))

    def testunmapped(self):
        self.__context.type_keys('k a')
        self.assertFalse(self.__context.press_key('f12'))
        self.assertEqual(self.__context.prev_char, '')
        self.assertEqual(self.__context.final_text, 'か')
        self.assertEqual(self.__context.event, KeySymbol('f12'))

    def testnonekey(self):
        self.__context.press_key('k')
        event = self.__context.event
        self.assertFalse(self.__context.apply_key(KeySymbol.none()))
        self.assertEqual(self.__context.prev_char, 'k')
        self.assertEqual(self.__context.event, event)
        self.assertEqual(self.__context.final_text, 'k')

    def testcapslock(self):
        self.__context.set_latin_mode(True)
        self.__context.type_keys('lock+a shift+lock+b')
        self.assertEqual(self.__context.final_text, 'Ab')
        self.__context.clear()
        self.__context.caps_lock_affects_case = False
        self.__context.type_keys('lock+a shift+lock+b')
        self.assertEqual(self.__context.final_text, 'aB')

class TestLongestMatch(unittest.TestCase):
    def setUp(self):
        tables = TableSet.from_records(
            [(c, c, False, False) for c in 'ahqs'],
            [('s', 'X'), ('sh', 'Y')],
            [], [])
        self.__context = Context(tables)

    def testlongest(self):
        self.__context.type_keys('s h')
        self.assertEqual(self.__context.committed, ('Y',))
        self.assertEqual(self.__context.raws, ('sh',))

    def testshorter(self):
        self.__context.type_keys('s a')
        self.assertEqual(self.__context.committed, ('X', 'a'))
        self.assertEqual(self.__context.raws, ('s', 'a'))

    def testfallback(self):
        self.__context.press_key('q')
        self.assertEqual(self.__context.committed, ('q',))
        self.assertEqual(self.__context.raws, ('q',))

class TestBackspace(unittest.TestCase):
    def setUp(self):
        self.__context = Context(TABLES)

    def testpending(self):
        self.__context.type_keys('s h')
        self.assertTrue(self.__context.press_key('backspace'))
        self.assertEqual(self.__context.pending, 's')
        self.assertEqual(self.__context.prev_char, '')

    def testcommitted(self):
        self.__context.type_keys('k a')
        self.assertEqual(self.__context.committed, ('か',))
        self.assertTrue(self.__context.delete_char())
        self.assertEqual(self.__context.committed, ())
        self.assertEqual(self.__context.raws, ())
        self.assertFalse(self.__context.delete_char())

    def testlockstep(self):
        # a two letter unit typed from one key loses one letter per
        # backspace, together with its raw input
        self.__context.type_keys('y e')
        self.assertEqual(self.__context.committed, ('いぇ',))
        self.__context.press_key('backspace')
        self.assertEqual(self.__context.committed, ('い',))
        self.assertEqual(self.__context.raws, ('y',))
        self.__context.press_key('backspace')
        self.assertEqual(self.__context.committed, ())
        self.assertEqual(self.__context.raws, ())

    def testlatin(self):
        self.__context.set_latin_mode(True)
        self.__context.type_keys('a b backspace')
        self.assertEqual(self.__context.final_text, 'a')
        self.assertEqual(self.__context.raw_text, 'a')

    def testdisabled(self):
        self.__context.backspace_enabled = False
        self.__context.type_keys('k a k')
        self.assertFalse(self.__context.press_key('backspace'))
        self.assertEqual(self.__context.final_text, 'かk')
        self.assertEqual(self.__context.prev_char, '')

class TestKana(unittest.TestCase):
    def setUp(self):
        self.__context = Context(TABLES)
        self.__context.set_direct_kana_mode(True)

    def testdakuten(self):
        # か waits for a diacritic
        self.__context.press_key('t')
        self.assertEqual(self.__context.pending, 'か')
        self.__context.press_key('@')
        self.assertEqual(self.__context.committed, ('が',))
        self.assertEqual(self.__context.raws, ('か゛',))
        self.assertEqual(self.__context.prev_char, '゛')

    def testhandakuten(self):
        self.__context.type_keys('f [')
        self.assertEqual(self.__context.committed, ('ぱ',))
        self.__context.type_keys('4 @')
        self.assertEqual(self.__context.final_text, 'ぱゔ')

    def testnodiacritic(self):
        self.__context.type_keys('t e')
        self.assertEqual(self.__context.committed, ('か', 'い'))
        self.assertEqual(self.__context.pending, '')
        self.__context.clear()
        # あ can not take a diacritic
        self.__context.press_key('3')
        self.assertEqual(self.__context.committed, ('あ',))
        self.__context.press_key('@')
        self.assertEqual(self.__context.committed, ('あ', '゛'))

    def testshift(self):
        self.__context.type_keys('shift+z shift+3 shift+,')
        self.assertEqual(self.__context.final_text, 'っぁ、')
        self.__context.clear()
        # shift without a shifted kana types the plain one
        self.__context.type_keys('shift+q')
        self.assertEqual(self.__context.final_text, 'た')

    def testcapslock(self):
        self.__context.type_keys('lock+q')
        self.assertEqual(self.__context.pending, 'た')

    def testbackspace(self):
        self.__context.type_keys('t @')
        self.__context.press_key('backspace')
        self.assertEqual(self.__context.committed, ())
        self.__context.press_key('t')
        self.__context.press_key('backspace')
        self.assertEqual(self.__context.final_text, '')

class TestModes(unittest.TestCase):
    def setUp(self):
        self.__context = Context(TABLES)

    def testinputmodechange(self):
        self.assertEqual(self.__context.input_mode, context.INPUT_MODE_ROMA)
        self.__context.activate_input_mode(context.INPUT_MODE_KANA)
        self.assertEqual(self.__context.input_mode, context.INPUT_MODE_KANA)
        self.__context.activate_input_mode(context.INPUT_MODE_LATIN)
        self.assertEqual(self.__context.input_mode, context.INPUT_MODE_LATIN)
        # Latin wins over direct kana
        self.assertTrue(self.__context.direct_kana_mode)
        self.__context.set_latin_mode(False)
        self.assertEqual(self.__context.input_mode, context.INPUT_MODE_KANA)
        self.__context.activate_input_mode(context.INPUT_MODE_ROMA)
        self.assertFalse(self.__context.latin_mode)
        self.assertFalse(self.__context.direct_kana_mode)
        self.assertRaises(ValueError, self.__context.activate_input_mode, 9)

    def testlatin(self):
        self.__context.set_latin_mode(True)
        self.__context.press_key('shift+h')
        self.assertEqual(self.__context.pending, '')
        self.__context.press_key('i')
        self.assertEqual(self.__context.pending, '')
        self.assertEqual(self.__context.committed, ('H', 'i'))
        self.assertEqual(self.__context.raws, ('H', 'i'))
        self.assertEqual(self.__context.prev_char, 'i')

    def testflushlatin(self):
        self.__context.type_keys('a s h')
        final_text = self.__context.final_text
        raw_text = self.__context.raw_text
        self.__context.set_latin_mode(True)
        self.assertEqual(self.__context.pending, '')
        self.assertEqual(self.__context.committed, ('あ', 's', 'h'))
        self.assertEqual(self.__context.raws, ('a', 's', 'h'))
        self.assertEqual(self.__context.final_text, final_text)
        self.assertEqual(self.__context.raw_text, raw_text)

    def testflushkana(self):
        self.__context.type_keys('k y')
        self.__context.set_direct_kana_mode(True)
        self.assertEqual(self.__context.committed, ('k', 'y'))
        self.__context.press_key('t')
        self.__context.set_direct_kana_mode(False)
        self.assertEqual(self.__context.committed, ('k', 'y', 'か'))
        self.assertEqual(self.__context.raws, ('k', 'y', 'か'))
        self.assertEqual(self.__context.pending, '')

    def testclear(self):
        self.__context.set_direct_kana_mode(True)
        self.__context.type_keys('t @ t')
        self.__context.clear()
        state = (self.__context.committed, self.__context.raws,
                 self.__context.pending, self.__context.prev_char,
                 self.__context.event, self.__context.input_mode)
        self.__context.clear()
        self.assertEqual((self.__context.committed, self.__context.raws,
                          self.__context.pending, self.__context.prev_char,
                          self.__context.event, self.__context.input_mode),
                         state)
        self.assertEqual(state[:4], ((), (), '', ''))
        self.assertEqual(state[5], context.INPUT_MODE_KANA)

class TestResults(unittest.TestCase):
    def testlive(self):
        _context = Context(TABLES)
        results = _context.results
        _context.type_keys('k a k')
        self.assertEqual(results.final_text, 'かk')
        self.assertEqual(results.raw_text, 'kak')
        self.assertEqual(results.prev_char, 'k')
        self.assertEqual(results.event, KeySymbol('k'))
        _context.clear()
        self.assertEqual(results.final_text, '')
        self.assertEqual(results.raw_text, '')

    def testshared(self):
        # contexts sharing the tables do not share state
        a = Context(TABLES)
        b = Context(TABLES)
        a.type_keys('k a')
        self.assertEqual(b.final_text, '')

class TestInvariant(unittest.TestCase):
    KEYS = ['a', 'i', 'k', 'n', 's', 't', 'y', 'h', '-', ',', 'q',
            'shift+a', '@', '[', '3', 'backspace', 'backspace', 'none']

    def testrandom(self):
        rand = random.Random(0)
        _context = Context(TABLES)
        for i in range(2000):
            what = rand.random()
            if what < 0.02:
                _context.set_latin_mode(not _context.latin_mode)
            elif what < 0.04:
                _context.set_direct_kana_mode(not _context.direct_kana_mode)
            elif what < 0.045:
                _context.clear()
            else:
                _context.press_key(rand.choice(self.KEYS))
            self.assertEqual(len(_context.committed), len(_context.raws))
            self.assertEqual(_context.final_text,
                             ''.join(_context.committed) + _context.pending)
            self.assertEqual(_context.raw_text,
                             ''.join(_context.raws) + _context.pending)
            self.assertTrue(len(_context.pending) <=
                            max(TABLES.roma_to_kana.max_source_length,
                                TABLES.kana_mid_to_kana.max_source_length))

if __name__ == '__main__':
    unittest.main()
