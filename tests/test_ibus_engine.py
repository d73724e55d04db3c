# vim:set et sts=4 sw=4:
# -*- coding: utf-8 -*-

import unittest

from kanatype.keysym import KeySymbol
from kanatype.table import TableSet

try:
    import gi
    gi.require_version('IBus', '1.0')
    from gi.repository import IBus
except (ImportError, ValueError):
    IBus = None

@unittest.skipUnless(IBus, 'IBus introspection data is not available')
class TestKeyEvent(unittest.TestCase):
    def setUp(self):
        from kanatype import ibus_engine
        self.__engine = ibus_engine
        self.__tables = TableSet.default()

    def testkeybinding(self):
        key_binding = self.__engine.key_binding
        control = IBus.ModifierType.CONTROL_MASK
        self.assertEqual(key_binding(IBus.KEY_Return, 0), 'return')
        self.assertEqual(key_binding(IBus.KEY_Escape, 0), 'escape')
        self.assertEqual(key_binding(IBus.KEY_g, control), 'ctrl+g')
        self.assertEqual(key_binding(IBus.KEY_G, control), 'ctrl+g')
        self.assertEqual(key_binding(IBus.KEY_backslash, control), 'ctrl+\\')
        self.assertEqual(key_binding(IBus.KEY_a, 0), 'a')
        self.assertIsNone(key_binding(IBus.KEY_Shift_L, 0))

    def testdecode(self):
        decode = self.__engine.decode_key_event
        lock = IBus.ModifierType.LOCK_MASK
        self.assertEqual(decode(IBus.KEY_a, 0, self.__tables),
                         KeySymbol('a'))
        self.assertEqual(decode(IBus.KEY_A, 0, self.__tables),
                         KeySymbol('a', shift=True))
        self.assertEqual(decode(IBus.KEY_A, lock, self.__tables),
                         KeySymbol('a', caps_lock=True))
        self.assertEqual(decode(IBus.KEY_exclam, 0, self.__tables),
                         KeySymbol('1', shift=True))
        self.assertEqual(decode(IBus.KEY_BackSpace, 0, self.__tables),
                         KeySymbol('backspace'))
        self.assertIsNone(decode(IBus.KEY_Shift_L, 0, self.__tables))
        self.assertEqual(decode(IBus.KEY_at, 0, self.__tables, True),
                         KeySymbol('@'))
        self.assertEqual(decode(IBus.KEY_colon, 0, self.__tables, True),
                         KeySymbol(':'))

if __name__ == '__main__':
    unittest.main()
