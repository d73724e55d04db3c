# vim:set et sts=4 sw=4:
# -*- coding: utf-8 -*-

import os
import os.path
import shutil
import tempfile
import unittest

from kanatype import tabledata
from kanatype.context import Context
from kanatype.table import TableSet, TableError

class TestTableData(unittest.TestCase):
    def setUp(self):
        self.__dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.__dir)

    def __write(self, name, text):
        path = os.path.join(self.__dir, name)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(text)
        return path

    def testkeyrecords(self):
        path = self.__write('qwerty.csv',
                            's,s,0,0\nS,s,1,0\n\n",",",",0,0,\n#,3,1,0\n')
        self.assertEqual(tabledata.read_key_records(path),
                         [('s', 's', False, False),
                          ('S', 's', True, False),
                          (',', ',', False, False),
                          ('#', '3', True, False)])

    def teststringrecords(self):
        path = self.__write('roma.csv', '\ufeffa,あ\nshi,し\n",",、\n')
        self.assertEqual(tabledata.read_string_records(path),
                         [('a', 'あ'), ('shi', 'し'), (',', '、')])

    def testmalformed(self):
        path = self.__write('bad.csv', 's,s,0,0\nS,s,yes,0\n')
        with self.assertRaises(TableError) as cm:
            tabledata.read_key_records(path)
        self.assertIn('bad.csv:2', str(cm.exception))
        path = self.__write('short.csv', 's,s,0\n')
        self.assertRaises(TableError, tabledata.read_key_records, path)
        path = self.__write('long.csv', 'ab,s,0,0\n')
        self.assertRaises(TableError, tabledata.read_key_records, path)
        path = self.__write('empty.csv', ',あ\n')
        self.assertRaises(TableError, tabledata.read_string_records, path)
        path = self.__write('three.csv', 'a,あ,x\n')
        self.assertRaises(TableError, tabledata.read_string_records, path)

    def testtables(self):
        keys = self.__write('keys.csv', 'k,k,0,0\na,a,0,0\n')
        roma = self.__write('roma.csv', 'ka,か\nka,カ\n')
        tables = TableSet.from_records(tabledata.read_key_records(keys),
                                       tabledata.read_string_records(roma),
                                       [], [])
        _context = Context(tables)
        self.assertEqual(_context.type_keys('k a'), 'カ')
        self.assertEqual(tables.kana_to_roma.convert('か'), 'ka')

if __name__ == '__main__':
    unittest.main()
