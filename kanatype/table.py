# vim:set et sts=4 sw=4:
# -*- coding: utf-8 -*-
#
# kanatype - romaji/kana typing emulator (based on ibus-tutcode)
#
# Copyright (C) 2011 KIHARA Hideto <deton@m1.interq.or.jp>
# Copyright (C) 2009-2010 Daiki Ueno <ueno@unixuser.org>
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2, or (at your option)
# any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program; if not, write to the Free Software
# Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA
# 02110-1301, USA.

from kanatype.keysym import KeySymbol

NULL_CHAR = '\0'

class TableError(ValueError):
    '''Raised when the records of a conversion table are malformed.'''

def compile_prefix_tree(sources):
    '''Compile SOURCES into a tree of nested dicts, one level per letter.

    A node with children means that some source continues past it.'''
    tree = dict()
    for source in sources:
        node = tree
        for letter in source:
            node = node.setdefault(letter, dict())
    return tree

class ConversionTable(object):
    '''Mapping from short source strings to target strings.

    The table is built once from an ordered list of (SOURCE, TARGET)
    records.  In the forward direction a later record for the same
    source replaces the earlier one; in the reverse direction the first
    source seen for a target is kept.'''

    def __init__(self, records):
        self.__forward = dict()
        self.__reverse = dict()
        self.__max_source_length = 0
        for index, record in enumerate(records):
            source, target = self.__check_record(index, record)
            self.__forward[source] = target
            self.__max_source_length = max(self.__max_source_length,
                                           len(source))
            if target not in self.__reverse:
                self.__reverse[target] = source
        self.__tree = compile_prefix_tree(self.__forward)

    def __check_record(self, index, record):
        try:
            source, target = record
        except (TypeError, ValueError):
            raise TableError('record %d: expected (source, target), got %r' %
                             (index, record))
        if not isinstance(source, str) or not isinstance(target, str):
            raise TableError('record %d: source and target must be strings' %
                             index)
        if not source:
            raise TableError('record %d: empty source' % index)
        return source, target

    max_source_length = property(lambda self: self.__max_source_length)

    def __len__(self):
        return len(self.__forward)

    def __contains__(self, source):
        return source in self.__forward

    def items(self):
        '''Return the (SOURCE, TARGET) pairs of the forward map.'''
        return list(self.__forward.items())

    def is_prefix(self, source):
        '''Return True if SOURCE is a strict prefix of some source.'''
        node = self.__tree
        for letter in source:
            node = node.get(letter)
            if node is None:
                return False
        return len(node) > 0

    def can_convert(self, source, possibility=False):
        '''Return True if SOURCE is mapped.  If POSSIBILITY is True, also
        return True when a longer source starting with SOURCE exists.'''
        if source in self.__forward:
            return True
        return possibility and self.is_prefix(source)

    def convert(self, source):
        '''Return the target of SOURCE.  SOURCE must be mapped.'''
        return self.__forward[source]

    def can_revert(self, target):
        return target in self.__reverse

    def revert(self, target):
        '''Return the first source which was mapped to TARGET.'''
        return self.__reverse[target]

    def inverse(self):
        '''Return a table mapping targets back to their first source.'''
        return ConversionTable([(target, source) for target, source
                                in self.__reverse.items() if target])

class KeyTable(object):
    '''Mapping from key symbols to single characters.

    Built from ordered (TARGET, KEYVAL, SHIFT, FUNCTION) records with
    the same overwrite/first-wins rules as ConversionTable.'''

    def __init__(self, records):
        self.__forward = dict()
        self.__reverse = dict()
        for index, record in enumerate(records):
            target, key = self.__check_record(index, record)
            self.__forward[key] = target
            if target not in self.__reverse:
                self.__reverse[target] = key

    def __check_record(self, index, record):
        try:
            target, keyval, shift, function = record
        except (TypeError, ValueError):
            raise TableError('record %d: expected '
                             '(target, keyval, shift, function), got %r' %
                             (index, record))
        if not isinstance(target, str) or len(target) != 1:
            raise TableError('record %d: target must be one character: %r' %
                             (index, target))
        if not isinstance(keyval, str) or not keyval:
            raise TableError('record %d: bad keyval %r' % (index, keyval))
        return target, (keyval, bool(shift), bool(function))

    def __len__(self):
        return len(self.__forward)

    def can_convert(self, symbol):
        return symbol.lookup_key in self.__forward

    def convert(self, symbol, caps_lock_affects_case=False):
        '''Return the character typed by SYMBOL, or NULL_CHAR if SYMBOL
        is not mapped.  If CAPS_LOCK_AFFECTS_CASE is True and caps lock
        is on, letters come out in the opposite case.'''
        target = self.__forward.get(symbol.lookup_key, NULL_CHAR)
        if caps_lock_affects_case and symbol.caps_lock and target.isalpha():
            swapped = target.swapcase()
            # keys type one character, but "ß".swapcase() is "SS"
            if len(swapped) == 1:
                target = swapped
        return target

    def find_key(self, char):
        '''Return the first key symbol which types CHAR, or None.'''
        key = self.__reverse.get(char)
        if key is None:
            return None
        keyval, shift, function = key
        return KeySymbol(keyval, shift, function)

class TableSet(object):
    '''The conversion tables shared by any number of contexts.'''

    SOKUON = 'っ'
    SYLLABIC_N = 'ん'
    SYLLABIC_N_KEY = 'n'
    LONG_VOWEL_MARK = 'ー'
    ELONGATION_KEY = '-'
    VOWELS = 'aiueo'

    def __init__(self, key_to_latin, roma_to_kana, key_to_kana_mid,
                 kana_mid_to_kana,
                 kana_latin=None,
                 sokuon=SOKUON,
                 syllabic_n=SYLLABIC_N,
                 syllabic_n_key=SYLLABIC_N_KEY,
                 long_vowel_mark=LONG_VOWEL_MARK,
                 elongation_key=ELONGATION_KEY,
                 vowels=VOWELS):
        self.__key_to_latin = key_to_latin
        self.__roma_to_kana = roma_to_kana
        self.__kana_to_roma = roma_to_kana.inverse()
        self.__key_to_kana_mid = key_to_kana_mid
        self.__kana_mid_to_kana = kana_mid_to_kana
        self.__kana_to_kana_mid = kana_mid_to_kana.inverse()
        # Latin layout the kana keys are named after; a host typing
        # through it reports the characters of this table.
        if kana_latin is None:
            kana_latin = key_to_latin
        self.__kana_latin = kana_latin
        self.__sokuon = sokuon
        self.__syllabic_n = syllabic_n
        self.__syllabic_n_key = syllabic_n_key
        self.__long_vowel_mark = long_vowel_mark
        self.__elongation_key = elongation_key
        self.__vowels = vowels

    @classmethod
    def from_records(cls, key_records, roma_records, kana_key_records,
                     kana_mid_records, kana_latin_records=None, **kwargs):
        '''Build a table set from the record lists of the tables.

        KANA_LATIN_RECORDS defaults to KEY_RECORDS.'''
        kana_latin = None
        if kana_latin_records is not None:
            kana_latin = KeyTable(kana_latin_records)
        return cls(KeyTable(key_records),
                   ConversionTable(roma_records),
                   KeyTable(kana_key_records),
                   ConversionTable(kana_mid_records),
                   kana_latin=kana_latin,
                   **kwargs)

    @classmethod
    def default(cls):
        '''Build a table set from the bundled rules.'''
        from kanatype import rules
        return cls.from_records(
            rules.load_rule(rules.RULE_QWERTY).KEY_RULE,
            rules.load_rule(rules.RULE_ROMA).ROMA_RULE,
            rules.load_rule(rules.RULE_JISKANA).KEY_RULE,
            rules.load_rule(rules.RULE_JISKANA).KANA_MID_RULE,
            rules.load_rule(rules.RULE_JIS).KEY_RULE)

    key_to_latin = property(lambda self: self.__key_to_latin)
    roma_to_kana = property(lambda self: self.__roma_to_kana)
    kana_to_roma = property(lambda self: self.__kana_to_roma)
    key_to_kana_mid = property(lambda self: self.__key_to_kana_mid)
    kana_mid_to_kana = property(lambda self: self.__kana_mid_to_kana)
    kana_to_kana_mid = property(lambda self: self.__kana_to_kana_mid)
    kana_latin = property(lambda self: self.__kana_latin)

    sokuon = property(lambda self: self.__sokuon)
    syllabic_n = property(lambda self: self.__syllabic_n)
    syllabic_n_key = property(lambda self: self.__syllabic_n_key)
    long_vowel_mark = property(lambda self: self.__long_vowel_mark)
    elongation_key = property(lambda self: self.__elongation_key)
    vowels = property(lambda self: self.__vowels)

    def __romanize_head(self, text):
        table = self.__kana_to_roma
        for length in range(min(table.max_source_length, len(text)), 0, -1):
            if table.can_convert(text[:length]):
                return text[:length], table.convert(text[:length])
        if text[0] == self.__long_vowel_mark:
            return text[0], self.__elongation_key
        return text[0], text[0]

    def romanize(self, text):
        '''Return a romanized spelling of the kana TEXT which types TEXT
        back in romanized mode.  Characters without a spelling are kept.'''
        output = list()
        geminate = False
        while text:
            if text[0] == self.__sokuon and len(text) > 1:
                geminate = True
                text = text[1:]
                continue
            head, roma = self.__romanize_head(text)
            if geminate:
                if roma[0] in self.__vowels or \
                        roma[0] == self.__syllabic_n_key or \
                        not roma[0].isalpha():
                    # nothing to double; spell the sokuon on its own
                    output.append(self.__romanize_head(self.__sokuon)[1])
                else:
                    output.append(roma[0])
                geminate = False
            output.append(roma)
            text = text[len(head):]
        return ''.join(output)

    def kana_keys(self, text):
        '''Return the key symbols which type the kana TEXT in direct kana
        mode, or None if some character cannot be typed.'''
        keys = list()
        for char in text:
            if self.__kana_to_kana_mid.can_convert(char):
                mid = self.__kana_to_kana_mid.convert(char)
            else:
                mid = char
            for letter in mid:
                symbol = self.__key_to_kana_mid.find_key(letter)
                if symbol is None:
                    return None
                keys.append(symbol)
        return keys
