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

import string
from kanatype.keysym import KeySymbol, NONE_KEY, BACKSPACE_KEY
from kanatype.table import NULL_CHAR

INPUT_MODE_ROMA, \
INPUT_MODE_KANA, \
INPUT_MODE_LATIN = range(3)

INPUT_MODE_NAMES = {
    INPUT_MODE_ROMA: 'roma',
    INPUT_MODE_KANA: 'kana',
    INPUT_MODE_LATIN: 'latin'
}

class State(object):
    def __init__(self):
        self.latin_mode = False
        self.direct_kana_mode = False
        self.backspace_enabled = True
        self.caps_lock_affects_case = True
        # Last key symbol seen, kept across reset().
        self.event = None
        self.reset()

    def reset(self):
        # COMMITTED holds the converted units and RAWS, index by index,
        # the input that produced them.  Both always have the same length.
        self.committed = list()
        self.raws = list()

        # Input not yet resolved into a unit: romaji in romanized mode,
        # kana waiting for a diacritic in direct kana mode.
        self.pending = ''

        # The character accepted by the last key, '' if it was rejected.
        self.prev_char = ''

class Results(object):
    '''Read-only view of the text typed into a context.

    The strings are computed from the live state on every access.'''

    def __init__(self, state):
        self.__state = state

    final_text = property(lambda self: ''.join(self.__state.committed) +
                          self.__state.pending)
    raw_text = property(lambda self: ''.join(self.__state.raws) +
                        self.__state.pending)
    prev_char = property(lambda self: self.__state.prev_char)
    event = property(lambda self: self.__state.event)

class Context(object):
    def __init__(self, tables):
        '''Create a typing context.

        TABLES is a TableSet, which may be shared by several contexts.'''
        self.__tables = tables
        self.__state = State()
        self.__results = Results(self.__state)

    tables = property(lambda self: self.__tables)
    results = property(lambda self: self.__results)

    final_text = property(lambda self: self.__results.final_text)
    raw_text = property(lambda self: self.__results.raw_text)
    prev_char = property(lambda self: self.__results.prev_char)
    event = property(lambda self: self.__results.event)

    committed = property(lambda self: tuple(self.__state.committed))
    raws = property(lambda self: tuple(self.__state.raws))
    pending = property(lambda self: self.__state.pending)

    latin_mode = property(lambda self: self.__state.latin_mode)
    direct_kana_mode = property(lambda self: self.__state.direct_kana_mode)

    def set_backspace_enabled(self, enabled):
        self.__state.backspace_enabled = bool(enabled)

    def set_caps_lock_affects_case(self, enabled):
        self.__state.caps_lock_affects_case = bool(enabled)

    backspace_enabled = property(lambda self: self.__state.backspace_enabled,
                                 set_backspace_enabled)
    caps_lock_affects_case = property(
        lambda self: self.__state.caps_lock_affects_case,
        set_caps_lock_affects_case)

    def clear(self):
        '''Clear all the typed text.  Modes and the last event are kept.'''
        self.__state.reset()

    def __commit(self, output, raw):
        self.__state.committed.append(output)
        self.__state.raws.append(raw)

    def __flush(self):
        # Commit every pending letter as it is.
        state = self.__state
        for letter in state.pending:
            self.__commit(letter, letter)
        state.pending = ''

    def set_latin_mode(self, latin_mode):
        '''Turn the Latin input mode on or off.  Turning it on commits
        the pending input unconverted.'''
        if latin_mode:
            self.__flush()
        self.__state.latin_mode = bool(latin_mode)

    def set_direct_kana_mode(self, direct_kana_mode):
        '''Switch between direct kana and romanized input.  The pending
        input is committed unconverted.'''
        self.__flush()
        self.__state.direct_kana_mode = bool(direct_kana_mode)

    def __input_mode(self):
        if self.__state.latin_mode:
            return INPUT_MODE_LATIN
        if self.__state.direct_kana_mode:
            return INPUT_MODE_KANA
        return INPUT_MODE_ROMA

    input_mode = property(lambda self: self.__input_mode())

    def activate_input_mode(self, input_mode):
        '''Switch the current input mode to INPUT_MODE.'''
        if input_mode == INPUT_MODE_LATIN:
            self.set_latin_mode(True)
        elif input_mode in (INPUT_MODE_ROMA, INPUT_MODE_KANA):
            self.set_latin_mode(False)
            self.set_direct_kana_mode(input_mode == INPUT_MODE_KANA)
        else:
            raise ValueError('unknown input mode %r' % input_mode)

    def __check_invariant(self):
        assert len(self.__state.committed) == len(self.__state.raws)

    def apply_key(self, symbol):
        '''Process the key press SYMBOL.

        Return True if the key was consumed: it typed a character, or it
        was a backspace which deleted one.'''
        if symbol.keyval == NONE_KEY:
            # Hosts may report one press twice; the copy carries no key.
            return False
        state = self.__state
        state.event = symbol
        if symbol.keyval == BACKSPACE_KEY:
            handled = self.delete_char()
            state.prev_char = ''
        elif state.latin_mode:
            handled = self.__input_latin(symbol)
        elif state.direct_kana_mode:
            handled = self.__input_kana(symbol)
        else:
            handled = self.__input_roma(symbol)
        self.__check_invariant()
        return handled

    def press_key(self, keystr):
        '''Process a key press event KEYSTR.

        KEYSTR is in the format of [<modifier> "+"]* <keyval>.'''
        return self.apply_key(KeySymbol.parse(keystr))

    def type_keys(self, keystrs):
        '''Press the whitespace separated KEYSTRS in turn and return the
        resulting text.'''
        for keystr in keystrs.split():
            self.press_key(keystr)
        return self.final_text

    def __accept(self, table, symbol, caps_lock_affects_case=False):
        letter = table.convert(symbol, caps_lock_affects_case)
        if letter == NULL_CHAR:
            self.__state.prev_char = ''
            return None
        self.__state.prev_char = letter
        return letter

    def __input_latin(self, symbol):
        letter = self.__accept(self.__tables.key_to_latin, symbol,
                               self.__state.caps_lock_affects_case)
        if letter is None:
            return False
        self.__commit(letter, letter)
        return True

    def __input_kana(self, symbol):
        # Caps lock never changes kana.
        letter = self.__accept(self.__tables.key_to_kana_mid, symbol)
        if letter is None:
            return False
        self.__state.pending += letter
        self.__drain(self.__tables.kana_mid_to_kana)
        return True

    def __is_sokuon(self, pending):
        if len(pending) < 2 or pending[0] != pending[1]:
            return False
        letter = pending[0]
        return letter in string.ascii_lowercase and \
            letter not in self.__tables.vowels and \
            letter != self.__tables.syllabic_n_key

    def __is_syllabic_n(self, pending):
        return len(pending) >= 2 and \
            pending[0] == self.__tables.syllabic_n_key and \
            not self.__tables.roma_to_kana.can_convert(pending[:2], True)

    def __input_roma(self, symbol):
        tables = self.__tables
        state = self.__state
        letter = self.__accept(tables.key_to_latin, symbol,
                               state.caps_lock_affects_case)
        if letter is None:
            return False
        state.pending += letter

        # "tt" -> "っ" + "t", "nk" -> "ん" + "k"
        if self.__is_sokuon(state.pending):
            self.__commit(tables.sokuon, state.pending[0])
            state.pending = state.pending[1:]
        elif self.__is_syllabic_n(state.pending):
            self.__commit(tables.syllabic_n, state.pending[0])
            state.pending = state.pending[1:]
        if state.pending[:1] == tables.elongation_key:
            self.__commit(tables.long_vowel_mark, tables.elongation_key)
            state.pending = state.pending[1:]

        self.__drain(tables.roma_to_kana)
        return True

    def __drain(self, table):
        # Convert as much of the pending input as can no longer grow
        # into a longer source of TABLE.
        state = self.__state
        while state.pending:
            if table.is_prefix(state.pending):
                break
            if table.can_convert(state.pending):
                self.__commit(table.convert(state.pending), state.pending)
                state.pending = ''
                break
            head = self.__longest_head(table, state.pending)
            if head:
                self.__commit(table.convert(head), head)
            else:
                head = state.pending[0]
                self.__commit(head, head)
            state.pending = state.pending[len(head):]

    def __longest_head(self, table, pending):
        for length in range(len(pending) - 1, 0, -1):
            if table.can_convert(pending[:length]):
                return pending[:length]
        return ''

    def delete_char(self):
        '''Delete one typed character.

        The last pending letter goes first.  Otherwise the last
        committed unit and its raw input both lose their last character,
        and the unit is dropped once it is empty.  Return True if
        anything was deleted.'''
        state = self.__state
        if not state.backspace_enabled:
            return False
        if state.pending:
            state.pending = state.pending[:-1]
            return True
        if state.committed:
            state.committed[-1] = state.committed[-1][:-1]
            state.raws[-1] = state.raws[-1][:-1]
            if not state.committed[-1]:
                del state.committed[-1]
                del state.raws[-1]
            return True
        return False
