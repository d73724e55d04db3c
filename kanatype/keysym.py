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

import re

NONE_KEY = 'none'
BACKSPACE_KEY = 'backspace'

MODIFIER_SHIFT = 'shift'
MODIFIER_FUNCTION = 'fn'
MODIFIER_LOCK = 'lock'

class KeySymbol(object):
    '''A decoded key press: the physical key and its modifier state.

    KEYVAL names the physical key by its unshifted character ('a', '1',
    '@') or by a key name ('backspace', 'space', 'yen').  The engine
    never sees raw host events, only instances of this class.'''

    __modifier_names = (MODIFIER_SHIFT, MODIFIER_FUNCTION, MODIFIER_LOCK)

    def __init__(self, keyval, shift=False, function=False, caps_lock=False):
        if not keyval:
            raise ValueError('empty keyval')
        self.__keyval = keyval
        self.__shift = bool(shift)
        self.__function = bool(function)
        self.__caps_lock = bool(caps_lock)

    @classmethod
    def none(cls):
        '''Return the symbol which stands for "no resolvable key".'''
        return cls(NONE_KEY)

    @classmethod
    def parse(cls, keystr):
        '''Parse KEYSTR in the format of [<modifier> "+"]* <keyval>.

        Modifiers are "shift", "fn" and "lock" (caps lock).  A single
        upper case letter is read as the shifted letter key, so "A" and
        "shift+a" are the same symbol.'''
        modifiers = re.findall(r'([^+]+)\+', keystr)
        keyval = re.sub(r'(?:[^+]+\+)+', '', keystr)
        if not keyval:
            raise ValueError('no keyval in %r' % keystr)
        for modifier in modifiers:
            if modifier not in cls.__modifier_names:
                raise ValueError('unknown modifier %r in %r' %
                                 (modifier, keystr))
        shift = MODIFIER_SHIFT in modifiers
        if len(keyval) == 1 and 'A' <= keyval <= 'Z':
            keyval = keyval.lower()
            shift = True
        elif len(keyval) > 1:
            keyval = keyval.lower()
        return cls(keyval,
                   shift=shift,
                   function=MODIFIER_FUNCTION in modifiers,
                   caps_lock=MODIFIER_LOCK in modifiers)

    keyval = property(lambda self: self.__keyval)
    shift = property(lambda self: self.__shift)
    function = property(lambda self: self.__function)
    caps_lock = property(lambda self: self.__caps_lock)

    # key of key-based conversion tables; caps lock is applied afterwards
    lookup_key = property(lambda self: (self.__keyval,
                                        self.__shift,
                                        self.__function))

    def __key(self):
        return (self.__keyval, self.__shift, self.__function,
                self.__caps_lock)

    def __eq__(self, other):
        if not isinstance(other, KeySymbol):
            return NotImplemented
        return self.__key() == other.__key()

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash(self.__key())

    def __str__(self):
        modifiers = list()
        if self.__shift:
            modifiers.append(MODIFIER_SHIFT)
        if self.__function:
            modifiers.append(MODIFIER_FUNCTION)
        if self.__caps_lock:
            modifiers.append(MODIFIER_LOCK)
        return ''.join(m + '+' for m in modifiers) + self.__keyval

    def __repr__(self):
        return 'KeySymbol(%r)' % str(self)

def decode_char(char, tables, caps_lock=False, direct_kana=False):
    '''Find the key which types CHAR on the Latin keyboard of TABLES.

    CHAR is a character as reported by a host which already applied
    shift and caps lock.  When CAPS_LOCK is set the case of letters is
    inverted back before the lookup.  In DIRECT_KANA mode the keyboard
    is the layout the kana keys are named after.  Return None if no key
    produces CHAR.'''
    if caps_lock and char.isalpha():
        char = char.swapcase()
    if direct_kana:
        symbol = tables.kana_latin.find_key(char)
    else:
        symbol = tables.key_to_latin.find_key(char)
    if symbol is None:
        return None
    return KeySymbol(symbol.keyval, symbol.shift, symbol.function, caps_lock)
