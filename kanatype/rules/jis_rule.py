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

# JIS layout Latin characters: (character, keyval, shift, function).
# Keyvals match the ones of jiskana_rule, so a host which reports
# characters of a JIS keyboard can be decoded for both input methods.

KEY_RULE = [(letter, letter, False, False)
            for letter in 'abcdefghijklmnopqrstuvwxyz'] + \
           [(letter.upper(), letter, True, False)
            for letter in 'abcdefghijklmnopqrstuvwxyz'] + [
    ('1', '1', False, False), ('!', '1', True, False),
    ('2', '2', False, False), ('"', '2', True, False),
    ('3', '3', False, False), ('#', '3', True, False),
    ('4', '4', False, False), ('$', '4', True, False),
    ('5', '5', False, False), ('%', '5', True, False),
    ('6', '6', False, False), ('&', '6', True, False),
    ('7', '7', False, False), ('\'', '7', True, False),
    ('8', '8', False, False), ('(', '8', True, False),
    ('9', '9', False, False), (')', '9', True, False),
    ('0', '0', False, False),
    ('-', '-', False, False), ('=', '-', True, False),
    ('^', '^', False, False), ('~', '^', True, False),
    ('\\', 'yen', False, False), ('|', 'yen', True, False),
    ('@', '@', False, False), ('`', '@', True, False),
    ('[', '[', False, False), ('{', '[', True, False),
    (';', ';', False, False), ('+', ';', True, False),
    (':', ':', False, False), ('*', ':', True, False),
    (']', ']', False, False), ('}', ']', True, False),
    (',', ',', False, False), ('<', ',', True, False),
    ('.', '.', False, False), ('>', '.', True, False),
    ('/', '/', False, False), ('?', '/', True, False),
    ('\\', '\\', False, False), ('_', '\\', True, False),
    (' ', 'space', False, False), (' ', 'space', True, False),
]
