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

# JIS kana layout.  Keyvals are the unshifted characters printed on a
# JIS keyboard; "yen" is the key right of "^" and "\\" the key left of
# right shift.

_UNSHIFTED = [
    ('ぬ', '1'), ('ふ', '2'), ('あ', '3'), ('う', '4'), ('え', '5'),
    ('お', '6'), ('や', '7'), ('ゆ', '8'), ('よ', '9'), ('わ', '0'),
    ('ほ', '-'), ('へ', '^'), ('ー', 'yen'),
    ('た', 'q'), ('て', 'w'), ('い', 'e'), ('す', 'r'), ('か', 't'),
    ('ん', 'y'), ('な', 'u'), ('に', 'i'), ('ら', 'o'), ('せ', 'p'),
    ('゛', '@'), ('゜', '['),
    ('ち', 'a'), ('と', 's'), ('し', 'd'), ('は', 'f'), ('き', 'g'),
    ('く', 'h'), ('ま', 'j'), ('の', 'k'), ('り', 'l'), ('れ', ';'),
    ('け', ':'), ('む', ']'),
    ('つ', 'z'), ('さ', 'x'), ('そ', 'c'), ('ひ', 'v'), ('こ', 'b'),
    ('み', 'n'), ('も', 'm'), ('ね', ','), ('る', '.'), ('め', '/'),
    ('ろ', '\\'),
]

_SHIFTED = [
    ('ぁ', '3'), ('ぅ', '4'), ('ぇ', '5'), ('ぉ', '6'), ('ゃ', '7'),
    ('ゅ', '8'), ('ょ', '9'), ('を', '0'), ('ぃ', 'e'), ('「', '['),
    ('」', ']'), ('っ', 'z'), ('、', ','), ('。', '.'), ('・', '/'),
]

_SHIFTED_KEYS = set(keyval for kana, keyval in _SHIFTED)

# Keys without a shifted kana type the same kana with shift held.
KEY_RULE = [(kana, keyval, False, False) for kana, keyval in _UNSHIFTED] + \
           [(kana, keyval, True, False) for kana, keyval in _SHIFTED] + \
           [(kana, keyval, True, False) for kana, keyval in _UNSHIFTED
            if keyval not in _SHIFTED_KEYS]

KANA_MID_RULE = [
    ('か゛', 'が'), ('き゛', 'ぎ'), ('く゛', 'ぐ'), ('け゛', 'げ'), ('こ゛', 'ご'),
    ('さ゛', 'ざ'), ('し゛', 'じ'), ('す゛', 'ず'), ('せ゛', 'ぜ'), ('そ゛', 'ぞ'),
    ('た゛', 'だ'), ('ち゛', 'ぢ'), ('つ゛', 'づ'), ('て゛', 'で'), ('と゛', 'ど'),
    ('は゛', 'ば'), ('ひ゛', 'び'), ('ふ゛', 'ぶ'), ('へ゛', 'べ'), ('ほ゛', 'ぼ'),
    ('は゜', 'ぱ'), ('ひ゜', 'ぴ'), ('ふ゜', 'ぷ'), ('へ゜', 'ぺ'), ('ほ゜', 'ぽ'),
    ('う゛', 'ゔ'),
]
