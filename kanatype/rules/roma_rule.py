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

# Romanized sequence to hiragana: (roma, kana).  The first spelling of
# a kana is the one used when romanizing.  Syllabic n before consonants,
# doubled consonants and "-" are handled by the context, not here.

ROMA_RULE = [
    ('a', 'あ'), ('i', 'い'), ('u', 'う'), ('e', 'え'), ('o', 'お'),
    ('ka', 'か'), ('ki', 'き'), ('ku', 'く'), ('ke', 'け'), ('ko', 'こ'),
    ('sa', 'さ'), ('shi', 'し'), ('su', 'す'), ('se', 'せ'), ('so', 'そ'),
    ('ta', 'た'), ('chi', 'ち'), ('tsu', 'つ'), ('te', 'て'), ('to', 'と'),
    ('na', 'な'), ('ni', 'に'), ('nu', 'ぬ'), ('ne', 'ね'), ('no', 'の'),
    ('ha', 'は'), ('hi', 'ひ'), ('fu', 'ふ'), ('he', 'へ'), ('ho', 'ほ'),
    ('ma', 'ま'), ('mi', 'み'), ('mu', 'む'), ('me', 'め'), ('mo', 'も'),
    ('ya', 'や'), ('yu', 'ゆ'), ('yo', 'よ'),
    ('ra', 'ら'), ('ri', 'り'), ('ru', 'る'), ('re', 'れ'), ('ro', 'ろ'),
    ('wa', 'わ'), ('wo', 'を'), ('nn', 'ん'),
    ('ga', 'が'), ('gi', 'ぎ'), ('gu', 'ぐ'), ('ge', 'げ'), ('go', 'ご'),
    ('za', 'ざ'), ('ji', 'じ'), ('zu', 'ず'), ('ze', 'ぜ'), ('zo', 'ぞ'),
    ('da', 'だ'), ('di', 'ぢ'), ('du', 'づ'), ('de', 'で'), ('do', 'ど'),
    ('ba', 'ば'), ('bi', 'び'), ('bu', 'ぶ'), ('be', 'べ'), ('bo', 'ぼ'),
    ('pa', 'ぱ'), ('pi', 'ぴ'), ('pu', 'ぷ'), ('pe', 'ぺ'), ('po', 'ぽ'),
    ('vu', 'ゔ'),

    # alternative spellings
    ('si', 'し'), ('ci', 'し'), ('ti', 'ち'), ('tu', 'つ'), ('hu', 'ふ'),
    ('zi', 'じ'), ('ca', 'か'), ('cu', 'く'), ('co', 'こ'),
    ('ce', 'せ'), ('qu', 'く'), ('n\'', 'ん'), ('xn', 'ん'),
    ('ye', 'いぇ'), ('wi', 'うぃ'), ('we', 'うぇ'),

    ('kya', 'きゃ'), ('kyi', 'きぃ'), ('kyu', 'きゅ'), ('kye', 'きぇ'),
    ('kyo', 'きょ'),
    ('gya', 'ぎゃ'), ('gyi', 'ぎぃ'), ('gyu', 'ぎゅ'), ('gye', 'ぎぇ'),
    ('gyo', 'ぎょ'),
    ('sha', 'しゃ'), ('shu', 'しゅ'), ('she', 'しぇ'), ('sho', 'しょ'),
    ('sya', 'しゃ'), ('syi', 'しぃ'), ('syu', 'しゅ'), ('sye', 'しぇ'),
    ('syo', 'しょ'),
    ('ja', 'じゃ'), ('ju', 'じゅ'), ('je', 'じぇ'), ('jo', 'じょ'),
    ('jya', 'じゃ'), ('jyi', 'じぃ'), ('jyu', 'じゅ'), ('jye', 'じぇ'),
    ('jyo', 'じょ'),
    ('zya', 'じゃ'), ('zyi', 'じぃ'), ('zyu', 'じゅ'), ('zye', 'じぇ'),
    ('zyo', 'じょ'),
    ('cha', 'ちゃ'), ('chu', 'ちゅ'), ('che', 'ちぇ'), ('cho', 'ちょ'),
    ('tya', 'ちゃ'), ('tyi', 'ちぃ'), ('tyu', 'ちゅ'), ('tye', 'ちぇ'),
    ('tyo', 'ちょ'),
    ('cya', 'ちゃ'), ('cyi', 'ちぃ'), ('cyu', 'ちゅ'), ('cye', 'ちぇ'),
    ('cyo', 'ちょ'),
    ('dya', 'ぢゃ'), ('dyi', 'ぢぃ'), ('dyu', 'ぢゅ'), ('dye', 'ぢぇ'),
    ('dyo', 'ぢょ'),
    ('tha', 'てゃ'), ('thi', 'てぃ'), ('thu', 'てゅ'), ('the', 'てぇ'),
    ('tho', 'てょ'),
    ('dha', 'でゃ'), ('dhi', 'でぃ'), ('dhu', 'でゅ'), ('dhe', 'でぇ'),
    ('dho', 'でょ'),
    ('tsa', 'つぁ'), ('tsi', 'つぃ'), ('tse', 'つぇ'), ('tso', 'つぉ'),
    ('twu', 'とぅ'), ('dwu', 'どぅ'),
    ('nya', 'にゃ'), ('nyi', 'にぃ'), ('nyu', 'にゅ'), ('nye', 'にぇ'),
    ('nyo', 'にょ'),
    ('hya', 'ひゃ'), ('hyi', 'ひぃ'), ('hyu', 'ひゅ'), ('hye', 'ひぇ'),
    ('hyo', 'ひょ'),
    ('bya', 'びゃ'), ('byi', 'びぃ'), ('byu', 'びゅ'), ('bye', 'びぇ'),
    ('byo', 'びょ'),
    ('pya', 'ぴゃ'), ('pyi', 'ぴぃ'), ('pyu', 'ぴゅ'), ('pye', 'ぴぇ'),
    ('pyo', 'ぴょ'),
    ('fa', 'ふぁ'), ('fi', 'ふぃ'), ('fe', 'ふぇ'), ('fo', 'ふぉ'),
    ('fya', 'ふゃ'), ('fyu', 'ふゅ'), ('fyo', 'ふょ'),
    ('mya', 'みゃ'), ('myi', 'みぃ'), ('myu', 'みゅ'), ('mye', 'みぇ'),
    ('myo', 'みょ'),
    ('rya', 'りゃ'), ('ryi', 'りぃ'), ('ryu', 'りゅ'), ('rye', 'りぇ'),
    ('ryo', 'りょ'),
    ('va', 'ゔぁ'), ('vi', 'ゔぃ'), ('ve', 'ゔぇ'), ('vo', 'ゔぉ'),
    ('kwa', 'くぁ'), ('qa', 'くぁ'), ('qi', 'くぃ'), ('qe', 'くぇ'),
    ('qo', 'くぉ'),
    ('gwa', 'ぐぁ'), ('wha', 'うぁ'), ('whi', 'うぃ'), ('whe', 'うぇ'),
    ('who', 'うぉ'),

    # small kana
    ('xa', 'ぁ'), ('xi', 'ぃ'), ('xu', 'ぅ'), ('xe', 'ぇ'), ('xo', 'ぉ'),
    ('la', 'ぁ'), ('li', 'ぃ'), ('lu', 'ぅ'), ('le', 'ぇ'), ('lo', 'ぉ'),
    ('xya', 'ゃ'), ('xyu', 'ゅ'), ('xyo', 'ょ'),
    ('lya', 'ゃ'), ('lyu', 'ゅ'), ('lyo', 'ょ'),
    ('ltu', 'っ'), ('xtu', 'っ'), ('ltsu', 'っ'), ('xtsu', 'っ'),
    ('xwa', 'ゎ'), ('lwa', 'ゎ'),
    ('xka', 'ゕ'), ('xke', 'ゖ'),

    # symbols
    (',', '、'), ('.', '。'), ('[', '「'), (']', '」'),
    ('/', '・'), ('~', '〜'),
]
