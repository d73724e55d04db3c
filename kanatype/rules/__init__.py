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

import importlib

RULE_QWERTY = 'qwerty_rule'
RULE_ROMA = 'roma_rule'
RULE_JIS = 'jis_rule'
RULE_JISKANA = 'jiskana_rule'

RULE_NAMES = (RULE_QWERTY, RULE_JIS, RULE_ROMA, RULE_JISKANA)

def load_rule(rulename):
    '''Return the bundled rule module RULENAME.'''
    if rulename not in RULE_NAMES:
        raise ValueError('unknown rule %r' % rulename)
    return importlib.import_module('%s.%s' % (__name__, rulename))
