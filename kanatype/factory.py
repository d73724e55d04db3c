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

import logging

from kanatype import context
from kanatype import rules
from kanatype import tabledata
from kanatype.table import ConversionTable, TableError, TableSet

logger = logging.getLogger(__name__)

def __load_records(_config, table_name, rule_name, attr, read):
    path = _config.get_value(table_name)
    if path:
        try:
            return read(path)
        except (IOError, TableError) as e:
            logger.warning("Can't load %s %s, using the bundled rule: %s",
                           table_name, path, e)
    return getattr(rules.load_rule(_config.get_value(rule_name)), attr)

def __custom_records(_config):
    value = _config.get_value('custom_roma_rule')
    if isinstance(value, dict):
        records = list(value.items())
    elif isinstance(value, (list, tuple)) and \
            all(isinstance(record, (list, tuple)) for record in value):
        records = [tuple(record) for record in value]
    else:
        logger.warning('Ignoring custom_roma_rule: expected {roma: kana} or '
                       '[[roma, kana], ...], got %r', value)
        return []
    try:
        ConversionTable(records)
    except TableError as e:
        logger.warning('Ignoring custom_roma_rule: %s', e)
        return []
    return records

def load_tables(_config):
    '''Build the TableSet described by the Config _CONFIG.'''
    key_records = __load_records(_config, 'key_table', 'key_rule',
                                 'KEY_RULE', tabledata.read_key_records)
    roma_records = __load_records(_config, 'roma_table', 'roma_rule',
                                  'ROMA_RULE', tabledata.read_string_records)
    roma_records = list(roma_records) + __custom_records(_config)
    kana_key_records = __load_records(_config, 'kana_key_table',
                                      'kana_key_rule', 'KEY_RULE',
                                      tabledata.read_key_records)
    kana_mid_records = __load_records(_config, 'kana_mid_table',
                                      'kana_mid_rule', 'KANA_MID_RULE',
                                      tabledata.read_string_records)
    kana_latin_records = __load_records(_config, 'kana_latin_table',
                                        'kana_latin_rule', 'KEY_RULE',
                                        tabledata.read_key_records)
    return TableSet.from_records(key_records, roma_records,
                                 kana_key_records, kana_mid_records,
                                 kana_latin_records)

def __input_mode(value):
    if value in context.INPUT_MODE_NAMES:
        return value
    for input_mode, name in context.INPUT_MODE_NAMES.items():
        if name == value:
            return input_mode
    logger.warning('Unknown input mode %r, using %s', value,
                   context.INPUT_MODE_NAMES[context.INPUT_MODE_ROMA])
    return context.INPUT_MODE_ROMA

def initial_input_mode(_config):
    '''Return the initial input mode of _CONFIG as an INPUT_MODE_*.'''
    return __input_mode(_config.get_value('initial_input_mode'))

def create_context(_config, tables=None):
    '''Create a Context set up as _CONFIG says.

    TABLES defaults to load_tables(_CONFIG); pass a shared TableSet to
    avoid building the tables once per context.'''
    if tables is None:
        tables = load_tables(_config)
    _context = context.Context(tables)
    _context.backspace_enabled = _config.get_value('backspace_enabled')
    _context.caps_lock_affects_case = \
        _config.get_value('caps_lock_affects_case')
    _context.activate_input_mode(initial_input_mode(_config))
    return _context
