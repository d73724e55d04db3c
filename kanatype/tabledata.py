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

import csv
import logging

from kanatype.table import TableError

logger = logging.getLogger(__name__)

KEY_FIELDS = 4
STRING_FIELDS = 2

def _read_rows(path, nfields):
    '''Yield (LINENO, FIELDS) for the data lines of the CSV file PATH.'''
    with open(path, 'r', encoding='utf-8-sig', newline='') as f:
        for lineno, row in enumerate(csv.reader(f), 1):
            if not row or not ''.join(row).strip():
                continue
            # Trailing commas leave empty fields behind.
            while len(row) > nfields and row[-1] == '':
                row.pop()
            if len(row) != nfields:
                raise TableError('%s:%d: expected %d fields, got %d' %
                                 (path, lineno, nfields, len(row)))
            yield lineno, row

def _parse_flag(path, lineno, value):
    value = value.strip()
    if value not in ('0', '1'):
        raise TableError('%s:%d: flag must be 0 or 1, got %r' %
                         (path, lineno, value))
    return value == '1'

def read_key_records(path):
    '''Read key table records from PATH.

    Each line is "target,keyval,shift,function", e.g. "S,s,1,0".'''
    records = list()
    for lineno, (target, keyval, shift, function) in \
            _read_rows(path, KEY_FIELDS):
        keyval = keyval.strip()
        if len(target) != 1 or not keyval:
            raise TableError('%s:%d: bad key record %r' %
                             (path, lineno, (target, keyval)))
        records.append((target, keyval,
                        _parse_flag(path, lineno, shift),
                        _parse_flag(path, lineno, function)))
    logger.debug('read %d key records from %s', len(records), path)
    return records

def read_string_records(path):
    '''Read string table records from PATH.

    Each line is "source,target", e.g. "shi,し".'''
    records = list()
    for lineno, (source, target) in _read_rows(path, STRING_FIELDS):
        if not source:
            raise TableError('%s:%d: empty source' % (path, lineno))
        records.append((source, target))
    logger.debug('read %d string records from %s', len(records), path)
    return records
