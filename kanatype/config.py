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

import json
import logging
import os.path

from kanatype import context
from kanatype import rules

logger = logging.getLogger(__name__)

class Config(object):
    __config_path_unexpanded = '~/.config/kanatype.json'
    __defaults = {
        'backspace_enabled': True,
        'caps_lock_affects_case': True,
        'initial_input_mode': context.INPUT_MODE_ROMA,
        'key_rule': rules.RULE_QWERTY,
        'roma_rule': rules.RULE_ROMA,
        'kana_key_rule': rules.RULE_JISKANA,
        'kana_mid_rule': rules.RULE_JISKANA,
        # Latin layout the host keyboard has in direct kana mode.
        'kana_latin_rule': rules.RULE_JIS,
        # CSV files which replace the rules above when set.
        'key_table': None,
        'roma_table': None,
        'kana_key_table': None,
        'kana_mid_table': None,
        'kana_latin_table': None,
        # {roma: kana} or [[roma, kana], ...] appended to the roma rule.
        'custom_roma_rule': (),
        # Host bindings, in the format of ["ctrl+"] <keyval>.
        'latin_keys': ('ctrl+\\',),
        'kana_keys': ('ctrl+k',),
        'commit_keys': ('return', 'ctrl+m'),
        'cancel_keys': ('escape', 'ctrl+g'),
    }

    def __init__(self, path=None):
        if path is None:
            path = os.path.expanduser(self.__config_path_unexpanded)
        self.__path = path
        self.__modified = dict()
        self.__config_from_file = self.__read(path)

    path = property(lambda self: self.__path)

    def __read(self, path):
        if not os.path.exists(path):
            return dict()
        try:
            with open(path, 'r', encoding='utf-8') as f:
                config = json.load(f)
        except (IOError, ValueError) as e:
            logger.warning("Can't read config file %s: %s", path, e)
            return dict()
        if not isinstance(config, dict):
            logger.warning("Ignoring config file %s: not a JSON object", path)
            return dict()
        unknown = set(config) - set(self.__defaults)
        if unknown:
            logger.warning('Unknown options in %s: %s', path,
                           ', '.join(sorted(unknown)))
        return config

    def keys(self):
        return list(self.__defaults.keys())

    def get_value(self, name):
        if name in self.__modified:
            return self.__modified[name]
        value = self.__config_from_file.get(name)
        if value is not None:
            return value
        return self.__defaults.get(name)

    def set_value(self, name, value):
        if value is not None:
            self.__modified[name] = value
        else:
            self.__modified.pop(name, None)

    def save(self):
        '''Write the modified values back to the config file.'''
        config = dict(self.__config_from_file)
        config.update(self.__modified)
        directory = os.path.dirname(self.__path)
        if directory and not os.path.isdir(directory):
            os.makedirs(directory)
        with open(self.__path, 'w', encoding='utf-8') as f:
            json.dump(config, f, ensure_ascii=False, indent=2, sort_keys=True)
        self.__config_from_file = config
        self.__modified = dict()
