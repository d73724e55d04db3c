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

import gi
gi.require_version('IBus', '1.0')
from gi.repository import GLib
from gi.repository import GObject
from gi.repository import IBus

from kanatype import __version__
from kanatype import context
from kanatype import factory
from kanatype.keysym import KeySymbol, BACKSPACE_KEY, decode_char

logger = logging.getLogger(__name__)

COMPONENT_NAME = 'org.freedesktop.IBus.KanaType'
ENGINE_NAME = 'kanatype'
AUTHOR = 'KIHARA Hideto <deton@m1.interq.or.jp>'

__special_keys = {
    IBus.KEY_Return: 'return',
    IBus.KEY_KP_Enter: 'return',
    IBus.KEY_Escape: 'escape',
    IBus.KEY_BackSpace: BACKSPACE_KEY,
    IBus.KEY_Tab: '\t',
}

def keyval_to_char(keyval):
    '''Return the character of KEYVAL, or None if it has none.'''
    char = IBus.keyval_to_unicode(keyval)
    if not char or char == '\0':
        return None
    if 0x20 > ord(char) or ord(char) == 0x7F:
        return None
    return char

def key_binding(keyval, state):
    '''Return KEYVAL and STATE in the format of the *_keys options,
    e.g. "ctrl+g" or "return".'''
    name = __special_keys.get(keyval)
    if name is None:
        name = keyval_to_char(keyval)
        if name is None:
            return None
    if state & IBus.ModifierType.CONTROL_MASK:
        # Some systems return 'J' if ctrl:nocaps xkb option is
        # enabled and the user press CapsLock + 'j'.
        name = 'ctrl+' + name.lower()
    return name

def decode_key_event(keyval, state, tables, direct_kana=False):
    '''Decode a key press into a KeySymbol, or None if it types nothing.'''
    if keyval == IBus.KEY_BackSpace:
        return KeySymbol(BACKSPACE_KEY)
    char = keyval_to_char(keyval)
    if char is None:
        return None
    caps_lock = bool(state & IBus.ModifierType.LOCK_MASK)
    return decode_char(char, tables, caps_lock, direct_kana)

class Engine(IBus.Engine):
    __gtype_name__ = 'KanaTypeEngine'

    config = None
    tables = None

    __input_mode_labels = {
        context.INPUT_MODE_ROMA: 'あ',
        context.INPUT_MODE_KANA: 'か',
        context.INPUT_MODE_LATIN: '_A'
    }

    def __init__(self):
        super(Engine, self).__init__()
        self.__context = factory.create_context(self.config, self.tables)
        self.__initial_input_mode = factory.initial_input_mode(self.config)
        self.__input_mode = self.__context.input_mode
        self.__input_mode_prop = IBus.Property(
            key='InputMode',
            prop_type=IBus.PropType.NORMAL,
            label=IBus.Text.new_from_string(
                self.__input_mode_labels[self.__input_mode]),
            tooltip=IBus.Text.new_from_string('Input mode'))
        self.__prop_list = IBus.PropList()
        self.__prop_list.append(self.__input_mode_prop)

    def do_process_key_event(self, keyval, keycode, state):
        # ignore key release events
        if state & IBus.ModifierType.RELEASE_MASK:
            return False
        # ignore alt+key events
        if state & IBus.ModifierType.MOD1_MASK:
            return False

        binding = key_binding(keyval, state)
        preedit_visible = len(self.__context.final_text) > 0
        if binding in self.config.get_value('commit_keys') and \
                preedit_visible:
            self.__commit()
            return True
        if binding in self.config.get_value('cancel_keys') and \
                preedit_visible:
            self.__context.clear()
            self.__update()
            return True
        if binding in self.config.get_value('latin_keys'):
            self.__context.set_latin_mode(not self.__context.latin_mode)
            self.__update()
            return True
        if binding in self.config.get_value('kana_keys'):
            self.__context.set_latin_mode(False)
            self.__context.set_direct_kana_mode(
                not self.__context.direct_kana_mode)
            self.__update()
            return True
        if state & IBus.ModifierType.CONTROL_MASK:
            return False

        direct_kana = self.__context.input_mode == context.INPUT_MODE_KANA
        symbol = decode_key_event(keyval, state, self.__context.tables,
                                  direct_kana)
        if symbol is None:
            # If the pre-edit buffer is visible, always handle key events.
            return preedit_visible
        logger.debug('key %s -> %s', IBus.keyval_name(keyval), symbol)
        handled = self.__context.apply_key(symbol)
        self.__update()
        return handled or preedit_visible

    def __commit(self):
        text = self.__context.final_text
        self.__context.clear()
        self.commit_text(IBus.Text.new_from_string(text))
        self.__update()

    def __update(self):
        text = self.__context.final_text
        preedit = IBus.Text.new_from_string(text)
        preedit.append_attribute(IBus.AttrType.UNDERLINE,
                                 IBus.AttrUnderline.SINGLE, 0, len(text))
        self.update_preedit_text(preedit, len(text), len(text) > 0)
        self.__update_input_mode()

    def __update_input_mode(self):
        if self.__input_mode == self.__context.input_mode:
            return
        self.__input_mode = self.__context.input_mode
        self.__input_mode_prop.set_label(IBus.Text.new_from_string(
            self.__input_mode_labels[self.__input_mode]))
        self.update_property(self.__input_mode_prop)

    def do_focus_in(self):
        self.register_properties(self.__prop_list)

    def do_focus_out(self):
        self.__commit()

    def do_reset(self):
        self.__context.clear()
        self.__context.activate_input_mode(self.__initial_input_mode)
        self.__update()

class IMApp(object):
    def __init__(self, exec_by_ibus):
        self.__component = IBus.Component.new(COMPONENT_NAME,
                                              'KanaType Component',
                                              __version__,
                                              'GPL',
                                              AUTHOR,
                                              '',
                                              '',
                                              'kanatype')
        self.__component.add_engine(IBus.EngineDesc.new(ENGINE_NAME,
                                                        'KanaType',
                                                        'Japanese romaji/kana',
                                                        'ja',
                                                        'GPL',
                                                        AUTHOR,
                                                        '',
                                                        'default'))
        self.__mainloop = GLib.MainLoop()
        self.__bus = IBus.Bus()
        self.__bus.connect('disconnected', self.__bus_disconnected_cb)
        self.__factory = IBus.Factory.new(self.__bus.get_connection())
        self.__factory.add_engine(ENGINE_NAME,
                                  GObject.type_from_name(Engine.__gtype_name__))
        if exec_by_ibus:
            self.__bus.request_name(COMPONENT_NAME, 0)
        else:
            self.__bus.register_component(self.__component)

    def run(self):
        self.__mainloop.run()

    def __bus_disconnected_cb(self, bus):
        logger.info('disconnected from ibus-daemon')
        self.__mainloop.quit()

def launch_engine(_config, exec_by_ibus):
    '''Serve the engine until ibus-daemon goes away.'''
    IBus.init()
    Engine.config = _config
    Engine.tables = factory.load_tables(_config)
    IMApp(exec_by_ibus).run()
