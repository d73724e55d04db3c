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

import getopt
import json
import locale
import logging
import os
import sys

from kanatype import config
from kanatype import factory

logger = logging.getLogger(__name__)

def print_help(out, v = 0):
    print("-i, --ibus             executed by ibus.", file=out)
    print("-h, --help             show this message.", file=out)
    print("-d, --daemonize        daemonize ibus", file=out)
    print("-D, --debug            log debug messages", file=out)
    print("-c, --config=PATH      read options from PATH", file=out)
    print("-e, --emulate          type each line of stdin and print", file=out)
    print("                       the text and its raw input", file=out)
    print("-s, --set=NAME=VALUE   write option NAME to the config", file=out)
    print("                       file; VALUE is JSON or a string", file=out)
    sys.exit(v)

def emulate(_config, infile, outfile):
    '''Type each line of INFILE, a list of keystrs, into a fresh context
    and write the produced text and raw input, tab separated, to OUTFILE.'''
    tables = factory.load_tables(_config)
    _context = factory.create_context(_config, tables)
    initial_input_mode = factory.initial_input_mode(_config)
    for line in infile:
        _context.clear()
        _context.activate_input_mode(initial_input_mode)
        try:
            _context.type_keys(line)
        except ValueError as e:
            logger.error('%s: %s', line.strip(), e)
            continue
        outfile.write('%s\t%s\n' % (_context.final_text, _context.raw_text))

def set_option(_config, assignment):
    '''Store ASSIGNMENT, in the format of NAME=VALUE, in the config file
    of _CONFIG.  Return False if ASSIGNMENT is not a known option.'''
    name, sep, value = assignment.partition('=')
    if not sep or name not in _config.keys():
        logger.error('unknown option %r', assignment)
        return False
    try:
        value = json.loads(value)
    except ValueError:
        pass
    _config.set_value(name, value)
    _config.save()
    logger.info('%s = %r written to %s', name, value, _config.path)
    return True

def main(argv=None):
    try:
        locale.setlocale(locale.LC_ALL, "")
    except locale.Error:
        pass

    if argv is None:
        argv = sys.argv[1:]

    exec_by_ibus = False
    daemonize = False
    debug = False
    emulate_stdin = False
    config_path = None
    assignments = list()

    shortopt = "ihdDc:es:"
    longopt = ["ibus", "help", "daemonize", "debug", "config=", "emulate",
               "set="]

    try:
        opts, args = getopt.getopt(argv, shortopt, longopt)
    except getopt.GetoptError as err:
        print(err, file=sys.stderr)
        print_help(sys.stderr, 1)

    for o, a in opts:
        if o in ("-h", "--help"):
            print_help(sys.stdout)
        elif o in ("-d", "--daemonize"):
            daemonize = True
        elif o in ("-i", "--ibus"):
            exec_by_ibus = True
        elif o in ("-D", "--debug"):
            debug = True
        elif o in ("-c", "--config"):
            config_path = a
        elif o in ("-e", "--emulate"):
            emulate_stdin = True
        elif o in ("-s", "--set"):
            assignments.append(a)

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format='%(asctime)s %(name)s %(levelname)s: %(message)s')

    _config = config.Config(config_path)

    if assignments:
        for assignment in assignments:
            if not set_option(_config, assignment):
                return 1
        return 0

    if emulate_stdin:
        emulate(_config, sys.stdin, sys.stdout)
        return 0

    if daemonize:
        if os.fork():
            sys.exit()

    # Needs PyGObject; only the engine itself talks to ibus-daemon.
    from kanatype import ibus_engine
    ibus_engine.launch_engine(_config, exec_by_ibus)
    return 0

if __name__ == "__main__":
    sys.exit(main())
