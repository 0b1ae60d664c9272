#!/usr/bin/env python3

"""
Null Input Plugin

Serves as a base class for other Input plugins.  Can be used on its own if zero
input functionality is required, or driven directly by calling press_key() and
release_key() (as the tests do).

Besides the 16 held/released key states, this keeps the first key-down event
since it was last taken.  A CPU waiting for a keypress calls setup_keypress()
to forget anything older, then polls get_keypress(), which hands the event
over only once.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class InputsError(Exception):
    pass


class Inputs:
    def __init__(self, keymap, renderer, force_lowercase=False):
        self.keymap_dict = {}
        self.renderer = renderer
        keymap_split = keymap.split(",")

        if len(keymap_split) != 0x10:
            raise InputsError("Incorrect number of keys defined -- 16 required.  Use commas to split numbers")

        for key_num, key_defined in enumerate(keymap_split):
            try:
                key_defined_ord = int(key_defined)
            except ValueError:
                raise InputsError("Defined keys are not all integer values") from None

            if force_lowercase:
                # If we are working with characters rather than keyscan codes, we should convert to lowercase
                key_defined_ord = ord(chr(key_defined_ord).lower())

            if key_defined_ord in self.keymap_dict:
                raise InputsError("Duplicate keys defined")

            self.keymap_dict[key_defined_ord] = key_num

        self.key_down = [False] * 0x10
        self.last_keypress = None

    def process_messages(self):
        return False  # Don't exit the program

    def press_key(self, key):
        self.key_down[key] = True

        if self.last_keypress is None:  # Later presses wait until the first is taken
            self.last_keypress = key

    def release_key(self, key):
        self.key_down[key] = False

    def is_key_down(self, key):
        return self.key_down[key]

    def setup_keypress(self):
        self.last_keypress = None

    def get_keypress(self):
        key = self.last_keypress
        self.last_keypress = None
        return key

    def shutdown(self):
        pass
