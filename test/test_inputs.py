#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import queue
import unittest
from mchip.constants import DEFAULT_KEYMAP
from mchip.inputs.i_curses import input_thread
from mchip.inputs.i_null import Inputs, InputsError


class TestInputs(unittest.TestCase):
    def setUp(self):
        self.inputs = Inputs(DEFAULT_KEYMAP, None)

    def test_inputs_keymap(self):
        self.assertEqual(16, len(self.inputs.keymap_dict))
        self.assertEqual(0x0, self.inputs.keymap_dict[120])  # 'x'
        self.assertEqual(0xF, self.inputs.keymap_dict[118])  # 'v'

    def test_inputs_keymap_lowercase(self):
        inputs = Inputs(",".join(str(ord(c)) for c in "X123QWEASDZC4RFV"), None, force_lowercase=True)
        self.assertEqual(0x0, inputs.keymap_dict[ord("x")])

    def test_inputs_keymap_errors(self):
        self.assertRaises(InputsError, Inputs, "1,2,3", None)
        self.assertRaises(InputsError, Inputs, ",".join(["1"] * 16), None)
        self.assertRaises(InputsError, Inputs, ",".join(["a"] * 16), None)

    def test_inputs_key_down(self):
        self.assertFalse(self.inputs.is_key_down(0x3))
        self.inputs.press_key(0x3)
        self.assertTrue(self.inputs.is_key_down(0x3))
        self.inputs.release_key(0x3)
        self.assertFalse(self.inputs.is_key_down(0x3))

    def test_inputs_keypress_consumed(self):
        self.assertIsNone(self.inputs.get_keypress())
        self.inputs.press_key(0x7)
        self.assertEqual(0x7, self.inputs.get_keypress())
        self.assertIsNone(self.inputs.get_keypress())

    def test_inputs_setup_keypress(self):
        self.inputs.press_key(0x7)
        self.inputs.setup_keypress()
        self.assertIsNone(self.inputs.get_keypress())
        self.assertTrue(self.inputs.is_key_down(0x7))  # Still held

    def test_inputs_process_messages(self):
        self.assertFalse(self.inputs.process_messages())

    def test_inputs_keypress_first_wins(self):
        self.inputs.setup_keypress()
        self.inputs.press_key(0x3)
        self.inputs.press_key(0x5)
        self.assertEqual(0x3, self.inputs.get_keypress())
        self.assertIsNone(self.inputs.get_keypress())
        self.assertTrue(self.inputs.is_key_down(0x5))


class FakeCursesScreen:
    # Hands back a fixed sequence of getch() results
    def __init__(self, chars):
        self.chars = list(chars)

    def getch(self):
        return self.chars.pop(0)


class TestCursesInputThread(unittest.TestCase):
    def test_curses_input_thread_skips_no_input(self):
        input_queue = queue.Queue(16)
        screen = FakeCursesScreen([-1, ord("X"), -1, ord("1"), 27])
        input_thread(queue.Queue(1), input_queue, {ord("x"): 0x0, ord("1"): 0x1}, screen)

        self.assertEqual(0x0, input_queue.get(block=False))
        self.assertEqual(0x1, input_queue.get(block=False))
        self.assertIsNone(input_queue.get(block=False))  # ESC asks to quit
        self.assertTrue(input_queue.empty())
