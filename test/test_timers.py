#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from mchip.timers import Timers


class TestTimers(unittest.TestCase):
    def setUp(self):
        self.timers = Timers()

    def test_timers_init(self):
        self.assertEqual(0, self.timers.delay)
        self.assertEqual(0, self.timers.sound)
        self.assertFalse(self.timers.tone)

    def test_timers_delay_floor(self):
        self.assertFalse(self.timers.tick())
        self.assertEqual(0, self.timers.delay)
        self.timers.set_delay(2)
        self.timers.tick()
        self.assertEqual(1, self.timers.delay)
        self.timers.tick()
        self.timers.tick()
        self.assertEqual(0, self.timers.delay)

    def test_timers_sound_tone(self):
        self.timers.set_sound(3)
        self.assertTrue(self.timers.tone)
        self.assertTrue(self.timers.tick())
        self.assertEqual(2, self.timers.sound)
        self.assertTrue(self.timers.tick())
        self.assertEqual(1, self.timers.sound)
        self.assertFalse(self.timers.tick())  # Off on the tick where it reaches zero
        self.assertEqual(0, self.timers.sound)
        self.assertFalse(self.timers.tick())

    def test_timers_independent(self):
        self.timers.set_delay(5)
        self.timers.set_sound(1)
        self.timers.tick()
        self.assertEqual(4, self.timers.delay)
        self.assertEqual(0, self.timers.sound)

    def test_timers_set_masks(self):
        self.timers.set_delay(0x1FF)
        self.timers.set_sound(0x100)
        self.assertEqual(0xFF, self.timers.delay)
        self.assertEqual(0x00, self.timers.sound)
