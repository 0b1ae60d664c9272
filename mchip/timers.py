#!/usr/bin/env python3

"""
Delay and Sound Timers

Both timers count down once per tick (nominally 60 times a second) until they
reach zero, and stay there.  The sound timer also drives the buzzer: the tone
is on whenever it is non-zero after the tick.  The tone is recomputed on every
tick rather than only when it changes, so audio plugins must treat repeated
requests as harmless.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class Timers:
    def __init__(self):
        self.delay = 0
        self.sound = 0

    def set_delay(self, value):
        self.delay = value & 0xFF

    def set_sound(self, value):
        self.sound = value & 0xFF

    @property
    def tone(self):
        return self.sound > 0

    def tick(self):
        if self.delay > 0:
            self.delay -= 1

        if self.sound > 0:
            self.sound -= 1

        return self.tone
