#!/usr/bin/env python3

"""
PyGame Audio Plugin

Plays the buzzer within PyGame / SDL.

There is simply a buzzer with an 'on' or 'off' status, sounding at a fixed
pitch.  A single cycle of a square wave is built at the requested frequency,
and looped for as long as the buzzer is on.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import pygame
from .a_null import Audio as AudioBase

PLAYBACK_FREQUENCY = 44100.0
DEFAULT_VOLUME = 0.1


class Audio(AudioBase):
    def __init__(self):
        self.sound = None
        pygame.mixer.pre_init(int(PLAYBACK_FREQUENCY), size=8, channels=1, buffer=1, allowedchanges=0)
        pygame.mixer.init()
        super().__init__()

    def set_frequency(self, frequency):
        # Setting PyGame's playback rate is very slow, so we must resample audio for it when building the buffer
        if frequency == self.frequency:
            return

        super().set_frequency(frequency)
        samples_per_cycle = max(2, int(PLAYBACK_FREQUENCY / frequency))
        half_cycle = samples_per_cycle // 2
        wave = memoryview(bytearray(b"\xFF" * half_cycle + b"\x00" * (samples_per_cycle - half_cycle)))

        if self.buzzer_enabled:
            self.sound.stop()

        self.sound = pygame.mixer.Sound(wave)
        self.sound.set_volume(DEFAULT_VOLUME)

        if self.buzzer_enabled:
            # If the wave has been replaced before the sound has been disabled, play the new one now
            self.sound.play(-1)

    def enable_buzzer(self, enabled):
        # Enable or disable the buzzer, i.e. play or stop playback.  If the sound is already being played, it won't be
        # restarted.

        if enabled:
            if not self.buzzer_enabled and self.sound:
                self.sound.play(-1)
        elif self.buzzer_enabled and self.sound:
            self.sound.stop()

        super().enable_buzzer(enabled)

    def shutdown(self):
        if self.sound:
            self.sound.stop()

        pygame.mixer.quit()
        super().shutdown()
