#!/usr/bin/env python3

"""
Host Loop

Paces the emulated machine against real time.  Once per 60Hz frame, the host
inputs are processed, the CPU is stepped a fixed number of times (the 'speed'),
the timers are ticked once, the tone state is passed to the audio plugin, and
the framebuffer is presented if anything was drawn.

The CPU itself has no idea how fast it is running.  Changing the speed here is
the only way to make programs run faster or slower.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from time import perf_counter
from .constants import APP_NAME, DEFAULT_SPEED, TICK_FREQ

FRAME_INTERVAL = 1.0 / TICK_FREQ


class Runner:
    def __init__(self, cpu, framebuffer, renderer, inputs, audio, speed=DEFAULT_SPEED):
        self.cpu = cpu
        self.framebuffer = framebuffer
        self.renderer = renderer
        self.inputs = inputs
        self.audio = audio
        self.speed = DEFAULT_SPEED if speed is None else speed

        # Performance-related vars
        self.perf_counter_fps = 0
        self.perf_counter_ops = 0
        self.next_perf_report_time = 0
        self.report_perf()

    def run(self):
        next_frame_time = perf_counter()

        while True:
            if self.run_frame():
                return

            # Wait for the next frame.  If the host has fallen behind, carry on straight away rather than trying to
            # catch up with a burst of frames.
            next_frame_time = max(next_frame_time + FRAME_INTERVAL, perf_counter())

            while perf_counter() < next_frame_time:  # Unfortunately we have to do this to get the timing right
                pass

    def run_frame(self):
        # Returns True if the host has asked to quit
        this_time = perf_counter()

        # Performance counters
        if this_time >= self.next_perf_report_time:
            self.next_perf_report_time = int(this_time) + 1.0
            self.report_perf(self.perf_counter_fps, self.perf_counter_ops)
            self.perf_counter_ops = 0
            self.perf_counter_fps = 0

        if self.inputs.process_messages():
            return True

        cpu = self.cpu

        for _ in range(self.speed):
            cpu.step()

        self.perf_counter_ops += self.speed
        self.audio.enable_buzzer(cpu.tick())

        if self.framebuffer.dirty:
            self.renderer.render(self.framebuffer.snapshot())
            self.framebuffer.mark_presented()

        self.perf_counter_fps += 1
        return False

    def report_perf(self, fps=0, ops=0):
        self.renderer.set_title("{} - {} FPS, {} OPS".format(APP_NAME, fps, ops))
