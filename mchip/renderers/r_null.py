#!/usr/bin/env python3

"""
Null Renderer Plugin

This serves as a base class for other rendering plugins.

This module can be used on its own as a Renderer plugin if nothing needs to be
seen.  Without a renderer, performance data will also not be shown.  The last
grid presented is kept, so the null renderer can also be inspected in tests.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class RendererError(Exception):
    pass


class Renderer:
    def __init__(self, scale=None, **kwargs):  # pylint: disable=unused-argument
        self.scale = 1 if scale is None else scale
        self.grid = None
        self.frames_rendered = 0
        self.title = ""

    def render(self, grid):
        # Present a full snapshot of the framebuffer (rows of 0/1 pixels)
        self.grid = grid
        self.frames_rendered += 1

    def set_title(self, title):
        self.title = title

    def shutdown(self):
        pass
