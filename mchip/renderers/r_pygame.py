#!/usr/bin/env python3

"""
PyGame Renderer Plugin

Draws framebuffer snapshots onto an SDL window surface via PyGame.  Note that
the surface is allocated at the size of the emulated screen, and then the
contents are stretched (in the correct aspect ratio using 'Nearest Neighbour'
translation) to fit the window itself.  This means we don't have to draw the
same pixel multiple times.

Two colours are used, one for unset pixels and one for set pixels.  Either can
be replaced with a user-defined palette.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import pygame
from .r_null import RendererError, Renderer as RendererBase
from ..constants import APP_NAME


class Renderer(RendererBase):
    def __init__(self, scale=None, pygame_palette=None, smoothing=0, **kwargs):
        if scale is None:
            scale = 512  # Default window width if not supplied, or set to default

        pygame.display.init()
        self.scaled_size = (scale, scale // 2)
        self.display_surface = pygame.display.set_mode(self.scaled_size, 0, 8)
        self.display_surface.set_alpha(None)
        self.smoothing = smoothing

        # Background, then foreground
        colour_map = [0x222222, 0xDDDDDD]

        # Override one (or both) of the colours with a user-defined palette, if necessary
        if pygame_palette is not None:
            pygame_palette_split = pygame_palette.split(",")

            if len(pygame_palette_split) > len(colour_map):
                raise RendererError("Too many palette colours defined.")

            for pygame_colour_num, pygame_colour in enumerate(pygame_palette_split):
                if len(pygame_colour) != 6:
                    raise RendererError("Palette colours must all be 6 hex digits long.")

                try:
                    colour_map[pygame_colour_num] = int(pygame_colour, 16)
                except ValueError:
                    raise RendererError("Invalid palette colour defined.") from None

        # Split compound RGB values for faster byte-based lookup later
        self.rgb_map = [bytes([i >> 16, (i >> 8) & 0xFF, i & 0xFF]) for i in colour_map]

        super().__init__(scale)
        self.set_title(APP_NAME)

    def render(self, grid):
        height = len(grid)
        width = len(grid[0]) if height else 0
        rgb_map = self.rgb_map

        # Build the RGB buffer in one go, then blit it straight to the surface.  This is far quicker than very
        # frequent PixelArray updates.
        rgb_buffer = b"".join(rgb_map[pixel] for row in grid for pixel in row)
        render_surface = pygame.image.frombuffer(rgb_buffer, (width, height), "RGB")

        # Apply Scale2x rendering passes if requested
        for _ in range(self.smoothing):
            render_surface = pygame.transform.scale2x(render_surface)

        scaled_win = pygame.transform.scale(render_surface, self.scaled_size)
        self.display_surface.blit(scaled_win, (0, 0))
        pygame.display.flip()
        super().render(grid)

    def set_title(self, title):
        pygame.display.set_caption(title)
        super().set_title(title)

    def shutdown(self):
        # PyGame currently segfaults if display.quit is called via __del__
        pygame.display.quit()
        super().shutdown()
