#!/usr/bin/env python3

"""
Host I/O Functionality

Handles loading program binaries for later writing into RAM.  Images are raw
bytes with no header, loaded as-is at the program start address.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class Loader:
    def load_binary(self, filename):
        with open(filename, "rb") as f:
            return f.read()
