"""
The MODEL layer contains pure value types and math.
It has NO knowledge of any rendering surface and performs no I/O.
It deals with transforms, curve sampling, pane tiling and grid spacing.
"""
