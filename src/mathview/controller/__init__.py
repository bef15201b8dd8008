"""
Camera & Viewport Control
=========================
The only stateful part of the engine.

Why is this package needed?
---------------------------
1. State: The CameraController owns the pan/zoom state of one interactive view
   and notifies listeners when it changes.
2. Resolution: The Viewport combines that state with the requested view box
   and the surface size into visible bounds and pixel conversions.
"""
