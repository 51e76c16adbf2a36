"""Rendering subpackage.

Turns a loaded skin texture into its front-view portrait. The renderer focuses
on:

* One reusable blit procedure driven by the regions of
  :mod:`skin_viewer.geometry`.
* Nearest-neighbor only; skins are pixel art and must never be smoothed.
* Lightweight Pillow compositing and data URL encoding.

See :mod:`skin_viewer.renderer.compose` for the composition routines.
"""

from skin_viewer.renderer.compose import blit, compose, encode_data_url

__all__ = ["blit", "compose", "encode_data_url"]
