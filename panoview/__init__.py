"""Camera, sphere mesh, frustum, shader-file, GL-name and ring-buffer helpers for a 360-degree panorama viewer."""

__version__ = "0.1.0"
__all__ = ["camera", "frustum", "glnames", "mesh", "ringbuffer", "shaders", "transforms"]