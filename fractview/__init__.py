"""Interactive viewer for the Mandelbrot, Julia and Phoenix fractals."""

__version__ = "0.1.0"