"""asciigrid - Render shape outlines as ASCII art.

asciigrid draws the outlines of simple shapes (dots, vertical lines, squares and
rectangles) onto a character grid sized to fit them. Each shape enumerates its
own outline through a begin/next traversal; the render pipeline collects the
points, computes their bounding frame, paints them onto a canvas and prints it
row by row.

Example:
    $ asciigrid -s rect:10,5,20,10 -s dot:2,2
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
