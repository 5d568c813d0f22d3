"""Domain layer for the COLLADA writer.

This layer contains the element records (optics, transformations, asset,
scene graph) and the error taxonomy. It is independent of XML and I/O.
"""
