"""A maze-chase game whose walls are placed by a sweeping sensor grid."""

__version__ = "0.1.0"