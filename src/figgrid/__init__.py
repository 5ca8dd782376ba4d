"""figgrid: place plot axes, colorbars and labels on a print-size figure grid."""

__version__ = "0.1.0"
