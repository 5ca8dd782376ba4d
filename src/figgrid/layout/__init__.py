"""Grid layout engine: normalized rectangles for cells, spans, colorbars and labels."""
