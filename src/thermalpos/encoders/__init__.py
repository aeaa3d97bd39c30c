"""Command encoders for text attributes, symbols, barcodes and images."""
