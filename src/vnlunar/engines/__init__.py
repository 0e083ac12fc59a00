"""Year codes, lunar-year decoding and solar/lunar conversion."""
