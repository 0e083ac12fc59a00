"""Static name tables and astronomical series."""
