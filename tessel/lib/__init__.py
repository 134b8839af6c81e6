"""Library layer: engine, configuration and file handling."""
