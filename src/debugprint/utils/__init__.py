"""Module-level helpers built on the core printers."""
