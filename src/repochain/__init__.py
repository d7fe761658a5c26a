"""repochain - repository declarations turned into an ordered resolver chain."""

__version__ = "0.1.0"
