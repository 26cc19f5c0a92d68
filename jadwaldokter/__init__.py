"""Doctor shift rostering: CSV roster storage, shift scheduling, schedule tables and a menu."""

__version__ = "0.1.0"