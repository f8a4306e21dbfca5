"""INI and desktop-entry parsing, alias tables, input polling, layout and text drawing for a game launcher menu."""

__version__ = "0.1.0"