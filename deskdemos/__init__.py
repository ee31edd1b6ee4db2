"""Small worked examples of everyday desktop-application tasks: models, signals, streams, JSON, SQLite, XML and a snake game."""

__version__ = "0.1.0"