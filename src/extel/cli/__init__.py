# src/extel/cli/__init__.py
