"""Application shell: logging tail and the `python -m app` entry."""
