"""Preview package.

Headless stand-ins for the host: breath clock, particle field, frame runner.
None of this is needed to embed the word engine.
"""
