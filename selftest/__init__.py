"""Selftests for the word formation engine.

Each module runs standalone (`python -m selftest.test_word_layout`) and is also
collected by pytest.
"""
