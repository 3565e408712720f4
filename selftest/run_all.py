"""Run all selftests.

Usage:
  python -m selftest.run_all
"""

import importlib
import traceback


TEST_MODULES = [
    'selftest.test_word_layout',
    'selftest.test_particle_recruit',
    'selftest.test_word_scheduler',
    'selftest.test_formation_timeline',
    'selftest.test_word_formation',
    'selftest.test_breath_clock',
    'selftest.test_headless',
    'selftest.test_log_buffer',
]


def main():
    failures = []
    for modname in TEST_MODULES:
        try:
            m = importlib.import_module(modname)
            if hasattr(m, "main") and callable(getattr(m, "main")):
                m.main()
        except Exception as e:
            traceback.print_exc()
            failures.append((modname, e))

    if failures:
        print("\nFAILED:")
        for modname, e in failures:
            print(f"- {modname}: {type(e).__name__}: {e}")
        raise SystemExit(1)

    print("\nOK: all selftests passed")


if __name__ == "__main__":
    main()
