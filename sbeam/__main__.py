import sys
import unittest


def run_tests():
    try:
        from sbeam import tests
    except ImportError:
        print("Error: Could not find the tests module.")
        print("Make sure sbeam is installed or run the command from the "
              "project's root directory.")
        sys.exit(1)

    loader = unittest.TestLoader()
    suite = loader.loadTestsFromModule(tests)

    # verbosity=0 only prints the summary.
    runner = unittest.TextTestRunner(verbosity=0)
    result = runner.run(suite)

    sys.exit(not result.wasSuccessful())


if __name__ == '__main__':
    if len(sys.argv) > 1 and sys.argv[1] == 'test':
        run_tests()
    else:
        print("Unknown command.")
        print("Usage: python -m sbeam test")
