"""Module entry point for the console walkthrough."""

import sys

from counter_reducer_stack.walkthrough.counter_walkthrough import main

if __name__ == "__main__":
    sys.exit(main())
