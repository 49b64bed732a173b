"""Main module for feed_pages.

This module allows the aggregator to be run as a Python module using:
python -m feed_pages

It delegates to the command line application's main function.
"""

from feed_pages.cli.app import main

if __name__ == "__main__":
    main()
