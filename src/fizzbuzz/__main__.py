"""Allow ``python -m fizzbuzz``."""

from fizzbuzz.cli import main

main()
