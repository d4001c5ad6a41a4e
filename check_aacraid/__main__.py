"""Allow running the probe with ``python -m check_aacraid``."""

from .main import main

if __name__ == '__main__':
    main()
