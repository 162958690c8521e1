"""Allow ``python -m warden``."""

from warden.cli.main import main

if __name__ == "__main__":
    main()
