"""Allow ``python -m image_converter``."""

from image_converter.cli.cli import main

if __name__ == "__main__":
    main()
