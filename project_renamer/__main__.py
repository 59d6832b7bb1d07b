import sys

from project_renamer.main import main

if __name__ == "__main__":
    sys.exit(main())
