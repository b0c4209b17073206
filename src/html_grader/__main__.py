import sys

from html_grader.app import main

if __name__ == "__main__":
    sys.exit(main())
