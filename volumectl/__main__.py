import sys

from volumectl.cli import cli

if __name__ == '__main__':
    sys.exit(cli())
