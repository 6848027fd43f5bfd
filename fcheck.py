#!/usr/bin/env python
import sys

from docopt import docopt, DocoptExit

from errors import FcheckError, UsageError, USAGE
from fsck import check_image
from utils import debug_print, error_print

doc = USAGE


def parse_args(argv: list[str]) -> str:
    try:
        args = docopt(doc, argv, help=False)
    except DocoptExit:
        raise UsageError()
    return args['<file_system_image>']


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    try:
        image_path = parse_args(argv)
        debug_print(f"fcheck {image_path}")
        check_image(image_path)
    except FcheckError as error:
        error_print(error.diagnostic())
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
