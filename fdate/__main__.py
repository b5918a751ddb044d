"""
Prints the current date of the French Republican Calendar
"""

from argparse import ArgumentParser
from datetime import datetime
import sys

from . import __version__
from .republican_date import DEFAULT_FORMAT, RepublicanDate


def log(*args, **kw):
    kw.setdefault('file', sys.stderr)
    print(*args, **kw)


def usage(prog):
    log('fdate (%s)' % __version__)
    log('usage: %s [+format]' % prog)
    raise SystemExit(1)


def main(argv=None, now=None):
    p = ArgumentParser(prog='fdate', usage='%(prog)s [+format]', add_help=False)
    p.add_argument('format', nargs='*')
    args, unknown = p.parse_known_args(argv)

    if unknown:
        usage(p.prog)
    if not args.format:
        fmt = DEFAULT_FORMAT
    elif len(args.format) == 1 and args.format[0].startswith('+'):
        fmt = args.format[0][1:]
    else:
        usage(p.prog)

    if now is None:
        now = datetime.now()
    print(RepublicanDate.from_datetime(now).format_str(fmt))


if __name__ == '__main__':
    try:
        main()
    except KeyboardInterrupt:
        pass
