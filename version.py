import re
from os.path import dirname, join


def get_version():
    with open(join(dirname(__file__), 'fdate', '__init__.py')) as f:
        return re.search(r"^__version__ = '([^']+)'", f.read(), re.M).group(1)
