import os
from os.path import join, dirname

from setuptools import setup, find_packages

from version import get_version

os.umask(0o022)

setup(
    name='fdate',
    version=get_version(),
    description="Prints dates of the French Republican Calendar, with decimal time",
    license='CC0',
    packages=find_packages(exclude=['tests']),
    long_description="Converts Gregorian dates to the French Republican Calendar "
                     "and formats them with strftime-like directives.",
    install_requires=open(join(dirname(__file__), 'requirements.txt')).read(),
    extras_require={'test': ['pytest']},
    entry_points={'console_scripts': ['fdate = fdate.__main__:main']},
    keywords='calendar french republican revolution decimal time',
    include_package_data=True,
    zip_safe=False,
)
