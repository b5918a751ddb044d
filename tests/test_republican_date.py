from datetime import datetime

import pytest

from fdate.republican_date import DEFAULT_FORMAT, RepublicanDate


FULL_FORMAT = "%%-%A-%B-%d-%H-%j-%J-%m-%M-%n-%S-%t-%u-%w-%W-%y-%Y-%k"


def test_format_all_directives():
    date = RepublicanDate((230, 3, 17), (5, 50, 99))
    assert date.format_str(FULL_FORMAT) == (
        "%-Septidi-Frimaire-17-5-77-Cyprès-3-50-\n-99-\t-7-2-II-230-CCXXX-"
    )


def test_format_is_repeatable():
    date = RepublicanDate((230, 3, 17), (5, 50, 99))
    assert date.format_str(FULL_FORMAT) == date.format_str(FULL_FORMAT)


def test_derived_fields():
    for month in range(1, 13):
        for day in range(1, 31):
            date = RepublicanDate((1, month, day), (0, 0, 0))
            assert date.decade == (day - 1) // 10 + 1
            assert date.rural == (month - 1) * 30 + day
            assert date.day_of_year == date.rural
            assert date.weekday == (day - 1) % 10 + 1
    for day in range(1, 7):
        date = RepublicanDate((3, 13, day), (0, 0, 0))
        assert date.decade == 0
        assert date.rural == 0
        assert date.day_of_year == 360 + day
        assert date.weekday == day


def test_last_day_of_a_decade():
    date = RepublicanDate((1, 1, 30), (0, 0, 0))
    assert date.decade == 3
    assert date.format_str('%u %A %w %W %J') == '10 Décadi 3 III Tonneau'


def test_sansculottides():
    for day in range(1, 7):
        date = RepublicanDate((3, 13, day), (0, 0, 0))
        assert date.format_str('[%J][%w][%W]') == '[][][]'
        assert date.format_str('%B %j') == 'Sansculottides %i' % (360 + day)
    assert RepublicanDate((2, 13, 1), (0, 0, 0)).format_str('%A') == 'La Fête de la Vertu'
    assert RepublicanDate((2, 13, 6), (0, 0, 0)).format_str('%A') == 'La Fête de la Révolution'


def test_negative_year():
    date = RepublicanDate((-12, 1, 1), (0, 0, 0))
    assert date.format_str('%y %Y') == '-12 -XII'


def test_unknown_directives_vanish():
    date = RepublicanDate((1, 1, 1), (0, 0, 0))
    assert date.format_str('a%kb%zc') == 'abc'
    assert date.format_str('end%') == 'end'
    assert date.format_str('%%%') == '%'
    assert date.format_str('') == ''


def test_from_gregorian():
    date = RepublicanDate.from_gregorian(1792, 9, 22)
    assert (date.year, date.month, date.day) == (1, 1, 1)
    assert date.format_str(DEFAULT_FORMAT) == "Primidi, 1 Vendémiaire an I (Raisin). 0h 0m 0s"


def test_from_datetime():
    date = RepublicanDate.from_datetime(datetime(1999, 1, 1, 21, 46, 43))
    assert date.time == (9, 7, 44)
    assert date == RepublicanDate.from_gregorian(1999, 1, 1, 21, 46, 43)


def test_copy_and_pickle():
    import copy
    import pickle
    date = RepublicanDate((230, 3, 17), (5, 50, 99))
    assert copy.copy(date) == date
    assert copy.deepcopy(date) == date
    assert pickle.loads(pickle.dumps(date)) == date
    assert type(pickle.loads(pickle.dumps(date))) is RepublicanDate


def test_replace_keeps_derived_fields_consistent():
    date = RepublicanDate((230, 3, 17), (5, 50, 99))
    sansculottide = date._replace(month=13, day=4)
    assert sansculottide == RepublicanDate((230, 13, 4), (5, 50, 99))
    assert sansculottide.decade == 0
    assert sansculottide.rural == 0
    assert date._replace(day=30).decade == 3
    assert date._replace(time=(1, 2, 3)).time == (1, 2, 3)
    assert RepublicanDate._make(date) == date
    with pytest.raises(ValueError):
        date._replace(decade=0)
