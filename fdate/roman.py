"""
Conversion of numbers to roman numerals
"""


NUMERALS = 'MDCLXVI'
QUOTIENTS = (2, 5, 2, 5, 2, 5)


def decimal_to_roman(i):
    """Returns the roman numeral of the non-negative integer `i`.

    This is the algorithm of TeX's `print_roman_int`: instead of looking up
    subtractive pairs in a table, it checks at each step whether a smaller
    numeral placed in front of the current one gets there with fewer symbols.

    >>> decimal_to_roman(1999)
    'MCMXCIX'
    >>> decimal_to_roman(0)
    ''
    """
    r = []
    j, v = 0, 1000
    while True:
        while i >= v:
            r.append(NUMERALS[j])
            i -= v
        if i <= 0:
            break
        k = j + 1
        u = v // QUOTIENTS[j]
        if QUOTIENTS[j] == 2:
            k += 1
            u //= QUOTIENTS[k - 1]
        if i + u >= v:
            r.append(NUMERALS[k])
            i += u
        else:
            v //= QUOTIENTS[j]
            j += 1
    return ''.join(r)
