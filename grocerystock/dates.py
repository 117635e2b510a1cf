"""Calendar helpers: leap years, day-of-year numbers and differences between them."""

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def leap_year(year: int) -> bool:
    """Return True if ``year`` is a Gregorian leap year."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def day_of_year(month: int, day: int, year: int) -> int:
    """Return the ordinal day within ``year`` for the given month and day."""
    if not 1 <= month <= 12:
        raise ValueError(f"month out of range: {month}")
    lengths = list(_DAYS_IN_MONTH)
    if leap_year(year):
        lengths[1] = 29
    return sum(lengths[: month - 1]) + day


def date_difference(day1: int, year1: int, day2: int, year2: int) -> int:
    """Return the number of days from (day2, year2) to (day1, year1).

    Days are day-of-year numbers; the result is negative when the first
    date lies before the second.
    """
    if year1 == year2:
        return day1 - day2
    if year1 < year2:
        return -date_difference(day2, year2, day1, year1)
    remaining_in_start = (366 if leap_year(year2) else 365) - day2
    full_years = sum(
        366 if leap_year(year) else 365 for year in range(year2 + 1, year1)
    )
    return remaining_in_start + full_years + day1