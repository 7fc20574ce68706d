"""Rating helpers."""


def round_rating(value: object) -> float:
    """Average rating as float rounded to two decimals; None -> 0.0.

    Drivers return AVG() as Decimal (PostgreSQL) or float (SQLite).
    """
    if value is None:
        return 0.0
    return round(float(value), 2)
