# engine/forecast/exceptions.py

class ForecastError(Exception):
    pass


class InvalidPeriodLabel(ForecastError, ValueError):
    pass
