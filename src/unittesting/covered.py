"""Small class used to demonstrate code coverage."""


class CoveredClass:
    def __init__(self, width: int = 0):
        self.width = width

    @property
    def area(self) -> int:
        return self.width * self.width

    @staticmethod
    def max(x: int, y: int) -> int:
        """Return the larger of two integers."""
        if x < y:
            return y
        return x

    @staticmethod
    def comma_separated(start: int, end: int) -> str:
        """Join the integers from start to end (inclusive) with commas."""
        return ",".join(str(i) for i in range(start, end + 1))
