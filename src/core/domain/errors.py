"""
Distribution Errors — таксономия ошибок построения последовательностей

- InvalidAverage: нарушены предусловия на (average, min, max).
  Фатально для вызова, повтор без изменения входов бессмысленен.
- Unsatisfiable: границы алгоритма делают сходимость невозможной
  (исчерпан headroom, значение ушло бы ниже min). Локально для алгоритма,
  вызывающий может перейти на другой алгоритм.
- NoConvergence: исчерпан бюджет итераций/шагов без точного попадания в
  среднее. Восстановимо увеличением бюджета или другим алгоритмом.

Ни один алгоритм не возвращает частичную последовательность при ошибке.
"""


class DistributionError(Exception):
    """Базовая ошибка построения последовательности."""
    pass


class InvalidAverage(DistributionError):
    """
    Нарушены предусловия на входные параметры.

    Возникает при:
    1. Целая часть average равна 0
    2. min == max или min > max
    3. average вне диапазона [min, max]
    4. average не имеет конечного десятичного представления
    """
    pass


class Unsatisfiable(DistributionError):
    """
    Ограничения алгоритма не позволяют достичь точного среднего.

    Атрибут algorithm содержит имя алгоритма (если известно).
    """

    def __init__(self, message: str, algorithm: str = ""):
        super().__init__(message)
        self.algorithm = algorithm


class NoConvergence(DistributionError):
    """
    Бюджет итераций исчерпан без сходимости.

    Атрибуты:
        algorithm: имя алгоритма
        iterations: выполненное число итераций/шагов
    """

    def __init__(self, message: str, algorithm: str = "", iterations: int = 0):
        super().__init__(message)
        self.algorithm = algorithm
        self.iterations = iterations
