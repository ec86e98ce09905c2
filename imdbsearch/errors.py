class DataAccessFailure(Exception):
    """
    Единственный тип ошибки доступа к данным.

    Бросается, когда драйвер не смог подключиться, выполнить запрос
    или прочитать результат. Исходное исключение лежит в __cause__.
    """
    pass
