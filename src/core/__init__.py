"""
Core: параметрический тип комплексного числа и численные алгоритмы.

Модуль не зависит от внешних систем: только numpy для IEEE scalar'ов
трёх точностей и pydantic для валидации спецификаторов формата.
"""
