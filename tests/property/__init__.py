"""
Property-based тесты для комплексной арифметики.

Проверяют алгебраические инварианты на случайных конечных значениях
(Hypothesis):
- Коммутативность сложения и умножения
- Обратимость деления
- Principal branch sqrt
- Согласованность полярной формы и степеней
"""
