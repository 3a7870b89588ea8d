"""
Test suite для complex-core

Contains:
- tests/unit/          : Unit tests для отдельных модулей
- tests/property/      : Property-based tests (Hypothesis) для инвариантов
"""
