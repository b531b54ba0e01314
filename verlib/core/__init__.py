"""
Core: модель версии, грамматики, разбор, алгебра ограничений и JSON контракты.

Модули не имеют внешнего состояния и не выполняют I/O (кроме загрузки схем контрактов).
"""
