"""
Пакет core – таймер и ввод.
"""
