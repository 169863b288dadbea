"""
Входная точка: HTTP-роутер задач (http) и usecase-функции (usecases),
которые роутер и CLI-скрипты вызывают для каждой операции.
"""
