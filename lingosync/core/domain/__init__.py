# lingosync\core\domain\__init__.py
"""
Domain entities, value objects and domain exceptions.
"""
