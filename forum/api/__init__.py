# forum/api/__init__.py
