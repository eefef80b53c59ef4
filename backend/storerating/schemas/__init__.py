# storerating/schemas/__init__.py
"""
Schema module initialization.
Exports all schema classes from submodules for convenient imports.
"""
from .auth import *
from .user import *
from .admin import *
from .store import *
from .rating import *
