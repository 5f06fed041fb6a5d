"""
Development-environment probe.

Reads CONSOLER_ENV (falling back to PYTHON_ENV). Values 'development' and
'dev' (any case) declare a development environment. The facade reads the
probe once at construction and never again.
"""

import os


ENV_VARS = ('CONSOLER_ENV', 'PYTHON_ENV')
DEVELOPMENT_VALUES = {'development', 'dev'}


def is_development(environ=None) -> bool:
    environ = os.environ if environ is None else environ
    for var in ENV_VARS:
        value = environ.get(var)
        if value:
            return value.strip().lower() in DEVELOPMENT_VALUES
    return False
