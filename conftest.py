"""Configuration and injectable fixtures for Pytest.

DI and functions over complex inheritance hierarchies FTW!
"""
import os
import warnings

pytest_plugins = ["studentquiz.testing.fixtures"]

if os.environ.get("FAIL_ON_WARNINGS"):
    warnings.simplefilter("error")
