from setuptools import setup

# All configuration is now in pyproject.toml
# This setup.py is kept for backwards compatibility
setup(
    packages=["TM1model", "TM1model.Exceptions", "TM1model.Objects", "TM1model.Utils"],
)
