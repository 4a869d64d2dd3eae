"""Domain layer — pure date functions over UTC instants.

This layer depends only on stdlib, pendulum and python-dateutil.
It must never import from i18n, config, commands or output.
"""
