"""Command modules for legibility-tool.

Every .py file in this package that defines a `command` object is
auto-registered by legibility_checker.registry.discover(). The module
docstring doubles as the command's `help` text.
"""
