"""Allowance System package.

This package is organized by feature modules (allowances, calendar, ...)
with a thin Flask controller layer and service/repository layers around a
pure stipend calculation engine.
"""
