"""Timecard package.

This package is organized by feature modules (records, timesheet, export, ...)
with a thin Flask controller layer and service/repository layers.
"""
