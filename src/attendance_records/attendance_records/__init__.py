"""Attendance Records package.

This package is organized by feature modules (attendance, database, ...)
with a thin Flask controller layer over service/repository layers.
"""
