"""Classroom attendance tracker package.

This package is organized by feature modules (teachers, students, attendance,
reports) over a snapshot record store, with a thin Flask controller layer on
top of the service classes.
"""
