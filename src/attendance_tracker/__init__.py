"""Attendance Tracker package.

Feature modules (subjects, calculator, storage, ...) wired through a small
container, with a thin Flask JSON controller on top of the service layer.
"""
