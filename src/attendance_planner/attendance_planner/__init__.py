"""Attendance Planner package.

Feature modules (projection, allocation, capacity, calculator) sit on top of
pure calculation code, with a thin Flask controller layer and service/repository
layers for the stored weekly schedules.
"""
