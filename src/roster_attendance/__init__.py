"""Roster attendance engine.

Feature modules (schedules, groups, enrollments, attendance) each carry a
domain model, a repository Protocol, a MySQL implementation and a service.
"""
