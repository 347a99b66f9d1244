"""Timesheet Reports package.

Organized by feature modules (ingest, absence, audit, allowance, allocation)
with a thin Flask controller layer over pure report services.
"""
