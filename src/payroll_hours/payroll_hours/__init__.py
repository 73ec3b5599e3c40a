"""Payroll hours package.

Turns clock punches, approved leave and a holiday calendar into per-day
payroll records and monthly per-employee summaries. Organised by feature
modules (holidays, attendance, leave, employees, payroll) with pure domain
logic and Protocol repositories at the data boundary.
"""
