"""Staff Payroll package.

Attendance ledger, attendance summaries and the monthly payroll engine of the
ledger application, organised by feature modules (attendance, staff, payroll)
over pluggable repositories.
"""
