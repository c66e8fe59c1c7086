"""Shop Attendance package.

Attendance and job logging for an auto-repair shop. Organized by feature
modules (attendance, jobs, hours, ...) with a thin Flask controller layer
over service/repository layers.
"""
