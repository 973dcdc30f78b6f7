"""HRMS attendance backend.

Feature modules (attendance, leaves, employees, swipes, payroll) each carry a
model, a repository protocol with a MySQL implementation, a service and a thin
Flask controller.
"""
