"""Staff Console package.

Feature modules (employees, attendance, payroll, reports) each carry a domain
model, a repository interface with a key-value implementation, a service
layer and a thin Flask controller.
"""
