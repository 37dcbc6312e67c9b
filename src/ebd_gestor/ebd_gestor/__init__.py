"""EBD Gestor package.

Sunday-school (EBD) administration organized by feature modules (registry,
attendance, reports, frequency, ...) with a thin Flask controller layer on top
of plain service functions over immutable snapshots.
"""
