"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

PAYROLL_BASIS_DAYS = 30
DEFAULT_STANDARD_HOURS = 10
DEFAULT_OVERTIME_UNIT_HOURS = 2
FIRST_PAYROLL_YEAR = 2023
CURRENCY_SYMBOL = "₹"

PROFESSIONAL_TAX_RATE = 0.02
EMPLOYER_PF_RATE = 0.12
SERVICE_TAX_RATE = 0.18

HIGH_ABSENTEEISM_DAYS = 4
MODERATE_ABSENTEEISM_DAYS = 2

# Leave ranking risk bands
HIGH_RISK_LEAVE_DAYS = 5
MODERATE_RISK_LEAVE_DAYS = 2

MONTH_NAMES = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]

# Storage keys shared with the browser console's local storage layout.
EMPLOYEES_KEY = "v_v_employees"
ATTENDANCE_KEY = "v_v_attendance"
LOCKED_PAYROLLS_KEY = "locked_payrolls"
CONFIRMED_PAYROLLS_KEY = "confirmed_individual_payrolls"
