"""
Central configuration for the console bank.

Business rules live here so the model, directory and CLI agree on them.
Money values are strings and are converted to Decimal where they are used.
"""

# --- Interest ---
STANDARD_MONTHLY_RATE = "0.005"  # simple interest per month
VIP_MONTHLY_RATE = "0.01"  # compounded per month

# --- Balances ---
MAX_BALANCE = "999999999999999.99"

# --- Access ---
PASSCODE_LENGTH = 4
DEFAULT_PASSCODE = "0000"

# --- Logging ---
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
