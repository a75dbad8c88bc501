"""Global configuration for ShareSolver."""

import string

# ---------- Radix decoding ----------
MIN_BASE = 2
MAX_BASE = 36

# Canonical digit alphabet; letters are matched case-insensitively.
DIGITS = string.digits + string.ascii_lowercase  # "0123456789abcdefghijklmnopqrstuvwxyz"

# ---------- Share documents ----------
KEYS_FIELD = "keys"
BASE_FIELD = "base"
VALUE_FIELD = "value"
DOCUMENT_ENCODING = "utf-8"
