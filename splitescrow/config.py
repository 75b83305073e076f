"""Process-wide constants for the split escrow template.

The template and its field table are read-only; every injection works on a
private copy of `SPLIT_TEMPLATE_BYTES`.
"""

import base64
import os

from splitescrow.template import FieldDescriptor, FieldKind, validate_fields

# compiled split.teal with placeholder constants
SPLIT_TEMPLATE = (
    "ASAIAQUCAAYHCAkmAyCztwQn0+DycN+vsk+vJWcsoz/b7NDS6i33HOkvTpf+YiC3qUpIgHGWE8/1LPh9SGCa"
    "lSN7IaITeeWSXbfsS5wsXyC4kBQ38Z8zcwWVAym4S8vpFB/c0XC6R4mnPi9EBADsPDEQIhIxASMMEDIEJBJA"
    "ABkxCSgSMQcyAxIQMQglEhAxAiEEDRAiQAAuMwAAMwEAEjEJMgMSEDMABykSEDMBByoSEDMACCEFCzMBCCEG"
    "CxIQMwAIIQcPEBA="
)
SPLIT_TEMPLATE_BYTES = base64.b64decode(SPLIT_TEMPLATE)

# order matters: make_split injects its arguments in this order
SPLIT_FIELDS = (
    FieldDescriptor("max_fee", 4, FieldKind.UINT),
    FieldDescriptor("expiry_round", 7, FieldKind.UINT),
    FieldDescriptor("ratn", 8, FieldKind.UINT),
    FieldDescriptor("ratd", 9, FieldKind.UINT),
    FieldDescriptor("min_pay", 10, FieldKind.UINT),
    FieldDescriptor("owner", 14, FieldKind.ADDRESS),
    FieldDescriptor("receiver_one", 47, FieldKind.ADDRESS),
    FieldDescriptor("receiver_two", 80, FieldKind.ADDRESS),
)

validate_fields(SPLIT_TEMPLATE_BYTES, SPLIT_FIELDS)

DEFAULT_RATN = 1
DEFAULT_RATD = 3
DEFAULT_EXPIRY_ROUND = 5000000
DEFAULT_MIN_PAY = 3000
DEFAULT_MAX_FEE = 2000
DEFAULT_FEE = 1000

LOG_LEVEL = os.environ.get("SPLITESCROW_LOG_LEVEL", "WARNING")
