"""Identifier formats for product registration."""

import re

# 24-character hex document id
HEX_ID_PATTERN = r"^[0-9a-fA-F]{24}$"
HEX_ID_REGEX = re.compile(HEX_ID_PATTERN)

# Registration number: prefix + YYYYMMDDHHMMSS
URN_TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"

# EOI: prefix + manufacturer initial + 3-digit internal id + 3-digit sequence
EOI_INTERNAL_ID_WIDTH = 3
EOI_SEQUENCE_WIDTH = 3
EOI_FALLBACK_INTERNAL_ID = "0" * EOI_INTERNAL_ID_WIDTH

# Digits after the last hyphen of a manufacturer's gp_internal_id ("GPSC-312" -> "312")
INTERNAL_ID_REGEX = re.compile(r"-(\d+)$")
