# backend/mfg_api/domain/constants.py

"""
Single source for the enumerated values and table identifiers of the store.
"""

from typing import Final, Literal

# Customer / Supplier
PARTNER_STATUSES: Final[tuple] = ("Active", "Inactive")
PartnerStatus = Literal["Active", "Inactive"]

# Defect
DEFECT_STATUSES: Final[tuple] = ("Open", "In Progress", "Resolved", "Closed")
DEFECT_SEVERITIES: Final[tuple] = ("Low", "Medium", "High", "Critical")
DefectStatus = Literal["Open", "In Progress", "Resolved", "Closed"]
DefectSeverity = Literal["Low", "Medium", "High", "Critical"]

# Change feed event types
EVENT_INSERT: Final[str] = "INSERT"
EVENT_UPDATE: Final[str] = "UPDATE"
EVENT_DELETE: Final[str] = "DELETE"

# Columns the store assigns; never writable through the API
READ_ONLY_COLUMNS: Final[tuple] = ("id", "created_at")
