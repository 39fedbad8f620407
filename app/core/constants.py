# app/core/constants.py

# budget_history.action tags
HISTORY_CREATED = "created"
HISTORY_UPDATED = "updated"
HISTORY_DELETED = "deleted"
HISTORY_SUBMITTED = "submitted"
HISTORY_VALIDATED = "validated"
HISTORY_REJECTED = "rejected"

REPORT_KINDS = [
    "budget",
    "analysis",
]

# format -> file extension
REPORT_FORMATS = {
    "pdf": "pdf",
    "excel": "xlsx",
}

# |variance %| upper bounds
VARIANCE_COMPLIANT_MAX = 10
VARIANCE_ATTENTION_MAX = 25
